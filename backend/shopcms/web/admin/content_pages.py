from flask import flash

from shopcms.application.content.faqs import (
    create_faq,
    create_faq_category,
    delete_faq,
    delete_faq_category,
    list_faq_categories,
    update_faq,
    update_faq_category,
)
from shopcms.application.content.page_configs import page_config
from shopcms.application.content.page_sections import (
    editor_sections,
    update_contact_page,
    update_page_sections,
)
from shopcms.inertia import redirect_back, render_page
from shopcms.normalizers.content import normalize_faq_category, sections_by_key
from shopcms.utils.decorators import admin_required
from shopcms.utils.forms import keyed_uploads, request_payload, require_method_override
from . import admin_bp

FAQS_URL = "/admin/content-pages/faqs"


# ------------------------
# Contact page
# ------------------------

@admin_bp.route("/content-pages/contact", methods=["GET"])
@admin_required
def contact_page_edit():
    return render_page("admin/content-pages/contact", {
        "content": sections_by_key(editor_sections("contact")),
    })


@admin_bp.route("/content-pages/contact", methods=["POST"])
@admin_required
def contact_page_update():
    update_contact_page(data=request_payload())
    flash("Contact page content updated successfully", "success")
    return redirect_back("/admin/content-pages/contact")


# ------------------------
# FAQs
# ------------------------

@admin_bp.route("/content-pages/faqs", methods=["GET"])
@admin_required
def faqs_index():
    return render_page("admin/content-pages/faqs", {
        "categories": [normalize_faq_category(category) for category in list_faq_categories()],
        "content": sections_by_key(editor_sections("faqs")),
    })


@admin_bp.route("/content-pages/faqs/categories", methods=["POST"])
@admin_required
def faq_categories_store():
    create_faq_category(data=request_payload())
    flash("FAQ category created successfully", "success")
    return redirect_back(FAQS_URL)


@admin_bp.route("/content-pages/faqs/categories/<category_id>", methods=["PUT", "POST"])
@admin_required
def faq_categories_update(category_id):
    require_method_override("PUT")
    update_faq_category(category_id=category_id, data=request_payload())
    flash("FAQ category updated successfully", "success")
    return redirect_back(FAQS_URL)


@admin_bp.route("/content-pages/faqs/categories/<category_id>", methods=["DELETE"])
@admin_required
def faq_categories_destroy(category_id):
    delete_faq_category(category_id=category_id)
    flash("FAQ category deleted successfully", "success")
    return redirect_back(FAQS_URL)


@admin_bp.route("/content-pages/faqs", methods=["POST"])
@admin_required
def faqs_store():
    create_faq(data=request_payload())
    flash("FAQ created successfully", "success")
    return redirect_back(FAQS_URL)


@admin_bp.route("/content-pages/faqs/<faq_id>", methods=["PUT", "POST"])
@admin_required
def faqs_update(faq_id):
    require_method_override("PUT")
    update_faq(faq_id=faq_id, data=request_payload())
    flash("FAQ updated successfully", "success")
    return redirect_back(FAQS_URL)


@admin_bp.route("/content-pages/faqs/<faq_id>", methods=["DELETE"])
@admin_required
def faqs_destroy(faq_id):
    delete_faq(faq_id=faq_id)
    flash("FAQ deleted successfully", "success")
    return redirect_back(FAQS_URL)


# ------------------------
# Help and generic section editors
# ------------------------

@admin_bp.route("/content-pages/<page_slug>", methods=["GET"])
@admin_required
def page_sections_edit(page_slug):
    content = sections_by_key(editor_sections(page_slug))

    if page_slug == "help":
        return render_page("admin/content-pages/help", {"content": content})

    return render_page("admin/content-pages/generic", {
        "pageSlug": page_slug,
        "pageConfig": page_config(page_slug),
        "content": content,
    })


@admin_bp.route("/content-pages/<page_slug>", methods=["POST"])
@admin_required
def page_sections_update(page_slug):
    update_page_sections(
        page_slug=page_slug,
        data=request_payload(),
        images=keyed_uploads("sections"),
    )
    flash(f"{page_slug.capitalize()} page content updated successfully", "success")
    return redirect_back(f"/admin/content-pages/{page_slug}")
