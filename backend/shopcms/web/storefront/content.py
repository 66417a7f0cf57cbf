from flask import flash

from shopcms.application.content.faqs import faq_categories_for_page
from shopcms.application.content.page_sections import page_content
from shopcms.application.content.pages import get_active_page
from shopcms.application.messages.contact_messages import submit_contact_message
from shopcms.inertia import redirect_back, render_page
from shopcms.normalizers.content import normalize_faq_category, normalize_page, sections_by_key
from shopcms.utils.forms import request_payload
from . import storefront_bp


def _faq_categories(page_slug):
    return [
        normalize_faq_category(category, active_only=True)
        for category in faq_categories_for_page(page_slug)
    ]


@storefront_bp.route("/contact", methods=["GET"])
def contact():
    return render_page("contact", {"content": sections_by_key(page_content("contact"))})


@storefront_bp.route("/contact", methods=["POST"])
def contact_submit():
    submit_contact_message(data=request_payload())
    flash("Thank you for your message. We will get back to you soon!", "success")
    return redirect_back("/contact")


@storefront_bp.route("/help", methods=["GET"])
def help_center():
    return render_page("help", {
        "faqCategories": _faq_categories("help"),
        "content": sections_by_key(page_content("help")),
    })


@storefront_bp.route("/faqs", methods=["GET"])
def faqs():
    return render_page("faqs", {
        "faqCategories": _faq_categories("faqs"),
        "content": sections_by_key(page_content("faqs")),
    })


@storefront_bp.route("/pages/<slug>", methods=["GET"])
def page(slug):
    return render_page("page", {
        "page": normalize_page(get_active_page(slug)),
        "content": sections_by_key(page_content(slug)),
    })
