from flask import flash

from shopcms.application.content.pages import create_page, delete_page, list_pages, update_page
from shopcms.inertia import redirect_back, render_page
from shopcms.normalizers.content import normalize_page
from shopcms.utils.decorators import admin_required
from shopcms.utils.forms import request_payload, require_method_override
from . import admin_bp


@admin_bp.route("/pages", methods=["GET"])
@admin_required
def pages_index():
    return render_page("admin/pages/index", {
        "pages": [normalize_page(page) for page in list_pages()],
    })


@admin_bp.route("/pages", methods=["POST"])
@admin_required
def pages_store():
    create_page(data=request_payload())
    flash("Page created successfully", "success")
    return redirect_back("/admin/pages")


@admin_bp.route("/pages/<page_id>", methods=["PUT", "POST"])
@admin_required
def pages_update(page_id):
    require_method_override("PUT")
    update_page(page_id=page_id, data=request_payload())
    flash("Page updated successfully", "success")
    return redirect_back("/admin/pages")


@admin_bp.route("/pages/<page_id>", methods=["DELETE"])
@admin_required
def pages_destroy(page_id):
    delete_page(page_id=page_id)
    flash("Page deleted successfully", "success")
    return redirect_back("/admin/pages")
