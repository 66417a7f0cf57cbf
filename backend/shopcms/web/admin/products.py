from flask import flash, jsonify

from shopcms.application.catalog.categories import active_categories
from shopcms.application.catalog.products import (
    create_product,
    delete_product,
    list_products,
    update_product,
)
from shopcms.inertia import redirect_back, render_page
from shopcms.normalizers.catalog import normalize_category, normalize_product
from shopcms.utils.decorators import admin_required
from shopcms.utils.forms import request_payload, require_method_override, uploaded_files
from . import admin_bp


@admin_bp.route("/products", methods=["GET"])
@admin_required
def products_index():
    return render_page("admin/products/index", {
        "products": [normalize_product(product) for product in list_products()],
        "categories": [normalize_category(category) for category in active_categories()],
    })


@admin_bp.route("/products/list", methods=["GET"])
@admin_required
def products_list():
    return jsonify([normalize_product(product) for product in list_products()])


@admin_bp.route("/products", methods=["POST"])
@admin_required
def products_store():
    create_product(data=request_payload(), images=uploaded_files("images"))
    flash("Product created successfully", "success")
    return redirect_back("/admin/products")


@admin_bp.route("/products/<product_id>", methods=["PUT", "POST"])
@admin_required
def products_update(product_id):
    require_method_override("PUT")
    update_product(product_id=product_id, data=request_payload(), images=uploaded_files("images"))
    flash("Product updated successfully", "success")
    return redirect_back("/admin/products")


@admin_bp.route("/products/<product_id>", methods=["DELETE"])
@admin_required
def products_destroy(product_id):
    delete_product(product_id=product_id)
    flash("Product deleted successfully", "success")
    return redirect_back("/admin/products")
