from flask import request

from shopcms.application.catalog.categories import active_categories
from shopcms.application.catalog.products import storefront_products
from shopcms.inertia import render_page
from shopcms.models.product import Product
from shopcms.normalizers.catalog import normalize_category, normalize_product
from . import storefront_bp


@storefront_bp.route("/products", methods=["GET"])
def products_index():
    category = request.args.get("category", "")

    return render_page("products/index", {
        "products": [normalize_product(product) for product in storefront_products(category_slug=category)],
        "categories": [normalize_category(item) for item in active_categories()],
        "filters": {"category": category},
    })


@storefront_bp.route("/products/<slug>", methods=["GET"])
def products_show(slug):
    product = Product.query.filter_by(slug=slug, is_active=True).first_or_404()
    return render_page("products/show", {"product": normalize_product(product)})
