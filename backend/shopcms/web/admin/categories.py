from flask import current_app, flash, jsonify, request

from shopcms.application.catalog.categories import (
    active_categories,
    create_category,
    delete_category,
    list_categories,
    reorder_categories,
    update_category,
)
from shopcms.inertia import redirect_back, render_page
from shopcms.models.category import Category
from shopcms.normalizers.catalog import normalize_category
from shopcms.normalizers.pagination import normalize_page
from shopcms.utils.decorators import admin_required
from shopcms.utils.forms import request_payload, require_method_override, uploaded_file
from . import admin_bp


@admin_bp.route("/categories", methods=["GET"])
@admin_required
def categories_index():
    search = request.args.get("search", "")
    status = request.args.get("status", "all")

    pagination, counts = list_categories(
        search=search,
        status=status,
        page=request.args.get("page"),
        per_page=current_app.config["CATEGORIES_PER_PAGE"],
    )

    return render_page("admin/categories/index", {
        "categories": normalize_page(
            pagination,
            lambda category: normalize_category(
                category, with_parent=True, products_count=counts.get(category.id, 0)
            ),
        ),
        "parents": [normalize_category(category) for category in active_categories()],
        "filters": {"search": search, "status": status},
    })


@admin_bp.route("/categories/list", methods=["GET"])
@admin_required
def categories_list():
    categories = Category.query.order_by(Category.order, Category.name).all()
    return jsonify([normalize_category(category, with_parent=True) for category in categories])


@admin_bp.route("/categories", methods=["POST"])
@admin_required
def categories_store():
    create_category(data=request_payload(), image=uploaded_file("image"))
    flash("Category created successfully", "success")
    return redirect_back("/admin/categories")


@admin_bp.route("/categories/reorder", methods=["POST"])
@admin_required
def categories_reorder():
    reorder_categories(data=request_payload())
    flash("Categories reordered successfully", "success")
    return redirect_back("/admin/categories")


@admin_bp.route("/categories/<category_id>", methods=["PUT", "POST"])
@admin_required
def categories_update(category_id):
    require_method_override("PUT")
    update_category(category_id=category_id, data=request_payload(), image=uploaded_file("image"))
    flash("Category updated successfully", "success")
    return redirect_back("/admin/categories")


@admin_bp.route("/categories/<category_id>", methods=["DELETE"])
@admin_required
def categories_destroy(category_id):
    delete_category(category_id=category_id)
    flash("Category deleted successfully", "success")
    return redirect_back("/admin/categories")
