from flask import current_app, flash, redirect, request

from shopcms.application.orders.manage_orders import (
    delete_order,
    get_order,
    list_orders,
    order_stats,
    update_order,
    update_order_status,
    update_payment_status,
)
from shopcms.inertia import redirect_back, render_page
from shopcms.models.order import ORDER_STATUSES, PAYMENT_STATUSES
from shopcms.normalizers.order import normalize_order
from shopcms.normalizers.pagination import normalize_page
from shopcms.utils.decorators import admin_required
from shopcms.utils.forms import request_payload, require_method_override
from . import admin_bp


@admin_bp.route("/orders", methods=["GET"])
@admin_required
def orders_index():
    filters = {
        "search": request.args.get("search", ""),
        "status": request.args.get("status", "all"),
        "payment_status": request.args.get("payment_status", "all"),
    }

    pagination = list_orders(
        **filters,
        page=request.args.get("page"),
        per_page=current_app.config["ORDERS_PER_PAGE"],
    )

    return render_page("admin/orders/index", {
        "orders": normalize_page(pagination, lambda order: normalize_order(order, with_items=False)),
        "stats": order_stats(),
        "filters": filters,
        "statuses": list(ORDER_STATUSES),
        "payment_statuses": list(PAYMENT_STATUSES),
    })


@admin_bp.route("/orders/<order_id>", methods=["GET"])
@admin_required
def orders_show(order_id):
    return render_page("admin/orders/show", {"order": normalize_order(get_order(order_id))})


@admin_bp.route("/orders/<order_id>", methods=["PUT", "POST"])
@admin_required
def orders_update(order_id):
    require_method_override("PUT")
    update_order(order_id=order_id, data=request_payload())
    flash("Order updated successfully", "success")
    return redirect_back(f"/admin/orders/{order_id}")


@admin_bp.route("/orders/<order_id>/status", methods=["PUT", "POST"])
@admin_required
def orders_update_status(order_id):
    require_method_override("PUT")
    update_order_status(order_id=order_id, data=request_payload())
    flash("Order status updated successfully", "success")
    return redirect_back(f"/admin/orders/{order_id}")


@admin_bp.route("/orders/<order_id>/payment-status", methods=["PUT", "POST"])
@admin_required
def orders_update_payment_status(order_id):
    require_method_override("PUT")
    update_payment_status(order_id=order_id, data=request_payload())
    flash("Payment status updated successfully", "success")
    return redirect_back(f"/admin/orders/{order_id}")


@admin_bp.route("/orders/<order_id>", methods=["DELETE"])
@admin_required
def orders_destroy(order_id):
    delete_order(order_id=order_id)
    flash("Order deleted successfully", "success")
    return redirect("/admin/orders")
