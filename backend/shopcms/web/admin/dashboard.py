from shopcms.application.dashboard.summary import dashboard_summary
from shopcms.inertia import render_page
from shopcms.normalizers.order import normalize_order
from shopcms.utils.decorators import admin_required
from . import admin_bp


@admin_bp.route("", methods=["GET"])
@admin_bp.route("/dashboard", methods=["GET"])
@admin_required
def dashboard():
    summary = dashboard_summary()

    return render_page("admin/dashboard", {
        "stats": summary["stats"],
        "latest_orders": [
            normalize_order(order, with_items=False) for order in summary["latest_orders"]
        ],
    })
