from flask import flash

from shopcms.application.content.feature_cards import (
    create_feature_card,
    delete_feature_card,
    list_feature_cards,
    reorder_feature_cards,
    update_feature_card,
)
from shopcms.inertia import redirect_back, render_page
from shopcms.normalizers.content import normalize_feature_card
from shopcms.utils.decorators import admin_required
from shopcms.utils.forms import request_payload, require_method_override
from . import admin_bp


@admin_bp.route("/features", methods=["GET"])
@admin_required
def features_index():
    return render_page("admin/features/index", {
        "features": [normalize_feature_card(card) for card in list_feature_cards()],
    })


@admin_bp.route("/features", methods=["POST"])
@admin_required
def features_store():
    create_feature_card(data=request_payload())
    flash("Feature card created successfully", "success")
    return redirect_back("/admin/features")


@admin_bp.route("/features/reorder", methods=["POST"])
@admin_required
def features_reorder():
    reorder_feature_cards(data=request_payload())
    flash("Feature cards reordered successfully", "success")
    return redirect_back("/admin/features")


@admin_bp.route("/features/<card_id>", methods=["PUT", "POST"])
@admin_required
def features_update(card_id):
    require_method_override("PUT")
    update_feature_card(card_id=card_id, data=request_payload())
    flash("Feature card updated successfully", "success")
    return redirect_back("/admin/features")


@admin_bp.route("/features/<card_id>", methods=["DELETE"])
@admin_required
def features_destroy(card_id):
    delete_feature_card(card_id=card_id)
    flash("Feature card deleted successfully", "success")
    return redirect_back("/admin/features")
