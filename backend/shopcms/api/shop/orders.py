from flask import jsonify

from shopcms.application.orders.place_order import place_order
from shopcms.extensions import csrf
from shopcms.normalizers.order import normalize_order
from shopcms.utils.forms import request_payload
from . import shop_api_bp


@shop_api_bp.route("/orders", methods=["POST"])
@csrf.exempt
def create_order():
    """
    Guest checkout order submission.

    Validation failures surface as 422 {message, errors} through the
    application error handlers.
    """
    order = place_order(data=request_payload())

    return jsonify({
        "message": "Order created successfully",
        "order_number": order.order_number,
        "order": normalize_order(order),
    }), 201
