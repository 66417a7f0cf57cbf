from flask import flash, redirect, session

from shopcms.application.checkout.checkout import (
    open_checkout,
    return_to_details,
    submit_checkout_details,
    submit_checkout_payment,
)
from shopcms.application.orders.manage_orders import get_order_by_number
from shopcms.inertia import render_page, share_errors
from shopcms.models.order import PAYMENT_METHODS
from shopcms.normalizers.order import normalize_order
from shopcms.utils.forms import request_payload
from . import storefront_bp

CHECKOUT_URL = "/checkout"


def _respond(flow):
    """Turns a flow outcome into flash messages, shared errors and a redirect."""
    for toast in flow.toasts:
        flash(toast["message"], toast["type"])

    if flow.errors:
        share_errors(flow.errors)

    return redirect(flow.redirect_to or CHECKOUT_URL)


@storefront_bp.route("/checkout", methods=["GET"])
def checkout_show():
    flow, cart = open_checkout(session)

    return render_page("checkout", {
        "cart": cart.to_dict(),
        "checkout": flow.snapshot(),
        "paymentMethods": list(PAYMENT_METHODS),
    })


@storefront_bp.route("/checkout/details", methods=["POST"])
def checkout_details():
    return _respond(submit_checkout_details(session, request_payload()))


@storefront_bp.route("/checkout/payment", methods=["POST"])
def checkout_payment():
    return _respond(submit_checkout_payment(session, request_payload()))


@storefront_bp.route("/checkout/back", methods=["POST"])
def checkout_back():
    return _respond(return_to_details(session))


@storefront_bp.route("/order-confirmation/<order_number>", methods=["GET"])
def order_confirmation(order_number):
    order = get_order_by_number(order_number)
    return render_page("order-confirmation", {"order": normalize_order(order)})
