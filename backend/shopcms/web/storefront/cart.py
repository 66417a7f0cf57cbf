from flask import flash, request, session

from shopcms.application.catalog.cart import (
    add_to_cart,
    clear_cart,
    remove_from_cart,
    update_cart_item,
)
from shopcms.domain.checkout.cart import Cart
from shopcms.inertia import redirect_back, render_page
from shopcms.utils.forms import request_payload, require_method_override
from . import storefront_bp


@storefront_bp.route("/cart", methods=["GET"])
def cart_show():
    return render_page("cart", {"cart": Cart.from_session(session).to_dict()})


@storefront_bp.route("/cart/items", methods=["POST"])
def cart_add():
    payload = request_payload()
    cart = add_to_cart(session, product_id=payload.get("product_id"))
    flash(f"Added to cart ({cart.total_items} items)", "success")
    return redirect_back("/cart")


@storefront_bp.route("/cart/items/<product_id>", methods=["PUT", "PATCH", "POST"])
def cart_update(product_id):
    if request.method == "POST":
        require_method_override("PUT")

    payload = request_payload()
    try:
        quantity = int(payload.get("quantity") or 0)
    except (TypeError, ValueError):
        quantity = 0

    update_cart_item(session, product_id=product_id, quantity=quantity)
    return redirect_back("/cart")


@storefront_bp.route("/cart/items/<product_id>", methods=["DELETE"])
def cart_remove(product_id):
    remove_from_cart(session, product_id=product_id)
    return redirect_back("/cart")


@storefront_bp.route("/cart", methods=["DELETE"])
def cart_clear():
    clear_cart(session)
    return redirect_back("/cart")
