from typing import Optional

from shopcms.domain.checkout.cart import Cart
from shopcms.models.product import Product
from shopcms.utils.media import media_url


def add_to_cart(session, *, product_id: str) -> Cart:
    """Only active products can be added; price is the current display price."""
    product = Product.query.filter_by(id=product_id, is_active=True).first_or_404()

    cart = Cart.from_session(session)
    cart.add_item(
        product_id=product.id,
        name=product.name,
        price=float(product.display_price),
        image=media_url(product.primary_image),
    )
    cart.save(session)
    return cart


def update_cart_item(session, *, product_id: str, quantity: Optional[int]) -> Cart:
    cart = Cart.from_session(session)
    cart.update_quantity(product_id, quantity or 0)
    cart.save(session)
    return cart


def remove_from_cart(session, *, product_id: str) -> Cart:
    cart = Cart.from_session(session)
    cart.remove_item(product_id)
    cart.save(session)
    return cart


def clear_cart(session) -> Cart:
    cart = Cart.from_session(session)
    cart.clear()
    cart.save(session)
    return cart
