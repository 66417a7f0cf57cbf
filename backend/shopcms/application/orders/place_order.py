from decimal import Decimal
from typing import Any, Dict

from flask import current_app
from sqlalchemy.exc import IntegrityError

from shopcms.application.notifications.mail import send_order_confirmation
from shopcms.domain.invariants.order import assert_order_items
from shopcms.domain.lifecycle.order import generate_order_number, initial_payment_status
from shopcms.extensions import db
from shopcms.models.order import Order, OrderItem
from shopcms.models.product import Product
from shopcms.schemas.orders import PlaceOrderForm
from shopcms.utils.transaction import transactional
from shopcms.utils.validation import ValidationFailed, validate_payload

MAX_ORDER_NUMBER_ATTEMPTS = 10


def _unused_order_number() -> str:
    for _ in range(MAX_ORDER_NUMBER_ATTEMPTS):
        candidate = generate_order_number()
        if not Order.query.filter_by(order_number=candidate).first():
            return candidate
    raise RuntimeError("Could not allocate a unique order number")


def _order_for_token(token):
    if not token:
        return None
    return Order.query.filter_by(checkout_token=token).first()


def place_order(*, data: Dict[str, Any]) -> Order:
    """
    Guest checkout order creation.

    Responsibilities:
    - Validate the submission; every item must reference a product
    - Snapshot product name and first image onto each line
    - Mark online payments carrying a transaction id as paid
    - Send the confirmation email without ever failing the order
    - Place at most one order per checkout token; a repeated token gets
      the order already placed with it
    """
    form = validate_payload(PlaceOrderForm, data)

    existing = _order_for_token(form.checkout_token)
    if existing is not None:
        current_app.logger.info("Order %s already placed for this checkout", existing.order_number)
        return existing

    products = {
        product.id: product
        for product in Product.query.filter(
            Product.id.in_([item.product_id for item in form.items])
        ).all()
    }

    missing = {
        f"items.{index}.product_id": f"The selected items.{index}.product_id is invalid."
        for index, item in enumerate(form.items)
        if item.product_id not in products
    }
    if missing:
        raise ValidationFailed(missing)

    order = Order()
    order.order_number = _unused_order_number()
    order.customer_name = form.customer_name
    order.customer_email = form.customer_email
    order.customer_phone = form.customer_phone
    order.shipping_address = form.shipping_address
    order.notes = form.notes
    order.subtotal = form.subtotal
    order.discount_amount = Decimal("0")
    order.shipping_amount = form.shipping_amount or Decimal("0")
    order.total_amount = form.total_amount
    order.payment_method = form.payment_method
    order.transaction_id = form.transaction_id
    order.checkout_token = form.checkout_token
    order.payment_status = initial_payment_status(
        payment_method=form.payment_method,
        transaction_id=form.transaction_id,
    )
    order.status = "pending"

    for item in form.items:
        product = products[item.product_id]
        line = OrderItem()
        line.product_id = product.id
        line.name = product.name
        line.price = item.price
        line.quantity = item.quantity
        line.image = product.primary_image
        order.items.append(line)

    assert_order_items(order.items)

    try:
        with transactional():
            db.session.add(order)
    except IntegrityError:
        # a concurrent submit with the same token committed first
        existing = _order_for_token(form.checkout_token)
        if existing is None:
            raise
        return existing

    current_app.logger.info(
        "Order %s placed (%s, %s)", order.order_number, order.payment_method, order.payment_status
    )

    send_order_confirmation(order)

    return order
