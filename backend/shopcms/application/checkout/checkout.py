from typing import Any, Dict, Tuple

from flask import current_app

from shopcms.application.orders.place_order import place_order
from shopcms.domain.checkout.cart import Cart
from shopcms.domain.checkout.flow import (
    CheckoutFlow,
    OrderGatewayError,
    OrderSubmissionError,
)
from shopcms.domain.checkout.payments import confirm_payment
from shopcms.domain.invariants.exceptions import InvariantViolation
from shopcms.utils.validation import ValidationFailed


def submit_order(payload: Dict[str, Any]) -> str:
    """
    Order gateway used by the checkout flow: places the order in-process and
    translates rejections into the flow's error types.
    """
    try:
        order = place_order(data=payload)
    except ValidationFailed as exc:
        raise OrderSubmissionError(exc.message, exc.errors) from exc
    except InvariantViolation as exc:
        errors = {exc.field: str(exc)} if exc.field else {}
        raise OrderSubmissionError(str(exc), errors) from exc
    except Exception as exc:
        current_app.logger.exception("Unexpected error while placing checkout order")
        raise OrderGatewayError(str(exc)) from exc

    return order.order_number


def load_checkout(session) -> Tuple[CheckoutFlow, Cart]:
    return CheckoutFlow.from_session(session), Cart.from_session(session)


def open_checkout(session) -> Tuple[CheckoutFlow, Cart]:
    """Checkout page state; pins the checkout token so repeated submits share it."""
    flow, cart = load_checkout(session)
    flow.save(session)
    return flow, cart


def _persist(session, flow: CheckoutFlow, cart: Cart) -> None:
    flow.save(session)
    cart.save(session)

    failures = [toast["message"] for toast in flow.toasts if toast["type"] == "error"]
    if failures:
        current_app.logger.warning("Checkout step %s failed: %s", flow.step, "; ".join(failures))


def submit_checkout_details(session, data: Dict[str, Any]) -> CheckoutFlow:
    flow, cart = load_checkout(session)
    flow.submit_details(data, cart=cart, place_order=submit_order)
    _persist(session, flow, cart)
    return flow


def submit_checkout_payment(session, data: Dict[str, Any]) -> CheckoutFlow:
    flow, cart = load_checkout(session)
    delay = current_app.config.get("PAYMENT_SIMULATION_DELAY", 2)
    decline = current_app.config.get("PAYMENT_SIMULATION_DECLINE", False)

    flow.submit_payment(
        data,
        cart=cart,
        place_order=submit_order,
        confirm_payment=lambda: confirm_payment(delay, decline=decline),
    )
    _persist(session, flow, cart)
    return flow


def return_to_details(session) -> CheckoutFlow:
    flow, cart = load_checkout(session)
    flow.back_to_details()
    _persist(session, flow, cart)
    return flow
