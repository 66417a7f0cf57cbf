import uuid
from dataclasses import dataclass, field
from typing import Any, Callable, ClassVar, Dict, List, Optional

from shopcms.domain.checkout.cart import Cart
from shopcms.domain.checkout.payments import (
    CARD,
    PaymentDeclined,
    card_transaction_id,
    wallet_transaction_id,
)
from shopcms.domain.lifecycle.checkout import (
    DETAILS,
    PAYMENT,
    PROCESSING,
    assert_checkout_transition,
)
from shopcms.schemas.checkout import CardPaymentForm, CheckoutDetailsForm, MobileWalletForm
from shopcms.utils.validation import ValidationFailed, validate_payload

DEFAULT_PAYMENT_METHOD = "bkash"


def new_checkout_token() -> str:
    return str(uuid.uuid4())


class OrderSubmissionError(Exception):
    """The order endpoint rejected the submission."""

    def __init__(self, message: Optional[str] = None, errors: Optional[Dict[str, str]] = None):
        self.message = message
        self.errors = errors or {}
        super().__init__(message or "Failed to place order")


class OrderGatewayError(Exception):
    """The order endpoint could not be reached or failed unexpectedly."""


# Takes the order payload, returns the created order number.
OrderGateway = Callable[[Dict[str, Any]], str]


@dataclass
class CheckoutFlow:
    """
    Checkout step machine: details → payment → processing.

    Persistent state lives in the session between requests; ``errors``,
    ``toasts`` and ``redirect_to`` are per-request outcomes the web layer
    turns into page props, flash messages and redirects.

    ``checkout_token`` identifies one checkout attempt. Every order payload
    carries it and the order service places at most one order per token, so
    a replayed or double-clicked submit cannot create a second order. It is
    renewed once an order has been placed.
    """

    SESSION_KEY: ClassVar[str] = "checkout"

    step: str = DETAILS
    details: Dict[str, Any] = field(default_factory=dict)
    payment_completed: bool = False
    transaction_id: Optional[str] = None
    checkout_token: str = field(default_factory=new_checkout_token)

    errors: Dict[str, str] = field(default_factory=dict)
    toasts: List[Dict[str, str]] = field(default_factory=list)
    redirect_to: Optional[str] = None

    # ------------------------------------------------------------------
    # Session persistence
    # ------------------------------------------------------------------

    @classmethod
    def from_session(cls, session) -> "CheckoutFlow":
        state = session.get(cls.SESSION_KEY) or {}
        return cls(
            step=state.get("step", DETAILS),
            details=dict(state.get("details") or {}),
            payment_completed=bool(state.get("payment_completed", False)),
            transaction_id=state.get("transaction_id"),
            checkout_token=state.get("checkout_token") or new_checkout_token(),
        )

    def save(self, session) -> None:
        session[self.SESSION_KEY] = {
            "step": self.step,
            "details": self.details,
            "payment_completed": self.payment_completed,
            "transaction_id": self.transaction_id,
            "checkout_token": self.checkout_token,
        }

    def snapshot(self) -> Dict[str, Any]:
        return {
            "step": self.step,
            "details": self.details,
            "payment_method": self.payment_method,
            "payment_completed": self.payment_completed,
            "transaction_id": self.transaction_id,
            "errors": self.errors,
        }

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @property
    def payment_method(self) -> str:
        return self.details.get("payment_method") or DEFAULT_PAYMENT_METHOD

    def _move(self, to_step: str) -> None:
        assert_checkout_transition(from_step=self.step, to_step=to_step)
        self.step = to_step

    def _toast(self, kind: str, message: str) -> None:
        self.toasts.append({"type": kind, "message": message})

    def _reset_payment(self) -> None:
        self.payment_completed = False
        self.transaction_id = None

    def _return_to_details(self) -> None:
        if self.step != DETAILS:
            self._move(DETAILS)
        self._reset_payment()

    def _order_payload(self, cart: Cart, transaction_id: Optional[str]) -> Dict[str, Any]:
        return {
            **self.details,
            "checkout_token": self.checkout_token,
            "transaction_id": transaction_id,
            "items": [
                {
                    "product_id": item["product_id"],
                    "quantity": item["quantity"],
                    "price": item["price"],
                    "name": item["name"],
                    "image": item.get("image"),
                }
                for item in cart.items
            ],
            "subtotal": cart.total_price,
            "shipping_amount": 0,
            "total_amount": cart.total_price,
        }

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def submit_details(self, data: Dict[str, Any], *, cart: Cart, place_order: OrderGateway) -> bool:
        """
        details → payment for online methods; cash on delivery submits the
        order straight from the details step.
        """
        if self.step != DETAILS:
            return False

        self.errors = {}
        try:
            form = validate_payload(CheckoutDetailsForm, data)
        except ValidationFailed as exc:
            self.errors = exc.errors
            return False

        self.details = form.model_dump()

        if cart.is_empty:
            self._toast("error", "Your cart is empty")
            return False

        if form.payment_method == "cod":
            return self._submit_order(cart, place_order, transaction_id=None)

        self._move(PAYMENT)
        return True

    def submit_payment(
        self,
        data: Dict[str, Any],
        *,
        cart: Cart,
        place_order: OrderGateway,
        confirm_payment: Callable[[], None],
    ) -> bool:
        if self.step != PAYMENT:
            return False

        is_card = self.payment_method == CARD
        self.errors = {}
        try:
            validate_payload(CardPaymentForm if is_card else MobileWalletForm, data)
        except ValidationFailed as exc:
            self.errors = exc.errors
            return False

        if cart.is_empty:
            self._toast("error", "Your cart is empty")
            return False

        self._move(PROCESSING)

        try:
            confirm_payment()
        except PaymentDeclined:
            self._toast("error", "Payment failed. Please try again.")
            self._move(PAYMENT)
            return False

        self.transaction_id = card_transaction_id() if is_card else wallet_transaction_id()
        self.payment_completed = True

        return self._submit_order(cart, place_order, transaction_id=self.transaction_id)

    def back_to_details(self) -> None:
        if self.step == PAYMENT:
            self._move(DETAILS)
        self._reset_payment()
        self.errors = {}

    def _submit_order(self, cart: Cart, place_order: OrderGateway, *, transaction_id: Optional[str]) -> bool:
        try:
            order_number = place_order(self._order_payload(cart, transaction_id))
        except OrderSubmissionError as exc:
            if exc.errors:
                for message in exc.errors.values():
                    self._toast("error", message)
            else:
                self._toast("error", exc.message or "Failed to place order")
            self._return_to_details()
            return False
        except OrderGatewayError:
            self._toast("error", "An error occurred. Please try again.")
            self._return_to_details()
            return False

        self._toast("success", "Order placed successfully!")
        cart.clear()
        self.step = DETAILS
        self.details = {}
        self._reset_payment()
        self.checkout_token = new_checkout_token()
        self.redirect_to = f"/order-confirmation/{order_number}"
        return True
