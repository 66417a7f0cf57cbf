from datetime import date

import pytest

from shopcms.domain.checkout.cart import Cart
from shopcms.domain.checkout.flow import CheckoutFlow, OrderGatewayError, OrderSubmissionError
from shopcms.domain.checkout.payments import PaymentDeclined
from shopcms.domain.lifecycle.checkout import DETAILS, PAYMENT

DETAILS_DATA = {
    "customer_name": "Rahim Uddin",
    "customer_email": "rahim@example.com",
    "customer_phone": "01712345678",
    "shipping_address": "House 12, Road 5, Dhanmondi, Dhaka",
    "payment_method": "bkash",
}

WALLET_DATA = {"phone_number": "01712345678", "pin": "123456"}

NEXT_YEAR = str((date.today().year + 1) % 100).zfill(2)

CARD_DATA = {
    "card_number": "4111111111111111",
    "card_holder_name": "Rahim Uddin",
    "expiry_month": "12",
    "expiry_year": NEXT_YEAR,
    "cvv": "123",
}


def make_cart():
    cart = Cart()
    cart.add_item(product_id="p1", name="Chair", price=100)
    cart.add_item(product_id="p1", name="Chair", price=100)
    return cart


class RecordingGateway:
    def __init__(self, result="ORD-TEST0001", error=None):
        self.result = result
        self.error = error
        self.payloads = []

    def __call__(self, payload):
        self.payloads.append(payload)
        if self.error is not None:
            raise self.error
        return self.result


def confirmed():
    return None


def declined():
    raise PaymentDeclined()


class TestDetailsStep:
    def test_invalid_details_stay_on_details_with_messages(self):
        flow = CheckoutFlow()
        gateway = RecordingGateway()

        moved = flow.submit_details(
            {**DETAILS_DATA, "customer_name": "R", "customer_email": "nope"},
            cart=make_cart(),
            place_order=gateway,
        )

        assert moved is False
        assert flow.step == DETAILS
        assert flow.errors == {
            "customer_name": "Name must be at least 2 characters",
            "customer_email": "Please enter a valid email",
        }
        assert gateway.payloads == []

    def test_missing_fields_are_reported(self):
        flow = CheckoutFlow()
        flow.submit_details({}, cart=make_cart(), place_order=RecordingGateway())

        assert flow.errors["customer_name"] == "Name must be at least 2 characters"
        assert flow.errors["shipping_address"] == "Please enter a complete address"

    def test_online_method_moves_to_payment(self):
        flow = CheckoutFlow()
        gateway = RecordingGateway()

        assert flow.submit_details(DETAILS_DATA, cart=make_cart(), place_order=gateway)
        assert flow.step == PAYMENT
        assert flow.payment_method == "bkash"
        assert gateway.payloads == []

    def test_cash_on_delivery_submits_immediately(self):
        flow = CheckoutFlow()
        cart = make_cart()
        gateway = RecordingGateway(result="ORD-COD00001")

        assert flow.submit_details({**DETAILS_DATA, "payment_method": "cod"}, cart=cart, place_order=gateway)

        payload = gateway.payloads[0]
        assert payload["transaction_id"] is None
        assert payload["subtotal"] == 200.0
        assert payload["total_amount"] == 200.0
        assert payload["shipping_amount"] == 0
        assert payload["items"][0]["quantity"] == 2
        assert cart.is_empty
        assert flow.redirect_to == "/order-confirmation/ORD-COD00001"
        assert flow.toasts == [{"type": "success", "message": "Order placed successfully!"}]
        assert flow.step == DETAILS
        assert flow.details == {}

    def test_empty_cart_is_refused(self):
        flow = CheckoutFlow()
        assert not flow.submit_details(DETAILS_DATA, cart=Cart(), place_order=RecordingGateway())
        assert flow.toasts == [{"type": "error", "message": "Your cart is empty"}]
        assert flow.step == DETAILS

    def test_order_payload_carries_checkout_token(self):
        flow = CheckoutFlow()
        token = flow.checkout_token
        gateway = RecordingGateway()

        flow.submit_details({**DETAILS_DATA, "payment_method": "cod"}, cart=make_cart(), place_order=gateway)

        assert gateway.payloads[0]["checkout_token"] == token
        assert flow.checkout_token != token

    def test_rejected_order_keeps_checkout_token(self):
        flow = CheckoutFlow()
        token = flow.checkout_token

        flow.submit_details(
            {**DETAILS_DATA, "payment_method": "cod"},
            cart=make_cart(),
            place_order=RecordingGateway(error=OrderSubmissionError()),
        )

        assert flow.checkout_token == token


class TestPaymentStep:
    def _at_payment(self, method="bkash"):
        flow = CheckoutFlow()
        flow.submit_details({**DETAILS_DATA, "payment_method": method}, cart=make_cart(), place_order=RecordingGateway())
        assert flow.step == PAYMENT
        return flow

    def test_wallet_payment_places_paid_order(self):
        flow = self._at_payment()
        cart = make_cart()
        gateway = RecordingGateway(result="ORD-WALLET01")

        assert flow.submit_payment(WALLET_DATA, cart=cart, place_order=gateway, confirm_payment=confirmed)

        assert gateway.payloads[0]["transaction_id"].startswith("TXN")
        assert gateway.payloads[0]["payment_method"] == "bkash"
        assert flow.redirect_to == "/order-confirmation/ORD-WALLET01"
        assert cart.is_empty
        assert flow.payment_completed is False

    def test_emptied_cart_is_refused_at_payment(self):
        flow = self._at_payment()
        gateway = RecordingGateway()

        assert not flow.submit_payment(WALLET_DATA, cart=Cart(), place_order=gateway, confirm_payment=confirmed)

        assert flow.toasts == [{"type": "error", "message": "Your cart is empty"}]
        assert flow.step == PAYMENT
        assert gateway.payloads == []

    def test_card_payment_uses_card_transaction_id(self):
        flow = self._at_payment("card")
        gateway = RecordingGateway()

        assert flow.submit_payment(CARD_DATA, cart=make_cart(), place_order=gateway, confirm_payment=confirmed)
        assert gateway.payloads[0]["transaction_id"].startswith("CARD-")

    def test_invalid_payment_stays_on_payment(self):
        flow = self._at_payment()
        gateway = RecordingGateway()

        assert not flow.submit_payment({"phone_number": "", "pin": ""}, cart=make_cart(), place_order=gateway, confirm_payment=confirmed)
        assert flow.step == PAYMENT
        assert "phone_number" in flow.errors
        assert gateway.payloads == []

    def test_declined_payment_returns_to_payment(self):
        flow = self._at_payment()
        cart = make_cart()
        gateway = RecordingGateway()

        assert not flow.submit_payment(WALLET_DATA, cart=cart, place_order=gateway, confirm_payment=declined)

        assert flow.step == PAYMENT
        assert flow.toasts == [{"type": "error", "message": "Payment failed. Please try again."}]
        assert gateway.payloads == []
        assert not cart.is_empty

    def test_rejected_order_returns_to_details_and_keeps_cart(self):
        flow = self._at_payment()
        cart = make_cart()
        gateway = RecordingGateway(error=OrderSubmissionError("Invalid", {
            "items.0.product_id": "The selected items.0.product_id is invalid.",
        }))

        assert not flow.submit_payment(WALLET_DATA, cart=cart, place_order=gateway, confirm_payment=confirmed)

        assert flow.step == DETAILS
        assert flow.payment_completed is False
        assert flow.transaction_id is None
        assert flow.toasts == [{"type": "error", "message": "The selected items.0.product_id is invalid."}]
        assert cart.total_items == 2
        assert flow.details["customer_name"] == "Rahim Uddin"

    def test_rejection_without_field_errors_uses_message(self):
        flow = CheckoutFlow()
        gateway = RecordingGateway(error=OrderSubmissionError())

        flow.submit_details({**DETAILS_DATA, "payment_method": "cod"}, cart=make_cart(), place_order=gateway)

        assert flow.toasts == [{"type": "error", "message": "Failed to place order"}]

    def test_gateway_failure_shows_generic_toast(self):
        flow = self._at_payment()
        gateway = RecordingGateway(error=OrderGatewayError("boom"))

        assert not flow.submit_payment(WALLET_DATA, cart=make_cart(), place_order=gateway, confirm_payment=confirmed)
        assert flow.toasts == [{"type": "error", "message": "An error occurred. Please try again."}]
        assert flow.step == DETAILS

    def test_payment_outside_payment_step_is_ignored(self):
        flow = CheckoutFlow()
        gateway = RecordingGateway()
        assert not flow.submit_payment(WALLET_DATA, cart=make_cart(), place_order=gateway, confirm_payment=confirmed)
        assert gateway.payloads == []


class TestBackAndSession:
    def test_back_to_details_resets_payment(self):
        flow = CheckoutFlow(step=PAYMENT, payment_completed=True, transaction_id="TXN1", details=dict(DETAILS_DATA))
        flow.back_to_details()

        assert flow.step == DETAILS
        assert flow.payment_completed is False
        assert flow.transaction_id is None
        assert flow.details["customer_email"] == "rahim@example.com"

    def test_back_keeps_checkout_token(self):
        flow = CheckoutFlow(step=PAYMENT, details=dict(DETAILS_DATA))
        token = flow.checkout_token
        flow.back_to_details()
        assert flow.checkout_token == token

    def test_session_keeps_only_persistent_state(self):
        session = {}
        flow = CheckoutFlow(step=PAYMENT, details=dict(DETAILS_DATA))
        flow.toasts.append({"type": "error", "message": "x"})
        flow.save(session)

        restored = CheckoutFlow.from_session(session)
        assert restored.step == PAYMENT
        assert restored.details == DETAILS_DATA
        assert restored.toasts == []
        assert restored.checkout_token == flow.checkout_token

    def test_snapshot_includes_payment_method(self):
        snapshot = CheckoutFlow(details={"payment_method": "nagad"}).snapshot()
        assert snapshot["payment_method"] == "nagad"
        assert "toasts" not in snapshot
        assert "checkout_token" not in snapshot


def test_illegal_transition_raises():
    with pytest.raises(ValueError):
        CheckoutFlow(step=DETAILS)._move("processing")
