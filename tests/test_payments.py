import re
from datetime import date

import pytest
from freezegun import freeze_time

from shopcms.domain.checkout.payments import (
    PaymentDeclined,
    bd_mobile_valid,
    card_transaction_id,
    card_type,
    confirm_payment,
    cvv_valid,
    expiry_valid,
    luhn_valid,
    wallet_transaction_id,
)
from shopcms.schemas.checkout import CardPaymentForm, MobileWalletForm
from shopcms.utils.validation import ValidationFailed, validate_payload

VISA = "4111 1111 1111 1111"
AMEX = "378282246310005"


class TestCardChecks:
    def test_luhn(self):
        assert luhn_valid(VISA)
        assert luhn_valid("4111-1111-1111-1111")
        assert not luhn_valid("4111111111111112")
        assert not luhn_valid("1234")

    @pytest.mark.parametrize("number, expected", [
        ("4111111111111111", "visa"),
        ("5555555555554444", "mastercard"),
        (AMEX, "amex"),
        ("6011111111111117", "discover"),
        ("9999999999999995", "unknown"),
    ])
    def test_card_type(self, number, expected):
        assert card_type(number) == expected

    def test_cvv_length_follows_card_type(self):
        assert cvv_valid("123", "visa")
        assert not cvv_valid("1234", "visa")
        assert cvv_valid("1234", "amex")
        assert not cvv_valid("123", "amex")

    def test_expiry_current_month_is_valid(self):
        today = date(2026, 6, 15)
        assert expiry_valid(6, 26, today=today)
        assert expiry_valid(1, 27, today=today)
        assert not expiry_valid(5, 26, today=today)
        assert not expiry_valid(12, 25, today=today)
        assert not expiry_valid(13, 27, today=today)

    @pytest.mark.parametrize("phone", ["01712345678", "+8801712345678", "8801912345678", "017-1234-5678"])
    def test_bangladesh_mobile_numbers(self, phone):
        assert bd_mobile_valid(phone)

    @pytest.mark.parametrize("phone", ["01212345678", "0171234567", "+4401712345678"])
    def test_rejects_other_numbers(self, phone):
        assert not bd_mobile_valid(phone)


class TestTransactionIds:
    def test_card_transaction_id_format(self):
        assert re.fullmatch(r"CARD-\d{13}-[A-Z0-9]{6}", card_transaction_id())

    def test_wallet_transaction_id_format(self):
        assert re.fullmatch(r"TXN\d{13}[A-Z0-9]{6}", wallet_transaction_id())


class TestSimulatedConfirmation:
    def test_confirms_by_default(self):
        assert confirm_payment(0) is None

    def test_decline_switch(self):
        with pytest.raises(PaymentDeclined):
            confirm_payment(0, decline=True)


class TestPaymentForms:
    @freeze_time("2026-06-15")
    def test_expired_card_is_rejected(self):
        with pytest.raises(ValidationFailed) as exc:
            validate_payload(CardPaymentForm, {
                "card_number": VISA,
                "card_holder_name": "Rahim Uddin",
                "expiry_month": "05",
                "expiry_year": "26",
                "cvv": "123",
            })
        assert exc.value.errors == {"expiry_month": "Card has expired"}

    @freeze_time("2026-06-15")
    def test_amex_requires_four_digit_cvv(self):
        with pytest.raises(ValidationFailed) as exc:
            validate_payload(CardPaymentForm, {
                "card_number": AMEX,
                "card_holder_name": "Rahim Uddin",
                "expiry_month": "12",
                "expiry_year": "28",
                "cvv": "123",
            })
        assert exc.value.errors == {"cvv": "Invalid CVV for this card type"}

    @freeze_time("2026-06-15")
    def test_valid_card_normalizes_number(self):
        form = validate_payload(CardPaymentForm, {
            "card_number": VISA,
            "card_holder_name": "Rahim Uddin",
            "expiry_month": "6",
            "expiry_year": "26",
            "cvv": "123",
        })
        assert form.card_number == "4111111111111111"
        assert form.card_type == "visa"

    def test_invalid_card_number(self):
        with pytest.raises(ValidationFailed) as exc:
            validate_payload(CardPaymentForm, {"card_number": "4111111111111112"})
        assert exc.value.errors["card_number"] == "Invalid card number"
        assert exc.value.errors["expiry_year"] == "Year is required"

    def test_wallet_messages(self):
        with pytest.raises(ValidationFailed) as exc:
            validate_payload(MobileWalletForm, {"phone_number": "01212345678", "pin": "12ab56"})
        assert exc.value.errors == {
            "phone_number": "Please enter a valid Bangladesh phone number",
            "pin": "PIN must only contain numbers",
        }

    def test_short_pin(self):
        with pytest.raises(ValidationFailed) as exc:
            validate_payload(MobileWalletForm, {"phone_number": "01712345678", "pin": "123"})
        assert exc.value.errors == {"pin": "PIN must be exactly 6 digits"}
