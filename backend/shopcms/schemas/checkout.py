import re
from typing import Literal, Optional

from pydantic import ConfigDict, EmailStr, TypeAdapter, ValidationError, ValidationInfo, field_validator

from shopcms.domain.checkout.payments import (
    bd_mobile_valid,
    card_type,
    clean_card_number,
    cvv_valid,
    expiry_valid,
    luhn_valid,
)
from .base import FormSchema

_EMAIL = TypeAdapter(EmailStr)

PaymentMethod = Literal["bkash", "nagad", "rocket", "card", "cod"]


class CheckoutDetailsForm(FormSchema):
    model_config = ConfigDict(validate_default=True)

    customer_name: str = ""
    customer_email: str = ""
    customer_phone: str = ""
    shipping_address: str = ""
    payment_method: PaymentMethod = "bkash"
    notes: Optional[str] = None

    @field_validator("customer_name", "customer_email", "customer_phone", "shipping_address", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return "" if value is None else value

    @field_validator("payment_method", mode="before")
    @classmethod
    def _default_method(cls, value):
        return "bkash" if value is None else value

    @field_validator("customer_name")
    @classmethod
    def _name(cls, value: str) -> str:
        if len(value) < 2:
            raise ValueError("Name must be at least 2 characters")
        return value

    @field_validator("customer_email")
    @classmethod
    def _email(cls, value: str) -> str:
        try:
            return _EMAIL.validate_python(value)
        except ValidationError:
            raise ValueError("Please enter a valid email") from None

    @field_validator("customer_phone")
    @classmethod
    def _phone(cls, value: str) -> str:
        if len(value) < 10:
            raise ValueError("Please enter a valid phone number")
        return value

    @field_validator("shipping_address")
    @classmethod
    def _address(cls, value: str) -> str:
        if len(value) < 10:
            raise ValueError("Please enter a complete address")
        return value


class CardPaymentForm(FormSchema):
    model_config = ConfigDict(validate_default=True)

    # Field order matters: cvv is checked against the detected card type and
    # expiry_month against the already-validated year.
    card_number: str = ""
    card_holder_name: str = ""
    expiry_year: str = ""
    expiry_month: str = ""
    cvv: str = ""

    @field_validator("card_number", "card_holder_name", "expiry_year", "expiry_month", "cvv", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return "" if value is None else str(value)

    @field_validator("card_number")
    @classmethod
    def _card_number(cls, value: str) -> str:
        cleaned = clean_card_number(value)
        if len(cleaned) < 13:
            raise ValueError("Card number must be at least 13 digits")
        if len(cleaned) > 19:
            raise ValueError("Card number must be at most 19 digits")
        if not luhn_valid(cleaned):
            raise ValueError("Invalid card number")
        return cleaned

    @field_validator("card_holder_name")
    @classmethod
    def _holder(cls, value: str) -> str:
        if len(value) < 2:
            raise ValueError("Name must be at least 2 characters")
        if len(value) > 100:
            raise ValueError("Name is too long")
        return value

    @field_validator("expiry_year")
    @classmethod
    def _year(cls, value: str) -> str:
        if not value:
            raise ValueError("Year is required")
        if not re.fullmatch(r"\d{2}", value):
            raise ValueError("Invalid year")
        return value

    @field_validator("expiry_month")
    @classmethod
    def _month(cls, value: str, info: ValidationInfo) -> str:
        if not value:
            raise ValueError("Month is required")
        if not re.fullmatch(r"\d{1,2}", value):
            raise ValueError("Invalid month")

        year = info.data.get("expiry_year")
        if year is not None and not expiry_valid(int(value), int(year)):
            raise ValueError("Card has expired")
        return value

    @field_validator("cvv")
    @classmethod
    def _cvv(cls, value: str, info: ValidationInfo) -> str:
        if len(value) < 3:
            raise ValueError("CVV must be at least 3 digits")
        if len(value) > 4:
            raise ValueError("CVV must be at most 4 digits")
        if not value.isdigit():
            raise ValueError("CVV must only contain numbers")

        number = info.data.get("card_number")
        if number is not None and not cvv_valid(value, card_type(number)):
            raise ValueError("Invalid CVV for this card type")
        return value

    @property
    def card_type(self) -> str:
        return card_type(self.card_number)


class MobileWalletForm(FormSchema):
    model_config = ConfigDict(validate_default=True)

    phone_number: str = ""
    pin: str = ""

    @field_validator("phone_number", "pin", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return "" if value is None else str(value)

    @field_validator("phone_number")
    @classmethod
    def _phone(cls, value: str) -> str:
        if len(value) < 11:
            raise ValueError("Phone number must be at least 11 digits")
        if len(value) > 14:
            raise ValueError("Phone number is too long")
        if not bd_mobile_valid(value):
            raise ValueError("Please enter a valid Bangladesh phone number")
        return value

    @field_validator("pin")
    @classmethod
    def _pin(cls, value: str) -> str:
        if len(value) != 6:
            raise ValueError("PIN must be exactly 6 digits")
        if not value.isdigit():
            raise ValueError("PIN must only contain numbers")
        return value
