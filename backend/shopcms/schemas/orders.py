from decimal import Decimal
from typing import List, Literal, Optional

from pydantic import Field, field_validator

from .base import FormSchema
from .fields import check_email

PaymentMethod = Literal["bkash", "nagad", "rocket", "card", "cod"]
OrderStatus = Literal["pending", "processing", "shipped", "delivered", "cancelled"]
PaymentStatus = Literal["pending", "paid", "failed", "refunded"]


class OrderItemInput(FormSchema):
    product_id: str
    quantity: int = Field(ge=1)
    price: Decimal = Field(ge=0)


class PlaceOrderForm(FormSchema):
    customer_name: str = Field(max_length=255)
    customer_email: str = Field(max_length=255)
    customer_phone: str = Field(max_length=20)
    shipping_address: str = Field(max_length=500)
    payment_method: PaymentMethod
    transaction_id: Optional[str] = Field(default=None, max_length=100)
    checkout_token: Optional[str] = Field(default=None, max_length=64)
    notes: Optional[str] = Field(default=None, max_length=500)
    items: List[OrderItemInput] = Field(min_length=1)
    subtotal: Decimal = Field(ge=0)
    shipping_amount: Optional[Decimal] = Field(default=None, ge=0)
    total_amount: Decimal = Field(ge=0)

    @field_validator("customer_email")
    @classmethod
    def _email(cls, value: str) -> str:
        return check_email(value, "customer email")


class OrderUpdateForm(FormSchema):
    status: Optional[OrderStatus] = None
    payment_status: Optional[PaymentStatus] = None


class OrderStatusForm(FormSchema):
    status: OrderStatus


class PaymentStatusForm(FormSchema):
    payment_status: PaymentStatus
