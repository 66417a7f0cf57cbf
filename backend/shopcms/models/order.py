from shopcms.extensions import db
from .base import BaseModel

PAYMENT_METHODS = ("bkash", "nagad", "rocket", "card", "cod")
ONLINE_PAYMENT_METHODS = ("bkash", "nagad", "rocket", "card")
ORDER_STATUSES = ("pending", "processing", "shipped", "delivered", "cancelled")
PAYMENT_STATUSES = ("pending", "paid", "failed", "refunded")

STATUS_COLORS = {
    "pending": "yellow",
    "processing": "blue",
    "shipped": "purple",
    "delivered": "green",
    "cancelled": "red",
}

PAYMENT_STATUS_COLORS = {
    "pending": "yellow",
    "paid": "green",
    "failed": "red",
    "refunded": "gray",
}


class Order(BaseModel):
    __tablename__ = "orders"

    order_number = db.Column(db.String(20), nullable=False, unique=True, index=True)

    # Guest checkout info
    customer_name = db.Column(db.String(255), nullable=False)
    customer_email = db.Column(db.String(255), nullable=False)
    customer_phone = db.Column(db.String(20), nullable=False)
    shipping_address = db.Column(db.Text, nullable=False)
    notes = db.Column(db.Text, nullable=True)

    subtotal = db.Column(db.Numeric(12, 2), nullable=False)
    discount_amount = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    shipping_amount = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    total_amount = db.Column(db.Numeric(12, 2), nullable=False)

    payment_method = db.Column(db.String(20), nullable=False)
    payment_status = db.Column(db.String(20), nullable=False, default="pending", index=True)
    transaction_id = db.Column(db.String(100), nullable=True)
    # One order per storefront checkout attempt
    checkout_token = db.Column(db.String(64), nullable=True, unique=True)

    status = db.Column(db.String(20), nullable=False, default="pending", index=True)

    items = db.relationship(
        "OrderItem",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderItem.created_at",
    )

    @property
    def status_color(self) -> str:
        return STATUS_COLORS.get(self.status, "gray")

    @property
    def payment_status_color(self) -> str:
        return PAYMENT_STATUS_COLORS.get(self.payment_status, "gray")


class OrderItem(BaseModel):
    __tablename__ = "order_items"

    order_id = db.Column(db.String(36), db.ForeignKey("orders.id", ondelete="CASCADE"), nullable=False)
    product_id = db.Column(db.String(36), db.ForeignKey("products.id", ondelete="SET NULL"), nullable=True)
    name = db.Column(db.String(255), nullable=False)
    price = db.Column(db.Numeric(12, 2), nullable=False)
    quantity = db.Column(db.Integer, nullable=False)
    image = db.Column(db.String(512), nullable=True)

    order = db.relationship("Order", back_populates="items")
    product = db.relationship("Product")
