from typing import Any, Dict

from shopcms.models.category import Category
from shopcms.models.contact_message import ContactMessage
from shopcms.models.meeting import Meeting
from shopcms.models.order import Order
from shopcms.models.product import Product

LATEST_ORDERS = 5


def dashboard_summary() -> Dict[str, Any]:
    return {
        "stats": {
            "products": Product.query.count(),
            "categories": Category.query.count(),
            "orders": Order.query.count(),
            "pending_orders": Order.query.filter_by(status="pending").count(),
            "unread_messages": ContactMessage.query.filter(ContactMessage.read_at.is_(None)).count(),
            "pending_meetings": Meeting.query.filter_by(status="pending").count(),
        },
        "latest_orders": (
            Order.query.order_by(Order.created_at.desc()).limit(LATEST_ORDERS).all()
        ),
    }
