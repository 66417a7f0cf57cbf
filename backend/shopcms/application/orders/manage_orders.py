from typing import Any, Dict, Optional

from sqlalchemy import func, or_

from shopcms.extensions import db
from shopcms.models.order import Order
from shopcms.schemas.orders import OrderStatusForm, OrderUpdateForm, PaymentStatusForm
from shopcms.utils.audit import log_action
from shopcms.utils.pagination import paginate_page
from shopcms.utils.transaction import transactional
from shopcms.utils.validation import validate_payload


def list_orders(
    *,
    search: Optional[str] = None,
    status: Optional[str] = None,
    payment_status: Optional[str] = None,
    page=1,
    per_page=10,
):
    query = Order.query

    if search:
        pattern = f"%{search}%"
        query = query.filter(
            or_(
                Order.order_number.ilike(pattern),
                Order.customer_name.ilike(pattern),
                Order.customer_email.ilike(pattern),
            )
        )

    if status and status != "all":
        query = query.filter(Order.status == status)

    if payment_status and payment_status != "all":
        query = query.filter(Order.payment_status == payment_status)

    return paginate_page(
        query.order_by(Order.created_at.desc(), Order.id.desc()),
        page=page,
        per_page=per_page,
    )


def order_stats() -> Dict[str, Any]:
    paid = db.session.query(
        func.coalesce(func.sum(Order.total_amount), 0),
        func.avg(Order.total_amount),
    ).filter(Order.payment_status == "paid").one()

    return {
        "total_orders": Order.query.count(),
        "pending_orders": Order.query.filter_by(status="pending").count(),
        "total_revenue": float(paid[0] or 0),
        "avg_order_value": float(paid[1] or 0),
    }


def get_order(order_id: str) -> Order:
    return Order.query.filter_by(id=order_id).first_or_404()


def get_order_by_number(order_number: str) -> Order:
    return Order.query.filter_by(order_number=order_number).first_or_404()


def _apply(order: Order, changes: Dict[str, Any], action: str) -> Order:
    with transactional():
        for field, value in changes.items():
            setattr(order, field, value)

        log_action(
            action=action,
            entity_type="order",
            entity_id=order.id,
            payload={"order_number": order.order_number, **changes},
        )
    return order


def update_order(*, order_id: str, data: Dict[str, Any]) -> Order:
    """Status and/or payment status; omitted or empty values are left untouched."""
    order = get_order(order_id)
    form = validate_payload(OrderUpdateForm, data)
    changes = {field: value for field, value in form.model_dump().items() if value}
    return _apply(order, changes, "order.update")


def update_order_status(*, order_id: str, data: Dict[str, Any]) -> Order:
    order = get_order(order_id)
    form = validate_payload(OrderStatusForm, data)
    return _apply(order, {"status": form.status}, "order.status")


def update_payment_status(*, order_id: str, data: Dict[str, Any]) -> Order:
    order = get_order(order_id)
    form = validate_payload(PaymentStatusForm, data)
    return _apply(order, {"payment_status": form.payment_status}, "order.payment_status")


def delete_order(*, order_id: str) -> None:
    order = get_order(order_id)

    with transactional():
        db.session.delete(order)

        log_action(
            action="order.delete",
            entity_type="order",
            entity_id=order_id,
            payload={"order_number": order.order_number},
        )
