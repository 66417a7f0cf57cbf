from shopcms.utils.media import media_url
from .common import iso, money


def normalize_order_item(item):
    return {
        "id": item.id,
        "product_id": item.product_id,
        "name": item.name,
        "price": money(item.price),
        "quantity": item.quantity,
        "image": item.image,
        "image_url": media_url(item.image),
        "line_total": money(item.price * item.quantity),
    }


def normalize_order(order, *, with_items=True):
    data = {
        "id": order.id,
        "order_number": order.order_number,
        "customer_name": order.customer_name,
        "customer_email": order.customer_email,
        "customer_phone": order.customer_phone,
        "shipping_address": order.shipping_address,
        "notes": order.notes,
        "subtotal": money(order.subtotal),
        "discount_amount": money(order.discount_amount),
        "shipping_amount": money(order.shipping_amount),
        "total_amount": money(order.total_amount),
        "payment_method": order.payment_method,
        "payment_status": order.payment_status,
        "payment_status_color": order.payment_status_color,
        "transaction_id": order.transaction_id,
        "status": order.status,
        "status_color": order.status_color,
        "created_at": iso(order.created_at),
        "updated_at": iso(order.updated_at),
    }

    if with_items:
        data["items"] = [normalize_order_item(item) for item in order.items]

    return data
