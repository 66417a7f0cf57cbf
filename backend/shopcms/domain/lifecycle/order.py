import secrets
import string

from shopcms.models.order import ONLINE_PAYMENT_METHODS

ORDER_NUMBER_PREFIX = "ORD-"
_ORDER_NUMBER_ALPHABET = string.ascii_uppercase + string.digits


def generate_order_number() -> str:
    return ORDER_NUMBER_PREFIX + "".join(
        secrets.choice(_ORDER_NUMBER_ALPHABET) for _ in range(8)
    )


def initial_payment_status(*, payment_method: str, transaction_id: str | None) -> str:
    """
    Online methods arrive with a confirmed transaction reference and are
    recorded as paid. Everything else (cash on delivery, missing reference)
    waits for manual reconciliation.
    """
    if payment_method in ONLINE_PAYMENT_METHODS and transaction_id:
        return "paid"
    return "pending"
