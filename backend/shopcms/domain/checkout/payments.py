import re
import secrets
import string
import time
from datetime import date
from typing import Optional

CARD = "card"
WALLET_METHODS = ("bkash", "nagad", "rocket")

_SUFFIX_ALPHABET = string.ascii_uppercase + string.digits

_CARD_TYPES = (
    ("visa", re.compile(r"^4")),
    ("mastercard", re.compile(r"^5[1-5]")),
    ("amex", re.compile(r"^3[47]")),
    ("discover", re.compile(r"^6(?:011|5)")),
)

_BD_PHONE_PATTERNS = (
    re.compile(r"^01[3-9]\d{8}$"),
    re.compile(r"^\+8801[3-9]\d{8}$"),
    re.compile(r"^8801[3-9]\d{8}$"),
)


class PaymentDeclined(Exception):
    """The simulated gateway did not confirm the payment."""


def clean_card_number(card_number: str) -> str:
    return re.sub(r"[\s-]", "", card_number or "")


def luhn_valid(card_number: str) -> bool:
    cleaned = clean_card_number(card_number)
    if not re.fullmatch(r"\d{13,19}", cleaned):
        return False

    total = 0
    for position, char in enumerate(reversed(cleaned)):
        digit = int(char)
        if position % 2 == 1:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit

    return total % 10 == 0


def card_type(card_number: str) -> str:
    cleaned = clean_card_number(card_number)
    for name, pattern in _CARD_TYPES:
        if pattern.match(cleaned):
            return name
    return "unknown"


def cvv_valid(cvv: str, detected_type: str) -> bool:
    length = 4 if detected_type == "amex" else 3
    return bool(re.fullmatch(rf"\d{{{length}}}", cvv or ""))


def expiry_valid(month: int, year: int, today: Optional[date] = None) -> bool:
    """``year`` is the two-digit card year. The current month is still valid."""
    today = today or date.today()
    current_year = today.year % 100

    if month < 1 or month > 12:
        return False
    if year < current_year:
        return False
    if year == current_year and month < today.month:
        return False
    return True


def bd_mobile_valid(phone: str) -> bool:
    cleaned = re.sub(r"[^\d+]", "", phone or "")
    return any(pattern.match(cleaned) for pattern in _BD_PHONE_PATTERNS)


def _suffix(length: int = 6) -> str:
    return "".join(secrets.choice(_SUFFIX_ALPHABET) for _ in range(length))


def _epoch_ms() -> int:
    return int(time.time() * 1000)


def card_transaction_id() -> str:
    return f"CARD-{_epoch_ms()}-{_suffix()}"


def wallet_transaction_id() -> str:
    return f"TXN{_epoch_ms()}{_suffix()}"


def confirm_payment(delay: float, *, decline: bool = False) -> None:
    """
    Stand-in for a gateway round-trip: waits ``delay`` seconds, then confirms
    the payment or, when ``decline`` is set, raises PaymentDeclined.
    """
    if delay > 0:
        time.sleep(delay)
    if decline:
        raise PaymentDeclined()
