import re

from pydantic import EmailStr, HttpUrl, TypeAdapter, ValidationError

_EMAIL = TypeAdapter(EmailStr)
_URL = TypeAdapter(HttpUrl)
_HH_MM = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


def check_email(value: str, label: str = "email") -> str:
    try:
        return _EMAIL.validate_python(value)
    except ValidationError:
        raise ValueError(f"The {label} field must be a valid email address.") from None


def check_url(value: str, label: str) -> str:
    """Validates ``value`` as an http(s) URL but keeps the string as typed."""
    try:
        _URL.validate_python(value)
    except ValidationError:
        raise ValueError(f"The {label} field must be a valid URL.") from None
    return value


def check_hh_mm(value: str, label: str) -> str:
    if not _HH_MM.match(value):
        raise ValueError(f"The {label} field must match the format H:i.")
    return value
