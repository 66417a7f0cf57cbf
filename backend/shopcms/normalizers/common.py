from decimal import Decimal


def iso(value):
    return value.isoformat() if value is not None else None


def money(value):
    """Numeric columns travel as JSON numbers."""
    if value is None:
        return None
    return float(value) if isinstance(value, Decimal) else value
