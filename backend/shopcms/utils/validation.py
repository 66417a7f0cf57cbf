from typing import Any, Dict, Type, TypeVar

from pydantic import BaseModel, ValidationError

SchemaT = TypeVar("SchemaT", bound=BaseModel)

_REQUIRED_ERROR_TYPES = {"string_type", "none_required", "int_type", "decimal_type", "bool_type"}


class ValidationFailed(Exception):
    """
    Raised when submitted data does not satisfy its form schema.

    ``errors`` maps a dotted field path (``items.0.quantity``) to the first
    message reported for that field.
    """

    def __init__(self, errors: Dict[str, str], message: str | None = None):
        self.errors = errors
        self.message = message or next(iter(errors.values()), "The given data was invalid.")
        super().__init__(self.message)


def _field_label(path: str) -> str:
    return path.rsplit(".", 1)[-1].replace("_", " ")


def _is_blank(err) -> bool:
    """Errors raised by an absent or empty value read as "field is required"."""
    if err["type"] == "missing":
        return True
    if err["type"] == "too_short":
        return err.get("input") == []
    return err["type"] in _REQUIRED_ERROR_TYPES and err.get("input") in (None, "")


def format_errors(exc: ValidationError) -> Dict[str, str]:
    errors: Dict[str, str] = {}

    for err in exc.errors():
        path = ".".join(str(part) for part in err["loc"]) or "form"
        if path in errors:
            continue

        if _is_blank(err):
            errors[path] = f"The {_field_label(path)} field is required."
            continue

        message = err["msg"]
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        errors[path] = message

    return errors


def validate_payload(schema: Type[SchemaT], data: Any) -> SchemaT:
    try:
        return schema.model_validate(data)
    except ValidationError as exc:
        raise ValidationFailed(format_errors(exc)) from exc


def require_existing(model, value, field: str):
    """Row of ``model`` with primary key ``value``, or a field error."""
    if value is None:
        return None

    row = model.query.filter_by(id=value).first()
    if row is None:
        raise ValidationFailed({field: f"The selected {field.replace('_', ' ')} is invalid."})
    return row


def require_unique(model, column: str, value, *, exclude_id=None, field: str | None = None):
    field = field or column
    query = model.query.filter(getattr(model, column) == value)
    if exclude_id is not None:
        query = query.filter(model.id != exclude_id)

    if query.first() is not None:
        raise ValidationFailed({field: f"The {field.replace('_', ' ')} has already been taken."})
