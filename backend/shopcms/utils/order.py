from typing import Any, Dict, Iterable, List

from shopcms.extensions import db
from shopcms.utils.validation import ValidationFailed


def require_known_positions(model, positions: List[Dict[str, Any]], field: str) -> None:
    """Every ``{id, order}`` entry must reference an existing row of ``model``."""
    ids = [position["id"] for position in positions]
    known = {row_id for (row_id,) in db.session.query(model.id).filter(model.id.in_(ids))}

    for index, position in enumerate(positions):
        if position["id"] not in known:
            key = f"{field}.{index}.id"
            raise ValidationFailed({key: f"The selected {key} is invalid."})


def apply_positions(model, positions: Iterable[Dict[str, Any]], order_field="order"):
    """
    Writes explicit ``{id, order}`` positions onto rows of ``model``.
    Returns the number of rows updated.
    """
    positions = list(positions)
    ids = [p["id"] for p in positions]
    rows = {row.id: row for row in model.query.filter(model.id.in_(ids)).all()}

    updated = 0
    for position in positions:
        row = rows.get(position["id"])
        if row is not None:
            setattr(row, order_field, position["order"])
            updated += 1

    db.session.flush()
    return updated
