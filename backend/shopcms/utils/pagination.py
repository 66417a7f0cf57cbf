# shopcms/utils/pagination.py
from __future__ import annotations

import base64
import binascii
from datetime import datetime
from typing import Any, List, Optional, Tuple, TypedDict, Type

from sqlalchemy.orm import Query
from sqlalchemy.sql import and_, or_
from werkzeug.exceptions import BadRequest

DIRECTIONS = ("next", "prev")


class CursorMeta(TypedDict):
    has_more: bool
    next_cursor: Optional[str]
    prev_cursor: Optional[str]


def paginate_page(query, *, page: Optional[int] = None, per_page: int = 10):
    """
    Offset pagination for admin list screens.

    Out-of-range pages return an empty page instead of a 404.
    """
    try:
        page = max(int(page or 1), 1)
    except (TypeError, ValueError):
        page = 1

    return query.paginate(page=page, per_page=per_page, error_out=False)


def encode_cursor(row: Any) -> str:
    """Opaque, URL-safe position of ``row`` in a (created_at, id) ordering."""
    raw = f"{row.created_at.isoformat()}|{row.id}".encode()
    return base64.urlsafe_b64encode(raw).decode().rstrip("=")


def decode_cursor(cursor: str) -> Tuple[datetime, str]:
    try:
        padded = cursor + "=" * (-len(cursor) % 4)
        stamp, _, row_id = base64.urlsafe_b64decode(padded).decode().partition("|")
        if not row_id:
            raise ValueError(cursor)
        return datetime.fromisoformat(stamp), row_id
    except (binascii.Error, UnicodeDecodeError, ValueError):
        raise BadRequest("Invalid cursor format") from None


def keyset_page(
    query: Query,
    *,
    model: Type[Any],
    cursor: Optional[str] = None,
    direction: str = "next",
    limit: int = 20,
) -> Tuple[List[Any], CursorMeta]:
    """
    Newest-first keyset page over ``(created_at, id)``.

    ``next`` walks from the cursor towards older rows, ``prev`` towards
    newer ones. Items always come back newest first.
    """
    if direction not in DIRECTIONS:
        raise BadRequest("Invalid pagination direction")
    if limit <= 0:
        raise BadRequest("Limit must be greater than zero")

    newest_first = direction == "next"

    if cursor:
        stamp, row_id = decode_cursor(cursor)
        if newest_first:
            query = query.filter(or_(
                model.created_at < stamp,
                and_(model.created_at == stamp, model.id < row_id),
            ))
        else:
            query = query.filter(or_(
                model.created_at > stamp,
                and_(model.created_at == stamp, model.id > row_id),
            ))

    if newest_first:
        query = query.order_by(model.created_at.desc(), model.id.desc())
    else:
        query = query.order_by(model.created_at.asc(), model.id.asc())

    rows = query.limit(limit + 1).all()
    has_more = len(rows) > limit
    items = rows[:limit]
    if not newest_first:
        items.reverse()

    older = has_more if newest_first else bool(cursor)
    newer = bool(cursor) if newest_first else has_more

    return items, {
        "has_more": has_more,
        "next_cursor": encode_cursor(items[-1]) if items and older else None,
        "prev_cursor": encode_cursor(items[0]) if items and newer else None,
    }
