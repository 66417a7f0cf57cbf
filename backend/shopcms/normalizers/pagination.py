# shopcms/normalizers/pagination.py
from typing import Callable, Any, List, Optional, Dict

from shopcms.utils.pagination import CursorMeta


def normalize_pagination(
    items: List[Any],
    normalize_fn: Callable[[Any], Dict[str, Any]],
    *,
    cursor: Optional[CursorMeta] = None,
) -> Dict[str, Any]:
    """
    Cursor-paginated JSON feeds (audit log).
    """
    response: Dict[str, Any] = {
        "data": [normalize_fn(item) for item in items],
    }

    if cursor is not None:
        response["meta"] = {
            "has_more": cursor["has_more"],
            "next_cursor": cursor["next_cursor"],
            "prev_cursor": cursor["prev_cursor"],
        }

    return response


def normalize_page(pagination, normalize_fn: Callable[[Any], Dict[str, Any]]) -> Dict[str, Any]:
    """
    Offset-paginated admin lists, in the shape the dashboard tables consume:
    data + current_page / last_page / per_page / total / from / to.
    """
    items = [normalize_fn(item) for item in pagination.items]
    offset = (pagination.page - 1) * pagination.per_page

    return {
        "data": items,
        "current_page": pagination.page,
        "last_page": max(pagination.pages, 1),
        "per_page": pagination.per_page,
        "total": pagination.total,
        "from": offset + 1 if items else None,
        "to": offset + len(items) if items else None,
    }
