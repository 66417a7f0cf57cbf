"""
Page rendering.

Every screen is a page object ``{component, props, url, version}``. Inertia
visits (``X-Inertia: true``) receive it as JSON; first loads receive the HTML
shell with the page object embedded in ``data-page``.
"""
from typing import Any, Dict, Optional

from flask import current_app, get_flashed_messages, jsonify, redirect, render_template, request, session

from shopcms.normalizers.user import normalize_user
from shopcms.utils.decorators import current_user_or_none
from shopcms.utils.http import is_inertia_request

ERRORS_SESSION_KEY = "_errors"


def page_url() -> str:
    return request.full_path.rstrip("?")


def shared_props() -> Dict[str, Any]:
    flashed = get_flashed_messages(with_categories=True)

    flash_props: Dict[str, Optional[str]] = {"success": None, "error": None}
    for category, message in flashed:
        flash_props[category] = message

    return {
        "auth": {"user": normalize_user(current_user_or_none())},
        "flash": flash_props,
        "toasts": [{"type": category, "message": message} for category, message in flashed],
        "errors": session.pop(ERRORS_SESSION_KEY, {}),
    }


def render_page(component: str, props: Optional[Dict[str, Any]] = None, *, status: int = 200):
    page = {
        "component": component,
        "props": {**shared_props(), **(props or {})},
        "url": page_url(),
        "version": current_app.config["INERTIA_VERSION"],
    }

    if is_inertia_request():
        response = jsonify(page)
        response.status_code = status
        response.headers["X-Inertia"] = "true"
        response.vary.add("X-Inertia")
        return response

    return render_template("app.html", page=page), status


def share_errors(errors: Dict[str, str]) -> None:
    """Field errors for the next rendered page."""
    session[ERRORS_SESSION_KEY] = errors


def redirect_back(fallback: str = "/"):
    return redirect(request.referrer or fallback)


def location(url: str):
    """Forces a full page load on the client (external or asset-stale visits)."""
    if is_inertia_request():
        response = current_app.response_class(status=409)
        response.headers["X-Inertia-Location"] = url
        return response
    return redirect(url)
