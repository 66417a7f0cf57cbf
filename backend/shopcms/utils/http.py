from flask import request


def is_inertia_request() -> bool:
    return request.headers.get("X-Inertia", "").lower() == "true"


def wants_json() -> bool:
    """
    JSON API callers (everything under /api, or plain XHR asking for JSON)
    get JSON errors. Inertia visits are page navigations, not JSON callers.
    """
    if request.path.startswith("/api/"):
        return True
    if is_inertia_request():
        return False
    return request.is_json or request.accept_mimetypes.best == "application/json"
