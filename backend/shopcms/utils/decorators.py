from functools import wraps
from flask import flash, g, jsonify, redirect
from flask_jwt_extended import get_jwt, get_jwt_identity, jwt_required, verify_jwt_in_request
from flask_jwt_extended.exceptions import JWTExtendedException
from jwt.exceptions import PyJWTError

from shopcms.models.user import User
from shopcms.utils.http import wants_json


def roles_required(*allowed_roles):
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            claims = get_jwt()

            if claims.get("role") not in allowed_roles:
                if wants_json():
                    return jsonify({"error": "Insufficient permissions"}), 403
                flash("Unauthorized. Admin access required.", "error")
                return redirect("/")

            g.current_user_id = get_jwt_identity()
            return fn(*args, **kwargs)
        return wrapper
    return decorator


def admin_required(fn):
    """jwt_required() + roles_required("admin")."""
    return jwt_required()(roles_required("admin")(fn))


def current_user_or_none():
    """The signed-in user, or None for guests and stale/invalid tokens."""
    if "current_user" in g:
        return g.current_user

    user = None
    try:
        verify_jwt_in_request(optional=True)
        identity = get_jwt_identity()
    except (JWTExtendedException, PyJWTError):
        identity = None

    if identity:
        user = User.query.filter_by(id=identity, is_active=True).first()

    g.current_user = user
    return user
