from flask import flash, redirect
from flask_jwt_extended import set_access_cookies, unset_jwt_cookies

from shopcms.application.auth.login import authenticate_admin, issue_access_token
from shopcms.inertia import render_page
from shopcms.utils.decorators import current_user_or_none
from shopcms.utils.forms import request_payload
from . import admin_bp

DASHBOARD_URL = "/admin"


@admin_bp.route("/login", methods=["GET"])
def login_form():
    user = current_user_or_none()
    if user is not None and user.is_admin:
        return redirect(DASHBOARD_URL)

    return render_page("auth/login", {"status": None})


@admin_bp.route("/login", methods=["POST"])
def login():
    user = authenticate_admin(data=request_payload())

    response = redirect(DASHBOARD_URL)
    set_access_cookies(response, issue_access_token(user))
    flash(f"Welcome back, {user.name or user.email}!", "success")
    return response


@admin_bp.route("/logout", methods=["POST"])
def logout():
    response = redirect("/admin/login")
    unset_jwt_cookies(response)
    return response
