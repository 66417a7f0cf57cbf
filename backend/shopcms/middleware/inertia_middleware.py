from flask import current_app, g, request
from flask_wtf.csrf import generate_csrf

from shopcms.inertia import location
from shopcms.utils.http import is_inertia_request

REDIRECT_TO_SEE_OTHER = {"PUT", "PATCH", "DELETE"}


def inertia_middleware(app):
    @app.before_request
    def reset_shared_user():
        # auth.user is resolved once per request
        g.pop("current_user", None)

    @app.before_request
    def check_asset_version():
        if request.method != "GET" or not is_inertia_request():
            return None

        client_version = request.headers.get("X-Inertia-Version")
        if client_version and client_version != current_app.config["INERTIA_VERSION"]:
            return location(request.url)
        return None

    @app.after_request
    def finalize_response(response):
        # Browsers replay the original verb on 302; after PUT/PATCH/DELETE
        # the follow-up must be a GET.
        if response.status_code == 302 and (
            request.method in REDIRECT_TO_SEE_OTHER
            or request.form.get("_method", "").upper() in REDIRECT_TO_SEE_OTHER
        ):
            response.status_code = 303

        if is_inertia_request():
            response.vary.add("X-Inertia")

        if current_app.config.get("WTF_CSRF_ENABLED", True) and not request.path.startswith("/api/"):
            response.set_cookie(
                "XSRF-TOKEN",
                generate_csrf(),
                samesite="Lax",
                secure=current_app.config.get("SESSION_COOKIE_SECURE", False),
            )

        return response


class MethodOverrideMiddleware:
    """
    WSGI middleware honouring ``X-HTTP-Method-Override`` on POST requests.
    """

    allowed_methods = frozenset({"PUT", "PATCH", "DELETE"})

    def __init__(self, app):
        self.app = app

    def __call__(self, environ, start_response):
        if environ.get("REQUEST_METHOD") == "POST":
            override = environ.get("HTTP_X_HTTP_METHOD_OVERRIDE", "").upper()
            if override in self.allowed_methods:
                environ["REQUEST_METHOD"] = override
        return self.app(environ, start_response)
