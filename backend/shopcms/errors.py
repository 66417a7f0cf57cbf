from flask import current_app, jsonify, redirect
from werkzeug.exceptions import HTTPException

from shopcms.domain.invariants.exceptions import InvariantViolation
from shopcms.extensions import jwt
from shopcms.inertia import redirect_back, render_page, share_errors
from shopcms.utils.http import wants_json
from shopcms.utils.validation import ValidationFailed

LOGIN_URL = "/admin/login"


def _field_errors(errors, message):
    if wants_json():
        return jsonify({"message": message, "errors": errors}), 422

    share_errors(errors)
    return redirect_back()


def register_error_handlers(app):
    @app.errorhandler(ValidationFailed)
    def handle_validation_failed(error):
        return _field_errors(error.errors, error.message)

    @app.errorhandler(InvariantViolation)
    def handle_invariant_violation(error):
        return _field_errors({error.field or "form": str(error)}, str(error))

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        if wants_json():
            response = jsonify({"message": error.description, "status": error.code})
            response.status_code = error.code
            if error.code == 405 and error.valid_methods:
                response.headers["Allow"] = ", ".join(error.valid_methods)
            return response

        if error.code in (404, 403, 500, 503):
            return render_page("error", {"status": error.code, "message": error.description}, status=error.code)

        return error.get_response()

    @app.errorhandler(Exception)
    def handle_unexpected(error):
        current_app.logger.exception("Unhandled exception")

        message = "Server Error"
        if wants_json():
            return jsonify({"message": message}), 500
        return render_page("error", {"status": 500, "message": message}, status=500)


def _unauthenticated(reason):
    if wants_json():
        return jsonify({"message": reason}), 401
    return redirect(LOGIN_URL)


@jwt.unauthorized_loader
def missing_token(reason):
    return _unauthenticated("Unauthenticated.")


@jwt.invalid_token_loader
def invalid_token(reason):
    return _unauthenticated("Unauthenticated.")


@jwt.expired_token_loader
def expired_token(jwt_header, jwt_payload):
    return _unauthenticated("Your session has expired.")
