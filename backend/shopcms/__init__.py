from flask import Flask, send_from_directory
from .config import config_by_name
from .extensions import db, migrate, jwt, csrf, mail
from .api.shop import shop_api_bp
from .web.admin import admin_bp
from .web.storefront import storefront_bp
from .middleware.inertia_middleware import inertia_middleware, MethodOverrideMiddleware
from .errors import register_error_handlers
from .cli import register_commands
from flask_swagger_ui import get_swaggerui_blueprint
import logging
import os

SWAGGER_URL = "/swagger"
OPENAPI_URL = "/openapi/shop.yaml"


def create_app(config_name: str = "development") -> Flask:
    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])

    app.logger.setLevel(getattr(logging, str(app.config["LOG_LEVEL"]).upper(), logging.INFO))

    # -------------------------------------------------
    # Extensions
    # -------------------------------------------------
    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)
    csrf.init_app(app)
    mail.init_app(app)

    # -------------------------------------------------
    # Middleware
    # -------------------------------------------------
    inertia_middleware(app)
    app.wsgi_app = MethodOverrideMiddleware(app.wsgi_app)

    # -------------------------------------------------
    # Blueprints
    # -------------------------------------------------
    app.register_blueprint(shop_api_bp, url_prefix="/api")
    app.register_blueprint(admin_bp, url_prefix="/admin")
    app.register_blueprint(storefront_bp)
    register_error_handlers(app)
    register_commands(app)

    # -------------------------------------------------
    # OpenAPI document + Swagger UI for the JSON API
    # -------------------------------------------------
    @app.route(OPENAPI_URL, methods=["GET"], endpoint="openapi_shop")
    def serve_openapi():
        return send_from_directory(
            os.path.join(app.root_path, "api", "shop"),
            "openapi.yaml",
            mimetype="application/yaml",
        )

    app.register_blueprint(
        get_swaggerui_blueprint(
            SWAGGER_URL,
            OPENAPI_URL,
            config={"app_name": "Shop API", "deepLinking": True},
        ),
        url_prefix=SWAGGER_URL,
    )

    return app
