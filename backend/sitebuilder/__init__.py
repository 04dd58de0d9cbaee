from flask import Flask, send_file, current_app
from .config import config_by_name
from .extensions import db, migrate, jwt, render_cache
from .api.v1 import v1_bp
from .views import auth_bp, dashboard_bp, public_bp
from .middleware.access_policy import access_policy
from .errors import register_error_handlers
from flask_swagger_ui import get_swaggerui_blueprint
import os


def create_app(config_name: str = "development") -> Flask:
    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])

    # -------------------------------------------------
    # Extensions
    # -------------------------------------------------
    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)
    render_cache.init_app(app)

    # -------------------------------------------------
    # Middleware
    # -------------------------------------------------
    access_policy(app)

    # -------------------------------------------------
    # Blueprints
    # -------------------------------------------------
    app.register_blueprint(v1_bp, url_prefix="/api/v1")
    app.register_blueprint(auth_bp)
    app.register_blueprint(dashboard_bp, url_prefix="/admin")
    app.register_blueprint(public_bp, url_prefix="/s")
    register_error_handlers(app)

    # -------------------------------------------------
    # Serve OpenAPI YAML (PUBLIC)
    # -------------------------------------------------
    @app.route("/openapi/builder.yaml", methods=["GET"], endpoint="openapi_builder")
    def serve_openapi():
        spec_path = os.path.join(
            current_app.root_path,
            "api",
            "v1",
            "builder_openapi.yaml",
        )

        if not os.path.exists(spec_path):
            raise FileNotFoundError("builder_openapi.yaml not found")

        return send_file(
            spec_path,
            mimetype="application/yaml",
            as_attachment=False,
        )

    # -------------------------------------------------
    # Swagger UI
    # -------------------------------------------------
    SWAGGER_URL = "/swagger"
    API_URL = "/openapi/builder.yaml"

    swaggerui_blueprint = get_swaggerui_blueprint(
        SWAGGER_URL,
        API_URL,
        config={
            "app_name": "SiteBuilder API",
            "deepLinking": True,
            "persistAuthorization": True,
        },
    )

    app.register_blueprint(swaggerui_blueprint, url_prefix=SWAGGER_URL)

    return app
