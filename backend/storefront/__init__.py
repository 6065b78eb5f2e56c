import logging
import os
from flask import Flask, send_file, current_app
from .config import config_by_name
from .extensions import db, migrate, editors
from .api.v1 import v1_bp
from .middleware.store_middleware import store_middleware
from .errors import register_error_handlers
from .models.storage_entry import SqlStorage
from .layout.storage import HttpRemoteSync
from flask_swagger_ui import get_swaggerui_blueprint


def create_app(config_name: str = "development") -> Flask:
    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])

    logging.getLogger("storefront").setLevel(app.config.get("LOG_LEVEL", "INFO"))

    # -------------------------------------------------
    # Extensions
    # -------------------------------------------------
    db.init_app(app)
    migrate.init_app(app, db)
    remote_url = app.config.get("LAYOUT_REMOTE_SYNC_URL")
    editors.init_app(
        app,
        storage_factory=lambda store_id: SqlStorage(app, store_id),
        remote_factory=(lambda store_id: HttpRemoteSync(remote_url, store_id)) if remote_url else None,
    )

    # -------------------------------------------------
    # Middleware
    # -------------------------------------------------
    store_middleware(app)

    # -------------------------------------------------
    # API Blueprints
    # -------------------------------------------------
    app.register_blueprint(v1_bp, url_prefix="/api/v1")
    register_error_handlers(app)

    # -------------------------------------------------
    # Serve OpenAPI YAML (PUBLIC, NO STORE)
    # -------------------------------------------------
    @app.route("/openapi/layout.yaml", methods=["GET"], endpoint="openapi_layout")
    def serve_openapi():
        spec_path = os.path.join(
            current_app.root_path,
            "api",
            "v1",
            "layout_openapi.yaml",
        )

        if not os.path.exists(spec_path):
            raise FileNotFoundError("layout_openapi.yaml not found")

        return send_file(
            spec_path,
            mimetype="application/yaml",
            as_attachment=False,
        )

    # -------------------------------------------------
    # Swagger UI
    # -------------------------------------------------
    SWAGGER_URL = "/swagger"
    API_URL = "/openapi/layout.yaml"

    swaggerui_blueprint = get_swaggerui_blueprint(
        SWAGGER_URL,
        API_URL,
        config={
            "app_name": "Storefront Layout API",
            "deepLinking": True,
        },
    )

    app.register_blueprint(swaggerui_blueprint, url_prefix=SWAGGER_URL)

    return app
