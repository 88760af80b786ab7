"""Application factory and app-wide configuration."""

from typing import Optional

from flask import Flask
from flask_cors import CORS

from interest_backend.app.api.routes import api_bp
from interest_backend.config import Settings, get_settings
from interest_backend.logging_config import setup_logging


def create_app(settings: Optional[Settings] = None) -> Flask:
    """Build the Flask app instance."""
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    app = Flask(__name__)
    app.config["SETTINGS"] = settings
    app.config["DEBUG"] = settings.debug

    CORS(
        app,
        resources={r"/api/*": {"origins": settings.origins}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    return app


def main() -> None:
    settings = get_settings()
    create_app(settings).run(host=settings.api_host, port=settings.api_port, debug=settings.debug)
