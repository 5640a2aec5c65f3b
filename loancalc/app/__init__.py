"""Application factory and app-wide configuration."""

from typing import Optional

from flask import Flask
from flask_cors import CORS

from loancalc.app.api.routes import api_bp
from loancalc.app.config import Settings
from loancalc.logging_config import configure_logging


def create_app(settings: Optional[Settings] = None) -> Flask:
    """Build the Flask app instance."""
    settings = settings or Settings.from_env()
    configure_logging(level=settings.log_level, format_json=settings.log_json)

    app = Flask(__name__)
    app.config["LOANCALC_SETTINGS"] = settings

    CORS(
        app,
        resources={r"/api/*": {"origins": list(settings.cors_origins)}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    return app
