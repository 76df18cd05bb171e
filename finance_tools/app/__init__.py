"""Application factory and app-wide configuration."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from flask import Flask
from flask_cors import CORS

from finance_tools.app.api.routes import api_bp


def create_app(test_config: Optional[Mapping[str, Any]] = None) -> Flask:
    """Build the Flask app instance.

    Settings load in order: ``finance_tools.app.config`` defaults,
    ``FINANCE_TOOLS_*`` environment variables, then ``test_config``.
    """
    app = Flask(__name__)
    app.config.from_object("finance_tools.app.config")
    app.config.from_prefixed_env("FINANCE_TOOLS")
    if test_config:
        app.config.update(test_config)

    app.logger.setLevel(app.config["LOG_LEVEL"])

    CORS(
        app,
        resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    return app
