"""Flask application factory."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from flask import Flask
from flask_cors import CORS

from .routes import api


def create_app(config: Optional[Mapping[str, Any]] = None) -> Flask:
    """Build the Flask app with CORS enabled and the API blueprint registered."""
    app = Flask(__name__)
    app.json.sort_keys = False
    if config:
        app.config.update(config)

    CORS(app)
    app.register_blueprint(api)
    return app

__all__ = ["create_app"]
