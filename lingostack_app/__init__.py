"""Application factory for the LingoStack app."""

from __future__ import annotations

from flask import Flask

from .config import Config
from .core.bootstrap import (
    configure_logging,
    register_blueprints,
    register_context_processors,
    register_error_handlers,
    register_extensions,
)

__all__ = ["create_app"]


def create_app(config_class: type[Config] = Config) -> Flask:
    """Create and configure a Flask application instance."""

    app = Flask(__name__)
    app.config.from_object(config_class)
    config_class.init_app(app)

    configure_logging(app)
    register_extensions(app)
    register_context_processors(app)
    register_error_handlers(app)
    register_blueprints(app)

    return app
