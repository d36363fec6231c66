"""Bootstrap helpers for configuring the Flask application."""

from __future__ import annotations

from typing import Any

from flask import Flask

from ..extensions import csrf_protect
from .error_handlers import register_error_handlers as _register_error_handlers
from .logging_config import setup_logging
from .module_registry import register_default_modules


def configure_logging(app: Flask) -> None:
    """Share one set of log handlers between ``app.logger`` and the ``lingostack`` loggers."""

    log_level = "DEBUG" if app.debug else app.config.get("LOG_LEVEL", "INFO")
    setup_logging(
        app,
        log_level=log_level,
        log_dir=app.config.get("LOG_DIR"),
        json_format=app.config.get("LOG_JSON", False),
        to_file=app.config.get("LOG_TO_FILE", True),
    )
    app.logger.debug("Flask app logger configured successfully.")


def register_extensions(app: Flask) -> None:
    """Initialize shared extensions with the Flask app instance."""

    csrf_protect.init_app(app)


def register_context_processors(app: Flask) -> None:
    """Register global template context processors."""

    @app.context_processor
    def inject_app_metadata() -> dict[str, Any]:
        return {"app_name": app.config.get("APP_NAME", "LingoStack")}


def register_error_handlers(app: Flask) -> None:
    """Attach the JSON/HTML error handlers."""

    _register_error_handlers(app)


def register_blueprints(app: Flask) -> None:
    """Register all default blueprints with the app."""

    register_default_modules(app)
