"""HabitFlow application factory."""

from __future__ import annotations

import os
from datetime import date
from importlib import import_module
from typing import Callable, Iterable, Optional

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from . import cli as _cli
from .config import BaseConfig, DevConfig, TestingConfig
from .dates import utc_today
from .errors import HabitFlowError
from .extensions import get_store, init_store
from .logging_config import get_logger, setup_logging

_CONFIG_MAP = {
    "development": DevConfig,
    "testing": TestingConfig,
    "default": BaseConfig,
}

logger = get_logger("app")


def _resolve_config(name: str | None) -> type[BaseConfig]:
    """Return the config class for the provided environment name."""

    if not name:
        return BaseConfig
    return _CONFIG_MAP.get(name.lower(), BaseConfig)


def _blueprint_paths() -> Iterable[str]:
    yield "habitflow.blueprints.habits"
    yield "habitflow.blueprints.completions"
    yield "habitflow.blueprints.stats"


def create_app(
    config_name: str | None = None,
    *,
    clock: Optional[Callable[[], date]] = None,
) -> Flask:
    """Create and configure the Flask application instance.

    ``clock`` overrides the store's notion of today; it defaults to the UTC
    calendar date.
    """

    app = Flask(__name__, instance_relative_config=True)
    config_cls = _resolve_config(config_name or os.getenv("HABITFLOW_ENV"))
    config_obj = config_cls()
    app.config.from_object(config_obj)
    app.config["HABITFLOW_CONFIG"] = config_obj

    setup_logging(config_obj)
    _register_blueprints(app)
    _register_error_handlers(app)
    init_store(app, config_obj, clock=clock or utc_today)
    _cli.init_app(app)

    return app


def _register_blueprints(app: Flask) -> None:
    """Import and register all blueprints declared in `_blueprint_paths`."""

    for dotted_path in _blueprint_paths():
        module = import_module(dotted_path)
        app.register_blueprint(getattr(module, "bp"))


def _register_error_handlers(app: Flask) -> None:
    """Render every error as JSON."""

    @app.errorhandler(HabitFlowError)
    def _handle_habitflow_error(exc: HabitFlowError):
        return jsonify(exc.to_dict()), exc.status_code

    @app.errorhandler(HTTPException)
    def _handle_http_error(exc: HTTPException):
        code = (exc.name or "error").lower().replace(" ", "_")
        return jsonify({"error": code, "message": exc.description}), exc.code or 500

    @app.errorhandler(Exception)
    def _handle_unexpected(exc: Exception):
        logger.exception("Unhandled error", extra={"error_type": type(exc).__name__})
        return jsonify({"error": "internal_error", "message": "Unexpected server error"}), 500


__all__ = ["BaseConfig", "DevConfig", "TestingConfig", "create_app", "get_store"]
