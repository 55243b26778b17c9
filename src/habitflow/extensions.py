"""Store wiring for the Flask application."""

from __future__ import annotations

from datetime import date
from typing import Callable, Optional

from flask import Flask, current_app

from .config import BaseConfig
from .dates import utc_today
from .infra.database import bootstrap_database
from .infra.repositories import SQLModelHabitStore
from .logging_config import get_logger

EXTENSION_KEY = "habitflow"

logger = get_logger(__name__)


def init_store(
    app: Flask,
    config: BaseConfig,
    *,
    clock: Callable[[], date] = utc_today,
) -> SQLModelHabitStore:
    """Construct the process-wide store once and attach it to ``app``."""

    engine, session_factory = bootstrap_database(config)
    store = SQLModelHabitStore(session_factory, clock=clock)
    app.extensions[EXTENSION_KEY] = {"engine": engine, "store": store}
    logger.info("Habit store ready", extra={"database_url": config.DATABASE_URL})

    if config.SEED_SAMPLE_DATA:
        from .services.seed import seed_sample_data

        seed_sample_data(store)
    return store


def get_store(app: Optional[Flask] = None) -> SQLModelHabitStore:
    """Return the store attached to ``app`` (or the current app)."""

    target = app or current_app
    state = target.extensions.get(EXTENSION_KEY)
    if state is None:
        raise RuntimeError("Habit store not initialized")
    return state["store"]


__all__ = ["get_store", "init_store"]
