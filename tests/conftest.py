"""Pytest configuration and shared fixtures for HabitFlow tests.

Provides an isolated SQLite database per test, a store pinned to a fixed
"today", and a Flask test client built from the testing config.
"""

from __future__ import annotations

import tempfile
from datetime import date
from pathlib import Path

import pytest
from sqlmodel import Session, SQLModel, create_engine

from habitflow import create_app

# Import all models to ensure they're registered with SQLModel metadata
from habitflow.models import Completion, Habit  # noqa: F401
from habitflow.config import BaseConfig
from habitflow.infra.database import apply_sqlite_pragmas, create_session_factory
from habitflow.infra.repositories import SQLModelHabitStore

REFERENCE_DAY = date(2024, 3, 10)


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture(scope="function")
def db_engine():
    """Create an isolated SQLite database file for each test."""
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = Path(f.name)

    engine = create_engine(
        f"sqlite:///{db_path}", echo=False, connect_args={"check_same_thread": False}
    )
    apply_sqlite_pragmas(engine, BaseConfig.SQLITE_PRAGMAS)
    SQLModel.metadata.create_all(engine)

    yield engine

    engine.dispose()
    db_path.unlink(missing_ok=True)


@pytest.fixture(scope="function")
def db_session(db_engine):
    """Session for arranging and inspecting rows directly."""
    session = Session(db_engine, expire_on_commit=False)
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


@pytest.fixture(scope="function")
def session_factory(db_engine):
    return create_session_factory(db_engine)


# =============================================================================
# Store Fixtures
# =============================================================================


@pytest.fixture
def today() -> date:
    return REFERENCE_DAY


@pytest.fixture
def store(session_factory, today) -> SQLModelHabitStore:
    """Habit store whose clock always reports ``today``."""
    return SQLModelHabitStore(session_factory, clock=lambda: today)


@pytest.fixture
def habit_factory(store):
    """Factory for creating habits through the store."""

    def _create_habit(name: str = "Exercise", **fields) -> Habit:
        return store.create_habit(name=name, **fields)

    return _create_habit


# =============================================================================
# Flask Fixtures
# =============================================================================


@pytest.fixture
def app(tmp_path, monkeypatch, today):
    monkeypatch.setenv("HABITFLOW_DATA_DIR", str(tmp_path))
    monkeypatch.delenv("HABITFLOW_DATABASE_URL", raising=False)
    monkeypatch.delenv("HABITFLOW_SEED_SAMPLE_DATA", raising=False)
    app = create_app("testing", clock=lambda: today)
    app.config.update(TESTING=True)
    yield app


@pytest.fixture
def client(app):
    with app.test_client() as client:
        yield client
