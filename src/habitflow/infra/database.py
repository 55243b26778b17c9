"""Database infrastructure: engine, schema, and session factories."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Mapping, Tuple

from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel, create_engine

from ..config import BaseConfig


def apply_sqlite_pragmas(engine: Engine, pragmas: Mapping[str, str]) -> None:
    """Run ``PRAGMA name=value`` on every new SQLite connection.

    ``foreign_keys`` is off by default in SQLite, so without this a completion
    could point at a habit that no longer exists.
    """

    if engine.dialect.name != "sqlite" or not pragmas:
        return

    @event.listens_for(engine, "connect")
    def _set_pragmas(dbapi_connection, connection_record) -> None:  # noqa: ARG001
        cursor = dbapi_connection.cursor()
        try:
            for name, value in pragmas.items():
                cursor.execute(f"PRAGMA {name}={value}")
        finally:
            cursor.close()


def create_db_engine(config: BaseConfig) -> Engine:
    """Create SQLModel engine from configuration, with SQLite pragmas applied."""
    engine = create_engine(config.DATABASE_URL, **config.sqlalchemy_engine_options())
    apply_sqlite_pragmas(engine, config.SQLITE_PRAGMAS)
    return engine


def init_database(engine: Engine) -> None:
    """Create the habit and completion tables if they are missing."""
    from .. import models  # noqa: F401  # registers tables with SQLModel metadata

    SQLModel.metadata.create_all(engine)


def create_session_factory(engine: Engine):
    """Return a callable producing sessions that commit on success and roll back on error."""

    @contextmanager
    def factory() -> Iterator[Session]:
        session = Session(engine, expire_on_commit=False)
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    return factory


def bootstrap_database(config: BaseConfig | None = None) -> Tuple[Engine, object]:
    """Build the engine, create the schema and return (engine, session_factory)."""

    cfg = config or BaseConfig()
    engine = create_db_engine(cfg)
    init_database(engine)
    return engine, create_session_factory(engine)


__all__ = [
    "apply_sqlite_pragmas",
    "bootstrap_database",
    "create_db_engine",
    "create_session_factory",
    "init_database",
]
