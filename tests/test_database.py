"""Tests for engine wiring and schema constraints."""

from __future__ import annotations

import threading
from datetime import date, timedelta

import pytest
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from habitflow import get_store
from habitflow.config import TestingConfig
from habitflow.infra.database import bootstrap_database
from habitflow.models import Completion


@pytest.fixture
def memory_engine(tmp_path, monkeypatch):
    monkeypatch.setenv("HABITFLOW_DATA_DIR", str(tmp_path))
    engine, _ = bootstrap_database(TestingConfig())
    yield engine
    engine.dispose()


def test_foreign_keys_pragma_enabled(memory_engine):
    with Session(memory_engine) as session:
        assert session.execute(text("PRAGMA foreign_keys")).scalar_one() == 1


def test_completion_for_missing_habit_is_rejected(memory_engine):
    with Session(memory_engine) as session:
        session.add(Completion(habit_id=999, occurred_on=date(2024, 3, 10)))
        with pytest.raises(IntegrityError):
            session.commit()


def test_test_fixture_engine_enforces_foreign_keys(db_session):
    db_session.add(Completion(habit_id=12, occurred_on=date(2024, 3, 10)))
    with pytest.raises(IntegrityError):
        db_session.flush()
    db_session.rollback()


def test_reads_run_safely_alongside_toggles(app, today):
    """Reader threads on the shared in-memory connection see no errors while writes happen."""
    store = get_store(app)
    habit = store.create_habit("Drink water")
    errors: list[BaseException] = []
    done = threading.Event()

    def reader() -> None:
        while not done.is_set():
            try:
                store.list_completions(habit_id=habit.id)
                snapshot = store.get_habit(habit.id)
                assert snapshot is not None
                assert snapshot.longest_streak >= snapshot.current_streak
                store.list_habits()
                store.list_with_stats(today)
            except BaseException as exc:  # noqa: BLE001 - collected for the assertion below
                errors.append(exc)
                return

    readers = [threading.Thread(target=reader) for _ in range(4)]
    for thread in readers:
        thread.start()
    try:
        for i in range(205):
            store.toggle_completion(habit.id, today - timedelta(days=i % 10))
    finally:
        done.set()
        for thread in readers:
            thread.join()

    assert errors == []
    # the first five days were toggled an odd number of times
    assert len(store.list_completions(habit_id=habit.id)) == 5
