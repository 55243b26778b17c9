"""SQLModel implementation of the habit store."""

from __future__ import annotations

import threading
from collections import defaultdict
from contextlib import AbstractContextManager
from datetime import date
from typing import Callable, Optional

from sqlmodel import Session, select

from ...constants.palette import DEFAULT_COLOR, DEFAULT_ICON
from ...dates import utc_today
from ...errors import HabitNotFoundError
from ...logging_config import get_logger
from ...models.habit import Completion, Habit, HabitWithStats
from ...services.streaks import completed_days, completion_rate, compute_streaks
from .completion import SQLModelCompletionLog

SessionFactory = Callable[[], AbstractContextManager[Session]]

UPDATABLE_FIELDS = frozenset({"name", "description", "icon", "color"})

logger = get_logger(__name__)


class SQLModelHabitStore:
    """Owns habits and their completion logs and keeps cached streaks current.

    Every operation, reads included, holds one re-entrant lock and runs in a
    single transaction. A habit's two streak fields always change together,
    and an in-memory database shares one connection between all sessions.
    ``clock`` is the only source of "today".
    """

    def __init__(self, session_factory: SessionFactory, *, clock: Callable[[], date] = utc_today):
        self.session_factory = session_factory
        self.clock = clock
        self._lock = threading.RLock()

    # Habit operations
    def list_habits(self) -> list[Habit]:
        with self._lock, self.session_factory() as session:
            rows = list(session.exec(select(Habit).order_by(Habit.id)).all())  # type: ignore[arg-type]
            session.expunge_all()
            return rows

    def get_habit(self, habit_id: int) -> Optional[Habit]:
        with self._lock, self.session_factory() as session:
            habit = session.get(Habit, habit_id)
            if habit:
                session.expunge(habit)
            return habit

    def create_habit(
        self,
        name: str,
        description: Optional[str] = None,
        icon: Optional[str] = None,
        color: Optional[str] = None,
    ) -> Habit:
        with self._lock, self.session_factory() as session:
            habit = Habit(
                name=name,
                description=description,
                icon=icon or DEFAULT_ICON,
                color=color or DEFAULT_COLOR,
                current_streak=0,
                longest_streak=0,
                created_on=self.clock(),
            )
            session.add(habit)
            session.commit()
            session.refresh(habit)
            session.expunge(habit)
        logger.info("Habit created", extra={"habit_id": habit.id})
        return habit

    def update_habit(self, habit_id: int, **fields: object) -> Optional[Habit]:
        changes = {key: value for key, value in fields.items() if key in UPDATABLE_FIELDS}
        with self._lock, self.session_factory() as session:
            habit = session.get(Habit, habit_id)
            if habit is None:
                logger.warning("Update for unknown habit", extra={"habit_id": habit_id})
                return None
            for key, value in changes.items():
                setattr(habit, key, value)
            session.add(habit)
            session.commit()
            session.refresh(habit)
            session.expunge(habit)
        logger.info("Habit updated", extra={"habit_id": habit_id, "fields": sorted(changes)})
        return habit

    def delete_habit(self, habit_id: int) -> bool:
        with self._lock, self.session_factory() as session:
            habit = session.get(Habit, habit_id)
            if habit is None:
                logger.warning("Delete for unknown habit", extra={"habit_id": habit_id})
                return False
            removed = SQLModelCompletionLog(session).delete_by_habit(habit_id)
            session.delete(habit)
            session.commit()
        logger.info("Habit deleted", extra={"habit_id": habit_id, "completions_removed": removed})
        return True

    # Completion operations
    def list_completions(
        self, habit_id: Optional[int] = None, day: Optional[date] = None
    ) -> list[Completion]:
        with self._lock, self.session_factory() as session:
            rows = SQLModelCompletionLog(session).get(habit_id=habit_id, day=day)
            session.expunge_all()
            return rows

    def toggle_completion(self, habit_id: int, day: date) -> Completion:
        with self._lock, self.session_factory() as session:
            habit = session.get(Habit, habit_id)
            if habit is None:
                logger.warning("Toggle for unknown habit", extra={"habit_id": habit_id})
                raise HabitNotFoundError(habit_id)
            log = SQLModelCompletionLog(session)
            completion = log.toggle(habit_id, day)
            self._apply_streaks(session, habit, log)
            session.commit()
            session.refresh(completion)
            session.expunge(completion)
        logger.info(
            "Completion toggled",
            extra={"habit_id": habit_id, "day": day.isoformat(), "completed": completion.completed},
        )
        return completion

    # Streaks
    def recompute_streaks(self, habit_id: int) -> Optional[Habit]:
        with self._lock, self.session_factory() as session:
            habit = session.get(Habit, habit_id)
            if habit is None:
                return None
            self._apply_streaks(session, habit, SQLModelCompletionLog(session))
            session.commit()
            session.refresh(habit)
            session.expunge(habit)
            return habit

    def recompute_all(self) -> int:
        """Re-evaluate every habit against today so lapsed streaks drop to zero."""

        with self._lock, self.session_factory() as session:
            log = SQLModelCompletionLog(session)
            habits = list(session.exec(select(Habit)).all())
            for habit in habits:
                self._apply_streaks(session, habit, log)
            session.commit()
        logger.info("Streaks recomputed", extra={"habits": len(habits)})
        return len(habits)

    def _apply_streaks(self, session: Session, habit: Habit, log: SQLModelCompletionLog) -> None:
        current, longest = compute_streaks(log.get(habit_id=habit.id), today=self.clock())
        habit.current_streak = current
        # The cached longest streak is a running maximum; un-toggling history never lowers it.
        habit.longest_streak = max(habit.longest_streak, longest)
        session.add(habit)

    # Statistics
    def list_with_stats(self, target_date: Optional[date] = None) -> list[HabitWithStats]:
        target = target_date or self.clock()
        with self._lock, self.session_factory() as session:
            habits = list(session.exec(select(Habit).order_by(Habit.id)).all())  # type: ignore[arg-type]
            records_by_habit: dict[int, list[Completion]] = defaultdict(list)
            for record in SQLModelCompletionLog(session).get():
                records_by_habit[record.habit_id].append(record)

            results: list[HabitWithStats] = []
            for habit in habits:
                records = records_by_habit.get(habit.id, [])  # type: ignore[arg-type]
                done = completed_days(records)
                results.append(
                    HabitWithStats.from_habit(
                        habit,
                        completion_rate=completion_rate(len(records), len(done)),
                        completed_today=target in done,
                    )
                )
            return results


__all__ = ["SQLModelHabitStore", "UPDATABLE_FIELDS"]
