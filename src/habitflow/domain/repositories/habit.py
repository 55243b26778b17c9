"""Habit store and completion log protocols."""

from __future__ import annotations

from datetime import date
from typing import Callable, Optional, Protocol

from ...models.habit import Completion, Habit, HabitWithStats


class CompletionLog(Protocol):
    """The set of (habit, date, completed) records."""

    def get(self, habit_id: Optional[int] = None, day: Optional[date] = None) -> list[Completion]:
        """Return records matching the given filters, in insertion order."""
        ...

    def toggle(self, habit_id: int, day: date) -> Completion:
        """Create the record as completed, or flip an existing one."""
        ...

    def delete_by_habit(self, habit_id: int) -> int:
        """Remove every record belonging to a habit."""
        ...


class HabitStore(Protocol):
    """Store contract consumed by the API layer."""

    clock: Callable[[], date]

    def list_habits(self) -> list[Habit]:
        """List all habits."""
        ...

    def get_habit(self, habit_id: int) -> Optional[Habit]:
        """Retrieve a habit by ID."""
        ...

    def create_habit(
        self,
        name: str,
        description: Optional[str] = None,
        icon: Optional[str] = None,
        color: Optional[str] = None,
    ) -> Habit:
        """Create a habit with zeroed streaks."""
        ...

    def update_habit(self, habit_id: int, **fields: object) -> Optional[Habit]:
        """Merge name/description/icon/color into an existing habit."""
        ...

    def delete_habit(self, habit_id: int) -> bool:
        """Delete a habit and its completions."""
        ...

    def list_completions(
        self, habit_id: Optional[int] = None, day: Optional[date] = None
    ) -> list[Completion]:
        """List completion records."""
        ...

    def toggle_completion(self, habit_id: int, day: date) -> Completion:
        """Toggle a day's completion and refresh cached streaks."""
        ...

    def recompute_streaks(self, habit_id: int) -> Optional[Habit]:
        """Refresh cached streak fields for one habit."""
        ...

    def recompute_all(self) -> int:
        """Refresh cached streak fields for every habit."""
        ...

    def list_with_stats(self, target_date: Optional[date] = None) -> list[HabitWithStats]:
        """Habits merged with completion rate and completed-today flag."""
        ...
