"""Aggregate statistics across all habits for the stats dashboard."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Sequence

from ..models.habit import HabitWithStats


@dataclass(slots=True)
class HabitSummary:
    total_habits: int
    longest_streak: int
    average_completion_rate: int
    active_streak_days: int
    completed_today: int

    def to_dict(self) -> dict:
        return asdict(self)


def summarize(habits: Sequence[HabitWithStats]) -> HabitSummary:
    """Roll per-habit statistics up into dashboard totals."""

    if not habits:
        return HabitSummary(
            total_habits=0,
            longest_streak=0,
            average_completion_rate=0,
            active_streak_days=0,
            completed_today=0,
        )

    rate_total = sum(habit.completion_rate for habit in habits)
    return HabitSummary(
        total_habits=len(habits),
        longest_streak=max(habit.longest_streak for habit in habits),
        average_completion_rate=int(rate_total / len(habits) + 0.5),
        active_streak_days=sum(habit.current_streak for habit in habits),
        completed_today=sum(1 for habit in habits if habit.completed_today),
    )


__all__ = ["HabitSummary", "summarize"]
