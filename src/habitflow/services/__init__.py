"""Service layer: pure calculations and data helpers built on the store."""

from .stats import HabitSummary, summarize
from .streaks import completion_rate, compute_streaks, current_streak, longest_streak

__all__ = [
    "HabitSummary",
    "completion_rate",
    "compute_streaks",
    "current_streak",
    "longest_streak",
    "summarize",
]
