"""Streak and completion-rate calculations.

All functions are pure: they take calendar dates and counts and never touch
the store. Callers decide which date counts as "today".
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Collection, Iterable

from ..models.habit import Completion

ONE_DAY = timedelta(days=1)


def current_streak(completed_dates: Collection[date], reference_date: date) -> int:
    """Count consecutive completed days ending at ``reference_date`` inclusive.

    Returns 0 when ``reference_date`` itself is not completed.
    """

    days = set(completed_dates)
    streak = 0
    cursor = reference_date
    while cursor in days:
        streak += 1
        cursor -= ONE_DAY
    return streak


def longest_streak(completed_dates: Iterable[date]) -> int:
    """Return the longest run of consecutive days in ``completed_dates``.

    Input order and duplicates do not matter.
    """

    longest = 0
    run = 0
    previous: date | None = None
    for day in sorted(set(completed_dates)):
        if previous is not None and day - previous == ONE_DAY:
            run += 1
        else:
            run = 1
        longest = max(longest, run)
        previous = day
    return longest


def completion_rate(total_logged_days: int, completed_days: int) -> int:
    """Percentage of logged days that are completed, rounded to an integer.

    The denominator counts every day with a record, completed or not.
    """

    if total_logged_days <= 0:
        return 0
    # Half-up rounding; round() would send 2.5 to 2.
    return int(100 * completed_days / total_logged_days + 0.5)


def completed_days(completions: Iterable[Completion]) -> set[date]:
    """Return the dates whose record is currently marked complete."""

    return {completion.occurred_on for completion in completions if completion.completed}


def compute_streaks(completions: Iterable[Completion], *, today: date) -> tuple[int, int]:
    """Return (current_streak, longest_streak) from a habit's completion records."""

    days = completed_days(completions)
    return current_streak(days, today), longest_streak(days)


__all__ = [
    "completed_days",
    "completion_rate",
    "compute_streaks",
    "current_streak",
    "longest_streak",
]
