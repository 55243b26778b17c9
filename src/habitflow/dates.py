"""Calendar helpers. Every "today" in HabitFlow is a UTC calendar date."""

from __future__ import annotations

from datetime import date, datetime, timezone


def utc_today() -> date:
    """Return the current calendar date from UTC components."""

    return datetime.now(timezone.utc).date()


def parse_iso_date(value: str) -> date:
    """Parse a strict ``YYYY-MM-DD`` string.

    Raises:
        ValueError: if the value is not a calendar date in that form.
    """

    value = value.strip()
    if len(value) != 10:
        raise ValueError(f"Expected YYYY-MM-DD, got {value!r}")
    return datetime.strptime(value, "%Y-%m-%d").date()


__all__ = ["parse_iso_date", "utc_today"]
