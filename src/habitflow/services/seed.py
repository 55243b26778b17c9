"""Sample data for first runs and demos."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional

from ..domain.repositories import HabitStore
from ..logging_config import get_logger

logger = get_logger(__name__)

SAMPLE_HABITS: tuple[dict[str, str], ...] = (
    {
        "name": "Drink 8 glasses of water",
        "description": "Stay hydrated throughout the day",
        "icon": "fas fa-tint",
        "color": "blue",
    },
    {
        "name": "Read for 20 minutes",
        "description": "Any book or educational content",
        "icon": "fas fa-book",
        "color": "green",
    },
    {
        "name": "30 minutes of exercise",
        "description": "Any form of physical activity",
        "icon": "fas fa-dumbbell",
        "color": "orange",
    },
    {
        "name": "Meditate for 10 minutes",
        "description": "Mindfulness or breathing exercises",
        "icon": "fas fa-om",
        "color": "purple",
    },
)

# Day offsets completed by every sample habit (a five-day run).
SHARED_RUN_OFFSETS = (-7, -6, -5, -4, -3)
# Extra offsets completed only by the first two habits.
PARTIAL_OFFSETS = (-14, -13, -12, -20, -18, -16, -2, -1)


@dataclass(frozen=True)
class SeedSummary:
    habits: int
    completions: int


def seed_sample_data(store: HabitStore, *, today: Optional[date] = None) -> SeedSummary:
    """Create demo habits with a few streak patterns.

    Does nothing when the store already holds habits, so it is safe to run on
    every startup.
    """

    if store.list_habits():
        logger.info("Sample data skipped; habits already exist")
        return SeedSummary(habits=0, completions=0)

    anchor = today or store.clock()
    habits = [store.create_habit(**spec) for spec in SAMPLE_HABITS]

    toggles = 0
    for offset in SHARED_RUN_OFFSETS:
        for habit in habits:
            store.toggle_completion(habit.id, anchor + timedelta(days=offset))  # type: ignore[arg-type]
            toggles += 1
    for offset in PARTIAL_OFFSETS:
        for habit in habits[:2]:
            store.toggle_completion(habit.id, anchor + timedelta(days=offset))  # type: ignore[arg-type]
            toggles += 1

    logger.info("Sample data seeded", extra={"habits": len(habits), "completions": toggles})
    return SeedSummary(habits=len(habits), completions=toggles)


__all__ = ["SAMPLE_HABITS", "SeedSummary", "seed_sample_data"]
