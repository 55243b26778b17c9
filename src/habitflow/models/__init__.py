"""SQLModel table exports."""

from .habit import Completion, Habit, HabitWithStats

__all__ = [
    "Completion",
    "Habit",
    "HabitWithStats",
]
