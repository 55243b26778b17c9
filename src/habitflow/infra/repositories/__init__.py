"""Concrete repository implementations using SQLModel."""

from .completion import SQLModelCompletionLog
from .habit import SQLModelHabitStore

__all__ = [
    "SQLModelCompletionLog",
    "SQLModelHabitStore",
]
