"""Repository protocol definitions for domain layer."""

from .habit import CompletionLog, HabitStore

__all__ = [
    "CompletionLog",
    "HabitStore",
]
