"""Blueprint exports."""

from . import completions, habits, stats

__all__ = [
    "completions",
    "habits",
    "stats",
]
