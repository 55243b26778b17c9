"""Habit tracking data structures."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import date
from typing import Any, ClassVar, Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel

from ..constants.palette import DEFAULT_COLOR, DEFAULT_ICON
from ..dates import utc_today


class Habit(SQLModel, table=True):
    """A user-defined habit tracked once per calendar day.

    ``current_streak`` and ``longest_streak`` are cached values written only
    by streak recomputation, never by clients.
    """

    __tablename__: ClassVar[str] = "habit"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(nullable=False, max_length=100, index=True)
    description: Optional[str] = Field(default=None, max_length=400)
    icon: str = Field(default=DEFAULT_ICON, nullable=False, max_length=64)
    color: str = Field(default=DEFAULT_COLOR, nullable=False, max_length=64)
    current_streak: int = Field(default=0, nullable=False, ge=0)
    longest_streak: int = Field(default=0, nullable=False, ge=0)
    created_on: date = Field(default_factory=utc_today, nullable=False)


class Completion(SQLModel, table=True):
    """Completion state of a habit on one calendar day.

    At most one row exists per (habit_id, occurred_on); toggling flips
    ``completed`` in place.
    """

    __tablename__: ClassVar[str] = "completion"
    __table_args__ = (
        UniqueConstraint("habit_id", "occurred_on", name="uq_completion_habit_day"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    habit_id: int = Field(foreign_key="habit.id", nullable=False, index=True)
    occurred_on: date = Field(nullable=False, index=True)
    completed: bool = Field(default=True, nullable=False)


@dataclass(frozen=True, slots=True)
class HabitWithStats:
    """Read model pairing a habit's cached streaks with live statistics."""

    id: int
    name: str
    description: Optional[str]
    icon: str
    color: str
    current_streak: int
    longest_streak: int
    created_on: date
    completion_rate: int
    completed_today: bool

    @classmethod
    def from_habit(cls, habit: Habit, *, completion_rate: int, completed_today: bool) -> "HabitWithStats":
        return cls(
            id=habit.id,  # type: ignore[arg-type]
            name=habit.name,
            description=habit.description,
            icon=habit.icon,
            color=habit.color,
            current_streak=habit.current_streak,
            longest_streak=habit.longest_streak,
            created_on=habit.created_on,
            completion_rate=completion_rate,
            completed_today=completed_today,
        )

    def to_dict(self) -> dict[str, Any]:
        payload = asdict(self)
        payload["created_on"] = self.created_on.isoformat()
        return payload
