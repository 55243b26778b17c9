"""Habit request schemas."""

from __future__ import annotations

from datetime import date
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...dates import parse_iso_date


class HabitForm(BaseModel):
    """Payload for creating a habit."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    name: str = Field(description="Short label for the habit", max_length=100)
    description: Optional[str] = Field(default=None, description="Optional details", max_length=400)
    icon: Optional[str] = Field(default=None, description="Opaque icon token", max_length=64)
    color: Optional[str] = Field(default=None, description="Opaque color token", max_length=64)

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        if not value:
            raise ValueError("Please provide a habit name.")
        return value

    @field_validator("description")
    @classmethod
    def blank_description_to_none(cls, value: Optional[str]) -> Optional[str]:
        return value or None


class HabitUpdateForm(BaseModel):
    """Partial update; streak fields, ids and dates are silently dropped."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    name: Optional[str] = Field(default=None, max_length=100)
    description: Optional[str] = Field(default=None, max_length=400)
    icon: Optional[str] = Field(default=None, max_length=64)
    color: Optional[str] = Field(default=None, max_length=64)

    @field_validator("name", "icon", "color")
    @classmethod
    def reject_empty(cls, value: Optional[str]) -> str:
        if not value:
            raise ValueError("Value cannot be empty.")
        return value

    @field_validator("description")
    @classmethod
    def blank_description_to_none(cls, value: Optional[str]) -> Optional[str]:
        return value or None

    def changes(self) -> dict[str, Any]:
        """Return only the fields the client actually sent."""

        return self.model_dump(exclude_unset=True)


class ToggleForm(BaseModel):
    """Body of a completion toggle: ``{"date": "YYYY-MM-DD"}``."""

    day: date = Field(alias="date")

    @field_validator("day", mode="before")
    @classmethod
    def parse_day(cls, value: Any) -> date:
        if isinstance(value, date):
            return value
        if not isinstance(value, str):
            raise ValueError("Enter a valid date (YYYY-MM-DD).")
        try:
            return parse_iso_date(value)
        except ValueError as exc:
            raise ValueError("Enter a valid date (YYYY-MM-DD).") from exc


__all__ = ["HabitForm", "HabitUpdateForm", "ToggleForm"]
