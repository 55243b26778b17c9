"""Error taxonomy surfaced by the habit store and request schemas."""

from __future__ import annotations


class HabitFlowError(Exception):
    """Base class for errors raised by HabitFlow."""

    status_code = 500
    code = "internal_error"

    def to_dict(self) -> dict:
        return {"error": self.code, "message": str(self)}


class NotFound(HabitFlowError):
    """A referenced entity does not exist."""

    status_code = 404
    code = "not_found"


class HabitNotFoundError(NotFound):
    code = "habit_not_found"

    def __init__(self, habit_id: int) -> None:
        super().__init__(f"Habit {habit_id} not found")
        self.habit_id = habit_id

    def to_dict(self) -> dict:
        payload = super().to_dict()
        payload["habit_id"] = self.habit_id
        return payload


class ValidationError(HabitFlowError):
    """Input failed schema validation before reaching the store."""

    status_code = 400
    code = "validation_error"


class HabitValidationError(ValidationError):
    """Validation failure with per-field messages."""

    def __init__(self, fields: dict[str, list[str]], message: str = "Invalid habit data") -> None:
        super().__init__(message)
        self.fields = fields

    def to_dict(self) -> dict:
        payload = super().to_dict()
        payload["fields"] = self.fields
        return payload


__all__ = [
    "HabitFlowError",
    "HabitNotFoundError",
    "HabitValidationError",
    "NotFound",
    "ValidationError",
]
