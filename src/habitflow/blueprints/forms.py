"""Shared helpers for request schema validation."""

from __future__ import annotations

from datetime import date
from typing import Any, Mapping, Optional, TypeVar

from pydantic import BaseModel, ValidationError

from ..dates import parse_iso_date
from ..errors import HabitValidationError

FormT = TypeVar("FormT", bound=BaseModel)


def structure_errors(exc: ValidationError) -> dict[str, list[str]]:
    """Group pydantic errors by top-level field name."""

    structured: dict[str, list[str]] = {}
    for error in exc.errors(include_url=False):
        loc = error.get("loc", ())
        key = str(loc[0]) if loc else "__root__"
        structured.setdefault(key, []).append(error.get("msg", "Invalid value"))
    return structured


def validate_payload(form_cls: type[FormT], payload: Any) -> FormT:
    """Validate a JSON body, raising ``HabitValidationError`` on failure."""

    if not isinstance(payload, Mapping):
        raise HabitValidationError({"__root__": ["Expected a JSON object."]})
    try:
        return form_cls.model_validate(dict(payload))
    except ValidationError as exc:
        raise HabitValidationError(structure_errors(exc)) from exc


def optional_date_arg(args: Mapping[str, str], name: str = "date") -> Optional[date]:
    """Parse an optional ``YYYY-MM-DD`` query argument."""

    raw = args.get(name)
    if raw is None or not raw.strip():
        return None
    try:
        return parse_iso_date(raw)
    except ValueError as exc:
        raise HabitValidationError({name: ["Enter a valid date (YYYY-MM-DD)."]}, "Invalid date") from exc


__all__ = ["optional_date_arg", "structure_errors", "validate_payload"]
