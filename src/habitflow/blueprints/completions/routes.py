"""Completion routes."""

from __future__ import annotations

from typing import Mapping, Optional

from flask import jsonify, request

from ...errors import HabitValidationError
from ...extensions import get_store
from ..forms import optional_date_arg
from . import bp


def _habit_id_arg(args: Mapping[str, str]) -> Optional[int]:
    raw = (args.get("habit_id") or "").strip()
    if not raw:
        return None
    try:
        habit_id = int(raw)
    except ValueError:
        habit_id = 0
    if habit_id <= 0:
        raise HabitValidationError({"habit_id": ["Enter a positive integer."]}, "Invalid habit id")
    return habit_id


@bp.get("")
def list_completions():
    """List completion records, optionally filtered by habit and/or date."""

    habit_id = _habit_id_arg(request.args)
    day = optional_date_arg(request.args)
    completions = get_store().list_completions(habit_id=habit_id, day=day)
    return jsonify([completion.model_dump(mode="json") for completion in completions])
