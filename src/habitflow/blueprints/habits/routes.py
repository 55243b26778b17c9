"""Habit routes."""

from __future__ import annotations

from flask import jsonify, request

from ...errors import HabitNotFoundError
from ...extensions import get_store
from ..forms import optional_date_arg, validate_payload
from . import bp
from .forms import HabitForm, HabitUpdateForm, ToggleForm


@bp.get("")
def list_habits():
    """List every habit with completion rate and completed-today flag."""

    target_date = optional_date_arg(request.args)
    habits = get_store().list_with_stats(target_date)
    return jsonify([habit.to_dict() for habit in habits])


@bp.get("/<int:habit_id>")
def get_habit(habit_id: int):
    habit = get_store().get_habit(habit_id)
    if habit is None:
        raise HabitNotFoundError(habit_id)
    return jsonify(habit.model_dump(mode="json"))


@bp.post("")
def create_habit():
    form = validate_payload(HabitForm, request.get_json(silent=True))
    habit = get_store().create_habit(
        name=form.name,
        description=form.description,
        icon=form.icon,
        color=form.color,
    )
    return jsonify(habit.model_dump(mode="json")), 201


@bp.patch("/<int:habit_id>")
def update_habit(habit_id: int):
    form = validate_payload(HabitUpdateForm, request.get_json(silent=True))
    habit = get_store().update_habit(habit_id, **form.changes())
    if habit is None:
        raise HabitNotFoundError(habit_id)
    return jsonify(habit.model_dump(mode="json"))


@bp.delete("/<int:habit_id>")
def delete_habit(habit_id: int):
    if not get_store().delete_habit(habit_id):
        raise HabitNotFoundError(habit_id)
    return "", 204


@bp.post("/<int:habit_id>/toggle")
def toggle_completion(habit_id: int):
    """Flip the completion state of one day and return the resulting record."""

    form = validate_payload(ToggleForm, request.get_json(silent=True))
    completion = get_store().toggle_completion(habit_id, form.day)
    return jsonify(completion.model_dump(mode="json"))
