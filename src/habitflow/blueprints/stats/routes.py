"""Dashboard statistics and palette routes."""

from __future__ import annotations

from flask import jsonify, request

from ...constants.palette import COLOR_OPTIONS, DEFAULT_COLOR, DEFAULT_ICON, ICON_OPTIONS
from ...extensions import get_store
from ...services.stats import summarize
from ..forms import optional_date_arg
from . import bp


@bp.get("/stats")
def overall_stats():
    """Summarize streaks and completion rates across all habits."""

    target_date = optional_date_arg(request.args)
    summary = summarize(get_store().list_with_stats(target_date))
    return jsonify(summary.to_dict())


@bp.get("/palette")
def palette():
    return jsonify(
        {
            "icons": list(ICON_OPTIONS),
            "colors": list(COLOR_OPTIONS),
            "default_icon": DEFAULT_ICON,
            "default_color": DEFAULT_COLOR,
        }
    )
