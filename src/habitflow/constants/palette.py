"""Icon and color tokens offered to clients when creating a habit.

The store treats both as opaque strings; these lists only describe what the
bundled UI knows how to render.
"""

from __future__ import annotations

DEFAULT_ICON = "fas fa-check"
DEFAULT_COLOR = "emerald"

ICON_OPTIONS: tuple[dict[str, str], ...] = (
    {"icon": "fas fa-tint", "color": "blue", "label": "Water"},
    {"icon": "fas fa-book", "color": "green", "label": "Reading"},
    {"icon": "fas fa-dumbbell", "color": "orange", "label": "Exercise"},
    {"icon": "fas fa-moon", "color": "purple", "label": "Sleep"},
    {"icon": "fas fa-heart", "color": "red", "label": "Health"},
    {"icon": "fas fa-sun", "color": "yellow", "label": "Morning"},
    {"icon": "fas fa-coffee", "color": "amber", "label": "Coffee"},
    {"icon": "fas fa-music", "color": "pink", "label": "Music"},
    {"icon": "fas fa-camera", "color": "indigo", "label": "Photo"},
    {"icon": "fas fa-utensils", "color": "emerald", "label": "Food"},
)

COLOR_OPTIONS: tuple[str, ...] = tuple(dict.fromkeys(option["color"] for option in ICON_OPTIONS))

__all__ = ["COLOR_OPTIONS", "DEFAULT_COLOR", "DEFAULT_ICON", "ICON_OPTIONS"]
