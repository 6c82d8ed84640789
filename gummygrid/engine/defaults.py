"""Default generator configuration and the merge used to apply user overrides."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any

DEFAULT_CELL_FILL_COLORS = [
    "#019244",
    "#11adc8",
    "#2e3192",
    "#3aa17e",
    "#3e72bd",
    "#4f00bc",
    "#662d8c",
    "#8e78ff",
    "#d4145a",
    "#ed1f26",
    "#fbb03b",
    "#fd811d",
]

DEFAULT_CONFIG: dict[str, Any] = {
    "randomizer": {
        "salt": 0,
        "bias": {
            "cell_fill_probability": 0.5,
            "color_weights": {},
        },
    },
    "grid": {
        "size": {"rows": 5, "columns": 5},
        "ensure_fill": {"top_bottom": False, "left_right": False},
        "vertical_symmetry": False,
    },
    "svg": {
        "pattern_area_ratio": 0.675,
        "colors": {
            "background": ["#ededfe"],
            "cell_fill": DEFAULT_CELL_FILL_COLORS,
            "cell_stroke": [],
            "drop_shadow": [],
        },
        "lock_colors": [],
        "cell_rounding": {"outer": 0, "inner": 0},
        "gutter": 0,
        "flow": True,
        "stroke_width": 0,
        "filters": {},
        "paint_order": "stroke",
        "stroke_line_join": "miter",
    },
}


def merge_recursively(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Return ``base`` with ``override`` applied.

    Mappings merge key by key; every other value (lists included) replaces the
    base value outright. Neither argument is modified.
    """
    merged = copy.deepcopy(dict(base))
    for key, value in override.items():
        if isinstance(value, Mapping) and isinstance(merged.get(key), Mapping):
            merged[key] = merge_recursively(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def build_config(overrides: Mapping[str, Any] | None = None) -> dict[str, Any]:
    return merge_recursively(DEFAULT_CONFIG, overrides or {})
