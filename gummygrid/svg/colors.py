"""Color selection per category, with locked categories sharing one index."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from gummygrid.engine.errors import WeightLengthMismatch
from gummygrid.engine.protocols import RandomSource
from gummygrid.models.config import ColorCategory, Flat, Gradient, Palette

logger = logging.getLogger(__name__)

ResolvedColors = dict[ColorCategory, Flat | Gradient]


def gradient_id(category: ColorCategory) -> str:
    return f"gradient-{category.css_name}"


def css_value(category: ColorCategory, color: Flat | Gradient | None) -> str:
    """Value usable in CSS: the flat color, or a reference to the gradient."""
    if color is None:
        return "none"
    if isinstance(color, Gradient):
        return f"url(#{gradient_id(category)})"
    return color.value


def pick_color_index(
    rng: RandomSource,
    category: ColorCategory,
    colors: Sequence[Flat | Gradient],
    weights: Sequence[float] | None,
) -> int:
    try:
        return rng.choose_index(colors, weights)
    except WeightLengthMismatch as e:
        raise WeightLengthMismatch(
            f'The color and weight arrays for category "{category.value}" '
            "must be of equal length",
            category=category.value,
        ) from e


def resolve_colors(
    palette: Palette,
    locked: Sequence[ColorCategory],
    rng: RandomSource,
    weights: Mapping[ColorCategory, Sequence[float]] | None = None,
) -> ResolvedColors:
    """Draw one color per category.

    The locked index is drawn first, from the first locked category; the other
    categories then draw in category order. Empty unlocked categories are left
    out of the result.
    """
    weights = weights or {}
    resolved: ResolvedColors = {}

    locked_idx = None
    if locked:
        first = locked[0]
        locked_idx = pick_color_index(rng, first, palette.get(first), weights.get(first))

    for category in ColorCategory:
        colors = palette.get(category)
        if category in locked:
            resolved[category] = colors[locked_idx]
        elif colors:
            resolved[category] = colors[
                pick_color_index(rng, category, colors, weights.get(category))
            ]

    logger.debug(
        "Resolved colors: %s",
        ", ".join(f"{c.value}={css_value(c, v)}" for c, v in resolved.items()),
    )
    return resolved
