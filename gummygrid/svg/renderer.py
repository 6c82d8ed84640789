"""Render a filled grid as a single SVG path with styling."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from gummygrid.engine.cell import DIRECTIONS, Cell, Direction
from gummygrid.engine.errors import (
    EmptyColorArray,
    InvalidRounding,
    LockedColorLengthMismatch,
)
from gummygrid.engine.protocols import RandomSource
from gummygrid.models.config import ColorCategory, Gradient, GridSize, SvgConfig
from gummygrid.models.svg_document import SvgDocument
from gummygrid.svg.colors import ResolvedColors, css_value, gradient_id, resolve_colors
from gummygrid.svg.path import CellGeometry, filled_cell_path, inner_corners_path
from gummygrid.svg.serializer import format_gradient, serialize_svg
from gummygrid.utils.math_helpers import format_number

if TYPE_CHECKING:
    from gummygrid.engine.grid import Grid

logger = logging.getLogger(__name__)

DEFAULT_CELL_SIZE = 10

# Categories that may carry a gradient definition, in document order.
_GRADIENT_CATEGORIES = (
    ColorCategory.BACKGROUND,
    ColorCategory.CELL_FILL,
    ColorCategory.CELL_STROKE,
)


@dataclass(frozen=True)
class CalculatedValues:
    ptn_width: float
    ptn_height: float
    background_wh: float
    outer_radius: float
    inner_radius: float


class SvgRenderer:
    """Turns a built grid into an ``SvgDocument``.

    Colors are drawn from ``rng`` every time ``build_from`` runs, after the
    grid has been built, so the draw order is grid first, colors second.
    """

    def __init__(
        self,
        config: SvgConfig,
        grid_size: GridSize,
        rng: RandomSource,
        color_weights: Mapping[ColorCategory, Sequence[float]] | None = None,
        cell_size: float = DEFAULT_CELL_SIZE,
    ) -> None:
        self.config = config
        self.grid_size = grid_size
        self.rng = rng
        self.color_weights = dict(color_weights or {})
        self.cell_size = cell_size
        self._validate_config()
        self.calculated = self._calculate_values()
        self.geometry = CellGeometry(
            cell_size=cell_size,
            outer_rounding=config.cell_rounding.outer,
            outer_radius=self.calculated.outer_radius,
            inner_radius=self.calculated.inner_radius,
            flow=config.flow,
        )
        self.document: SvgDocument | None = None

    @property
    def locked_categories(self) -> list[ColorCategory]:
        if self.config.lock_colors == "all":
            return list(ColorCategory)
        return list(self.config.lock_colors)

    # --- Validation ---------------------------------------------------------

    def _validate_config(self) -> None:
        self._validate_cell_rounding()
        self._validate_color_arrays()
        self._validate_locked_color_arrays()

    def _validate_cell_rounding(self) -> None:
        rounding = self.config.cell_rounding
        for name, value in (("inner", rounding.inner), ("outer", rounding.outer)):
            if not 0 <= value <= 1:
                raise InvalidRounding(
                    f"Inner and outer rounding must be between 0 and 1 ({name}={value})"
                )

    def _validate_color_arrays(self) -> None:
        colors = self.config.colors
        for category in (ColorCategory.BACKGROUND, ColorCategory.CELL_FILL):
            if not colors.get(category):
                raise EmptyColorArray(f"colors.{category.value} must not be empty")

        stroke_width = self.config.stroke_width
        if stroke_width > 0 and not colors.cell_stroke:
            logger.warning("stroke_width has no effect while colors.cell_stroke is empty")
        if not stroke_width and colors.cell_stroke:
            logger.warning("colors.cell_stroke has no effect while stroke_width is 0")

        has_shadow_filter = self.config.filters.drop_shadow is not None
        if has_shadow_filter and not colors.drop_shadow:
            logger.warning("filters.drop_shadow has no effect while colors.drop_shadow is empty")
        elif colors.drop_shadow and not has_shadow_filter:
            logger.warning("colors.drop_shadow has no effect without filters.drop_shadow")

    def _validate_locked_color_arrays(self) -> None:
        locked = self.locked_categories
        lengths = {len(self.config.colors.get(category)) for category in locked}
        if len(lengths) > 1:
            names = ", ".join(category.value for category in locked)
            raise LockedColorLengthMismatch(
                f"All the color arrays in lock_colors ({names}) must have equal length"
            )

    def _calculate_values(self) -> CalculatedValues:
        rows = self.grid_size.rows
        columns = self.grid_size.columns
        size = self.cell_size
        gutter = self.config.gutter
        stroke_width = self.config.stroke_width

        ptn_width = size * columns + gutter * (columns - 1) + stroke_width
        ptn_height = size * rows + gutter * (rows - 1) + stroke_width
        return CalculatedValues(
            ptn_width=ptn_width,
            ptn_height=ptn_height,
            background_wh=max(ptn_width, ptn_height) / self.config.pattern_area_ratio,
            outer_radius=size * self.config.cell_rounding.outer / 2,
            inner_radius=size * self.config.cell_rounding.inner / 2,
        )

    # --- Rendering ----------------------------------------------------------

    def resolve_colors(self) -> ResolvedColors:
        return resolve_colors(
            self.config.colors, self.locked_categories, self.rng, self.color_weights
        )

    def build_from(self, grid: Grid) -> SvgDocument:
        colors = self.resolve_colors()
        path_data = self.draw_complete_path(grid)

        defs = [
            format_gradient(gradient_id(category), colors[category])
            for category in _GRADIENT_CATEGORIES
            if isinstance(colors.get(category), Gradient)
        ]
        markup = serialize_svg(
            path_data,
            self.calculated.background_wh,
            styles=self.format_styles(colors),
            defs=defs,
        )
        self.document = SvgDocument(
            markup=markup,
            path_data=path_data,
            colors={category.value: css_value(category, color) for category, color in colors.items()},
        )
        return self.document

    def can_draw_inner_corners(self) -> bool:
        inner = self.config.cell_rounding.inner
        outer = self.config.cell_rounding.outer
        if self.config.stroke_width:
            roundings_differ = inner >= outer
        else:
            roundings_differ = inner > outer
        return bool(inner) and (roundings_differ or self.config.flow)

    def draw_complete_path(self, grid: Grid) -> str:
        inner_corners = self.can_draw_inner_corners()
        step = self.cell_size + self.config.gutter
        parts: list[str] = []

        for cell in grid.iter_cells():
            x = cell.col * step
            y = cell.row * step
            if cell.filled:
                neighbors = self._filled_neighbors(grid, cell)
                parts.append(filled_cell_path(x, y, self.geometry, neighbors))
            elif inner_corners:
                neighbors = self._filled_neighbors(grid, cell)
                parts.append(inner_corners_path(x, y, self.geometry, neighbors))

        return "".join(parts)

    @staticmethod
    def _filled_neighbors(grid: Grid, cell: Cell) -> frozenset[Direction]:
        return frozenset(d for d in DIRECTIONS if grid.has_filled_neighbor(cell, d))

    def format_styles(self, colors: ResolvedColors) -> dict[str, dict[str, str]]:
        root = {
            "--color-background": css_value(
                ColorCategory.BACKGROUND, colors.get(ColorCategory.BACKGROUND)
            ),
            "--color-cell-fill": css_value(
                ColorCategory.CELL_FILL, colors.get(ColorCategory.CELL_FILL)
            ),
            "--color-cell-stroke": css_value(
                ColorCategory.CELL_STROKE, colors.get(ColorCategory.CELL_STROKE)
            ),
        }
        shadow = colors.get(ColorCategory.DROP_SHADOW)
        if shadow is not None:
            root["--color-cell-drop-shadow"] = css_value(ColorCategory.DROP_SHADOW, shadow)
        root["--stroke-width"] = f"{format_number(self.config.stroke_width)}px"
        root["--ptn-width"] = f"{format_number(self.calculated.ptn_width)}px"
        root["--ptn-height"] = f"{format_number(self.calculated.ptn_height)}px"

        pattern = {
            "fill": "var(--color-cell-fill)",
            "stroke": "var(--color-cell-stroke)",
            "stroke-width": "var(--stroke-width)",
            "stroke-linejoin": self.config.stroke_line_join,
            "paint-order": self.config.paint_order,
        }
        filters = self.format_filters()
        if filters:
            pattern["filter"] = filters
        pattern["--transform-x"] = "calc((100% - var(--ptn-width) + var(--stroke-width)) / 2)"
        pattern["--transform-y"] = "calc((100% - var(--ptn-height) + var(--stroke-width)) / 2)"
        pattern["transform"] = "translate(var(--transform-x), var(--transform-y))"

        return {
            ":root": root,
            ".background": {
                "width": "100%",
                "height": "100%",
                "fill": "var(--color-background)",
            },
            ".pattern": pattern,
        }

    def format_filters(self) -> str:
        """CSS ``filter`` value, empty when no filter is configured."""
        functions = []
        for name, value in self.config.filters.ordered_items():
            func = name.replace("_", "-")
            if name == "drop_shadow":
                args = " ".join([*value, "var(--color-cell-drop-shadow)"])
            else:
                args = value
            functions.append(f"{func}({args})")
        return " ".join(functions)
