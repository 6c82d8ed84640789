"""Path-data synthesis for filled cells and the concave corners between them.

Coordinates are absolute. Every command is followed by a single space so the
per-cell fragments can be concatenated as is.
"""

from __future__ import annotations

from collections.abc import Container
from dataclasses import dataclass

from gummygrid.engine.cell import Direction
from gummygrid.utils.math_helpers import format_number

TOP = Direction.TOP
BOTTOM = Direction.BOTTOM
LEFT = Direction.LEFT
RIGHT = Direction.RIGHT
TOP_LEFT = Direction.TOP_LEFT
TOP_RIGHT = Direction.TOP_RIGHT
BOTTOM_RIGHT = Direction.BOTTOM_RIGHT
BOTTOM_LEFT = Direction.BOTTOM_LEFT


class PathBuilder:
    def __init__(self) -> None:
        self._parts: list[str] = []

    def move(self, x: float, y: float) -> PathBuilder:
        self._parts.append(f"M {format_number(x)} {format_number(y)} ")
        return self

    def line(self, x: float, y: float) -> PathBuilder:
        self._parts.append(f"L {format_number(x)} {format_number(y)} ")
        return self

    def arc(self, r: float, x: float, y: float, sweep: int = 1) -> PathBuilder:
        radius = format_number(r)
        self._parts.append(
            f"A {radius} {radius} 0 0 {sweep} {format_number(x)} {format_number(y)} "
        )
        return self

    def close(self) -> PathBuilder:
        self._parts.append("Z ")
        return self

    def __str__(self) -> str:
        return "".join(self._parts)


@dataclass(frozen=True)
class CellGeometry:
    """Fixed drawing parameters shared by every cell of one render."""

    cell_size: float
    outer_rounding: float
    outer_radius: float
    inner_radius: float
    flow: bool


def filled_cell_path(
    x: float,
    y: float,
    geometry: CellGeometry,
    filled_neighbors: Container[Direction],
) -> str:
    """Clockwise rounded rectangle starting at the middle of the left edge.

    With flow on, a corner touching a filled neighbor is drawn square so that
    adjacent cells merge into one shape.
    """
    size = geometry.cell_size
    r = geometry.outer_radius
    rounded = bool(geometry.outer_rounding)
    straight_edges = geometry.outer_rounding < 1

    def squared(*directions: Direction) -> bool:
        return geometry.flow and any(d in filled_neighbors for d in directions)

    path = PathBuilder().move(x, y + size / 2)

    if straight_edges:
        path.line(x, y + r)
    if rounded:
        if squared(LEFT, TOP, TOP_LEFT):
            path.line(x, y).line(x + r, y)
        else:
            path.arc(r, x + r, y)

    if straight_edges:
        path.line(x + size - r, y)
    if rounded:
        if squared(RIGHT, TOP, TOP_RIGHT):
            path.line(x + size, y).line(x + size, y + r)
        else:
            path.arc(r, x + size, y + r)

    if straight_edges:
        path.line(x + size, y + size - r)
    if rounded:
        if squared(RIGHT, BOTTOM, BOTTOM_RIGHT):
            path.line(x + size, y + size).line(x + size - r, y + size)
        else:
            path.arc(r, x + size - r, y + size)

    if straight_edges:
        path.line(x + r, y + size)
    if rounded:
        if squared(LEFT, BOTTOM, BOTTOM_LEFT):
            path.line(x, y + size).line(x, y + size - r)
        else:
            path.arc(r, x, y + size - r)

    if straight_edges:
        path.line(x, y + size / 2)

    return str(path.close())


def inner_corners_path(
    x: float,
    y: float,
    geometry: CellGeometry,
    filled_neighbors: Container[Direction],
) -> str:
    """Fillets inside an empty cell wherever two orthogonal neighbors are filled.

    Order: top-left, top-right, bottom-right, bottom-left.
    """
    size = geometry.cell_size
    ri = geometry.inner_radius
    ro = geometry.outer_radius
    flow = geometry.flow

    has_top = TOP in filled_neighbors
    has_bottom = BOTTOM in filled_neighbors
    has_left = LEFT in filled_neighbors
    has_right = RIGHT in filled_neighbors

    path = PathBuilder()

    if has_top and has_left:
        path.move(x, y + ri).arc(ri, x + ri, y).line(x + ro, y)
        if flow:
            path.line(x, y).line(x, y + ro)
        elif ro:
            path.arc(ro, x, y + ro, sweep=0)
        path.line(x, y + ri).close()

    if has_top and has_right:
        path.move(x + size - ri, y).arc(ri, x + size, y + ri).line(x + size, y + ro)
        if flow:
            path.line(x + size, y).line(x + size - ro, y)
        elif ro:
            path.arc(ro, x + size - ro, y, sweep=0)
        path.line(x + size - ri, y).close()

    if has_bottom and has_right:
        path.move(x + size, y + size - ri)
        path.arc(ri, x + size - ri, y + size).line(x + size - ro, y + size)
        if flow:
            path.line(x + size, y + size).line(x + size, y + size - ro)
        elif ro:
            path.arc(ro, x + size, y + size - ro, sweep=0)
        path.line(x + size, y + size - ri).close()

    if has_bottom and has_left:
        path.move(x + ri, y + size).arc(ri, x, y + size - ri).line(x, y + size - ro)
        if flow:
            path.line(x, y + size).line(x + ro, y + size)
        elif ro:
            path.arc(ro, x + ro, y + size, sweep=0)
        path.line(x + ri, y + size).close()

    return str(path)
