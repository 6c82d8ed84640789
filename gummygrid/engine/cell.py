"""Grid cell and neighbor directions.

A cell only knows its own coordinates and state. Neighbor and mirror lookups
go through the owning ``Grid`` by (row, col) index.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class Direction(enum.Enum):
    # (row delta, col delta)
    LEFT = (0, -1)
    TOP = (-1, 0)
    RIGHT = (0, 1)
    BOTTOM = (1, 0)
    TOP_LEFT = (-1, -1)
    TOP_RIGHT = (-1, 1)
    BOTTOM_RIGHT = (1, 1)
    BOTTOM_LEFT = (1, -1)

    @property
    def row_offset(self) -> int:
        return self.value[0]

    @property
    def col_offset(self) -> int:
        return self.value[1]


SIDES = (Direction.LEFT, Direction.TOP, Direction.RIGHT, Direction.BOTTOM)
CORNERS = (
    Direction.TOP_LEFT,
    Direction.TOP_RIGHT,
    Direction.BOTTOM_RIGHT,
    Direction.BOTTOM_LEFT,
)
DIRECTIONS = SIDES + CORNERS


@dataclass(eq=False)
class Cell:
    row: int
    col: int
    filled: bool = False
    # None until pool detection has classified the cell.
    pooled: bool | None = field(default=None)

    @property
    def coords(self) -> tuple[int, int]:
        return (self.row, self.col)

    @property
    def empty(self) -> bool:
        return not self.filled

    def fill(self) -> None:
        self.filled = True

    def unfill(self) -> None:
        self.filled = False

    def mark_pooled(self, value: bool | None) -> None:
        self.pooled = value

    def __repr__(self) -> str:
        state = "filled" if self.filled else "empty"
        return f"Cell({self.row}, {self.col}, {state})"
