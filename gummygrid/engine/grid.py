"""Boolean fill pattern with mirror symmetry and edge-coverage guarantees."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator

import numpy as np
from numpy.typing import NDArray

from gummygrid.engine.cell import CORNERS, DIRECTIONS, SIDES, Cell, Direction
from gummygrid.engine.errors import InvalidDimensions
from gummygrid.engine.protocols import RandomSource
from gummygrid.models.config import GridConfig, GridSize

logger = logging.getLogger(__name__)

_FILLED_GLYPH = "•"


def _is_positive_int(value: object) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, float):
        return value.is_integer() and value > 0
    return isinstance(value, int) and value > 0


def normalize_size(size: int | float | GridSize) -> GridSize:
    """Square sizes become (n, n). Raises InvalidDimensions for bad sizes."""
    if isinstance(size, GridSize):
        rows, columns = size.rows, size.columns
    else:
        rows = columns = size
    if not (_is_positive_int(rows) and _is_positive_int(columns)):
        raise InvalidDimensions(
            f"Rows and columns must both be positive integers (got {rows}x{columns})"
        )
    return GridSize(rows=int(rows), columns=int(columns))


class Grid:
    """Owns every cell; all neighbor and mirror queries go through here.

    The random source decides which cells get filled:

        grid = Grid(GridConfig(size=5), Randomizer())
        grid.build()
        grid.get_matrix()
    """

    def __init__(
        self,
        config: GridConfig,
        rng: RandomSource,
        fill_probability: float = 0.5,
    ) -> None:
        self.config = config
        self.rng = rng
        self.fill_probability = fill_probability
        self.size = normalize_size(config.size)
        self._cells = [
            [Cell(row, col) for col in range(self.size.columns)]
            for row in range(self.size.rows)
        ]

    @property
    def rows(self) -> int:
        return int(self.size.rows)

    @property
    def columns(self) -> int:
        return int(self.size.columns)

    @property
    def vertically_symmetrical(self) -> bool:
        return self.config.vertical_symmetry

    # --- Building -----------------------------------------------------------

    def build(self) -> None:
        """Fill the pattern. Does not clear previously filled cells."""
        self._generate_cells()
        if self.config.ensure_fill.top_bottom:
            self._ensure_top_bottom_cells()
        if self.config.ensure_fill.left_right:
            self._ensure_left_right_cells()
        logger.debug(
            "Built %dx%d grid with %d filled cells",
            self.rows,
            self.columns,
            sum(1 for c in self.iter_cells() if c.filled),
        )

    def wanna_fill(self) -> bool:
        return self.rng.next_bool(self.fill_probability)

    def clear(self) -> None:
        for cell in self.iter_cells():
            cell.unfill()
            cell.mark_pooled(None)

    def fill_cell_and_parallel(self, cell: Cell) -> None:
        cell.fill()
        if self.has_horizontal_parallel(cell):
            self.horizontal_parallel(cell).fill()
        if self.vertically_symmetrical and self.has_vertical_parallel(cell):
            parallel = self.vertical_parallel(cell)
            parallel.fill()
            if self.has_horizontal_parallel(parallel):
                self.horizontal_parallel(parallel).fill()

    def _generate_cells(self) -> None:
        for cell in self.iter_fillable_cells():
            if self.wanna_fill():
                self.fill_cell_and_parallel(cell)

    def _ensure_top_bottom_cells(self) -> None:
        rows = []
        if not self._row_has_filled(0):
            rows.append(0)
        if not self._row_has_filled(self.rows - 1):
            rows.append(self.rows - 1)

        for row in rows:
            col = self.rng.next_int(0, self.columns // 2)
            self.fill_cell_and_parallel(self._cells[row][col])
            for c in range(self.columns):
                if c == col:
                    continue
                if self.wanna_fill():
                    self.fill_cell_and_parallel(self._cells[row][c])
                    break

    def _ensure_left_right_cells(self) -> None:
        cols = []
        if not self._column_has_filled(0):
            cols.append(0)
        if not self._column_has_filled(self.columns - 1):
            cols.append(self.columns - 1)

        for col in cols:
            row = self.rng.next_int(0, self.rows // 2)
            self.fill_cell_and_parallel(self._cells[row][col])
            for r in range(self.rows):
                if r == row:
                    continue
                if self.wanna_fill():
                    self.fill_cell_and_parallel(self._cells[r][col])
                    break

    def _row_has_filled(self, row: int) -> bool:
        return any(cell.filled for cell in self._cells[row])

    def _column_has_filled(self, col: int) -> bool:
        return any(row[col].filled for row in self._cells)

    # --- Lookup -------------------------------------------------------------

    def get_cell(self, row: int, col: int) -> Cell | None:
        if 0 <= row < self.rows and 0 <= col < self.columns:
            return self._cells[row][col]
        return None

    def get_neighbor(self, cell: Cell, direction: Direction) -> Cell | None:
        return self.get_cell(cell.row + direction.row_offset, cell.col + direction.col_offset)

    def has_filled_neighbor(self, cell: Cell, direction: Direction) -> bool:
        neighbor = self.get_neighbor(cell, direction)
        return neighbor is not None and neighbor.filled

    def iter_neighbors(self, cell: Cell) -> Iterator[Cell]:
        for direction in DIRECTIONS:
            neighbor = self.get_neighbor(cell, direction)
            if neighbor is not None:
                yield neighbor

    def iter_orthogonal_neighbors(self, cell: Cell) -> Iterator[Cell]:
        for direction in SIDES:
            neighbor = self.get_neighbor(cell, direction)
            if neighbor is not None:
                yield neighbor

    def iter_diagonal_neighbors(self, cell: Cell) -> Iterator[tuple[Direction, Cell]]:
        for corner in CORNERS:
            neighbor = self.get_neighbor(cell, corner)
            if neighbor is not None:
                yield corner, neighbor

    def is_edge_cell(self, cell: Cell) -> bool:
        return (
            cell.row == 0
            or cell.row == self.rows - 1
            or cell.col == 0
            or cell.col == self.columns - 1
        )

    def is_horizontally_odd_sized(self) -> bool:
        return self.columns % 2 != 0

    def is_vertically_odd_sized(self) -> bool:
        return self.rows % 2 != 0

    def is_in_middle_column(self, cell: Cell) -> bool:
        return cell.col == self.columns // 2

    def is_in_middle_row(self, cell: Cell) -> bool:
        return cell.row == self.rows // 2

    def has_horizontal_parallel(self, cell: Cell) -> bool:
        # Only the middle column of an odd-width grid mirrors onto itself.
        return not self.is_horizontally_odd_sized() or not self.is_in_middle_column(cell)

    def has_vertical_parallel(self, cell: Cell) -> bool:
        return not self.is_vertically_odd_sized() or not self.is_in_middle_row(cell)

    def horizontal_parallel(self, cell: Cell) -> Cell:
        return self._cells[cell.row][self.columns - cell.col - 1]

    def vertical_parallel(self, cell: Cell) -> Cell:
        return self._cells[self.rows - cell.row - 1][cell.col]

    # --- Iteration ----------------------------------------------------------

    def iter_cells(self) -> Iterator[Cell]:
        """All cells in row-major order."""
        for row in self._cells:
            yield from row

    def iter_fillable_cells(self) -> Iterator[Cell]:
        """Cells drawn by the base pass: left half, top half under symmetry."""
        row_limit = math.ceil(self.rows / 2) if self.vertically_symmetrical else self.rows
        col_limit = math.ceil(self.columns / 2)
        for row in range(row_limit):
            for col in range(col_limit):
                yield self._cells[row][col]

    def iter_islands(self) -> Iterator[Cell]:
        """One representative per 8-connected group of filled cells."""
        visited: set[Cell] = set()
        for cell in self.iter_cells():
            if cell in visited or cell.empty:
                continue
            visited.add(cell)
            stack = [cell]
            while stack:
                current = stack.pop()
                for neighbor in self.iter_neighbors(current):
                    if neighbor not in visited and neighbor.filled:
                        visited.add(neighbor)
                        stack.append(neighbor)
            yield cell

    def iter_pools(self) -> Iterator[Cell]:
        """One representative per enclosed group of empty cells.

        Empty cells on the boundary spill; spill spreads through orthogonal
        empty neighbors. What is left is flood-filled 8-directionally and
        marked ``pooled``.
        """
        spill: list[Cell] = []
        pool: set[Cell] = set()
        for cell in self.iter_cells():
            if cell.filled:
                continue
            if self.is_edge_cell(cell):
                spill.append(cell)
            else:
                pool.add(cell)

        stack = list(spill)
        while stack:
            current = stack.pop()
            current.mark_pooled(False)
            for neighbor in self.iter_orthogonal_neighbors(current):
                if neighbor in pool:
                    pool.discard(neighbor)
                    stack.append(neighbor)

        visited: set[Cell] = set()
        for cell in self.iter_cells():
            if cell not in pool or cell in visited:
                continue
            visited.add(cell)
            cell.mark_pooled(True)
            stack = [cell]
            while stack:
                current = stack.pop()
                for neighbor in self.iter_neighbors(current):
                    if neighbor in pool and neighbor not in visited:
                        visited.add(neighbor)
                        neighbor.mark_pooled(True)
                        stack.append(neighbor)
            yield cell

    # --- Export -------------------------------------------------------------

    def get_matrix(self) -> NDArray[np.int8]:
        """rows x columns array, 1 where filled."""
        return np.array(
            [[1 if cell.filled else 0 for cell in row] for row in self._cells],
            dtype=np.int8,
        )

    def to_ascii(self) -> str:
        return "\n".join(
            " ".join(_FILLED_GLYPH if cell.filled else " " for cell in row)
            for row in self._cells
        )

    def log(self) -> None:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Grid pattern:\n%s", self.to_ascii())
