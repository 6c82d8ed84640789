"""Tests for per-cell path synthesis."""

from __future__ import annotations

import pytest
from svgpathtools import parse_path

from gummygrid.engine.cell import Direction
from gummygrid.svg.path import CellGeometry, PathBuilder, filled_cell_path, inner_corners_path


def _geometry(outer=0.0, inner=0.0, flow=True, size=10) -> CellGeometry:
    return CellGeometry(
        cell_size=size,
        outer_rounding=outer,
        outer_radius=size * outer / 2,
        inner_radius=size * inner / 2,
        flow=flow,
    )


class TestPathBuilder:
    def test_commands(self):
        path = PathBuilder().move(0, 5).line(2.5, 0).arc(5, 10, 5).close()
        assert str(path) == "M 0 5 L 2.5 0 A 5 5 0 0 1 10 5 Z "

    def test_counter_clockwise_arc(self):
        assert str(PathBuilder().arc(1, 2, 3, sweep=0)) == "A 1 1 0 0 0 2 3 "


class TestFilledCell:
    def test_square(self):
        d = filled_cell_path(0, 0, _geometry(), frozenset())
        assert d == "M 0 5 L 0 0 L 10 0 L 10 10 L 0 10 L 0 5 Z "

    def test_square_offset(self):
        d = filled_cell_path(20, 10, _geometry(), frozenset())
        assert parse_path(d).bbox() == pytest.approx((20, 30, 10, 20))

    def test_full_rounding_is_a_circle(self):
        d = filled_cell_path(0, 0, _geometry(outer=1), frozenset())
        assert d == (
            "M 0 5 A 5 5 0 0 1 5 0 A 5 5 0 0 1 10 5 "
            "A 5 5 0 0 1 5 10 A 5 5 0 0 1 0 5 Z "
        )
        path = parse_path(d)
        assert path.isclosed()
        assert path.bbox() == pytest.approx((0, 10, 0, 10))

    def test_flow_squares_corners_towards_neighbors(self):
        d = filled_cell_path(0, 0, _geometry(outer=1), frozenset({Direction.TOP}))
        assert d == (
            "M 0 5 L 0 0 L 5 0 L 10 0 L 10 5 "
            "A 5 5 0 0 1 5 10 A 5 5 0 0 1 0 5 Z "
        )

    def test_diagonal_neighbor_squares_one_corner(self):
        d = filled_cell_path(0, 0, _geometry(outer=1), frozenset({Direction.BOTTOM_RIGHT}))
        assert d.count("A ") == 3
        assert "L 10 10 L 5 10 " in d

    def test_no_flow_keeps_rounding(self):
        neighbors = frozenset({Direction.TOP, Direction.LEFT})
        d = filled_cell_path(0, 0, _geometry(outer=1, flow=False), neighbors)
        assert d == filled_cell_path(0, 0, _geometry(outer=1, flow=False), frozenset())

    def test_partial_rounding(self):
        d = filled_cell_path(0, 0, _geometry(outer=0.5), frozenset())
        assert d.startswith("M 0 5 L 0 2.5 A 2.5 2.5 0 0 1 2.5 0 L 7.5 0 ")
        assert parse_path(d).bbox() == pytest.approx((0, 10, 0, 10))


class TestInnerCorners:
    def test_no_corner_without_two_sides(self):
        geometry = _geometry(inner=0.5)
        assert inner_corners_path(0, 0, geometry, frozenset()) == ""
        assert inner_corners_path(0, 0, geometry, frozenset({Direction.TOP})) == ""
        assert inner_corners_path(0, 0, geometry, frozenset({Direction.TOP_LEFT})) == ""

    def test_top_left_with_flow(self):
        neighbors = frozenset({Direction.TOP, Direction.LEFT})
        d = inner_corners_path(0, 0, _geometry(inner=0.5), neighbors)
        assert d == "M 0 2.5 A 2.5 2.5 0 0 1 2.5 0 L 0 0 L 0 0 L 0 0 L 0 2.5 Z "

    def test_without_flow_rounds_back_with_outer_radius(self):
        neighbors = frozenset({Direction.BOTTOM, Direction.RIGHT})
        d = inner_corners_path(0, 0, _geometry(outer=0.2, inner=0.6, flow=False), neighbors)
        assert d == "M 10 7 A 3 3 0 0 1 7 10 L 9 10 A 1 1 0 0 0 10 9 L 10 7 Z "

    def test_all_four_corners(self):
        neighbors = frozenset({Direction.TOP, Direction.LEFT, Direction.BOTTOM, Direction.RIGHT})
        d = inner_corners_path(10, 10, _geometry(inner=1), neighbors)
        assert d.count("M ") == 4
        assert d.count("Z ") == 4
