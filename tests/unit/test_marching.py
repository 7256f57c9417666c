"""Tests for marching squares classification and segment emission."""

import pytest

from isoline.core.geometry import signed_area
from isoline.core.marching import (
    cell_segments,
    classify_cell,
    edge_segments,
    emit_segments,
    march,
)
from isoline.core.simplify import simplify
from isoline.domain import FunctionField, GridField, framed

T = (0.5, 0.0)
B = (0.5, 1.0)
L = (0.0, 0.5)
R = (1.0, 0.5)

# Expected (start, end) pairs for a unit cell traced at 0.5 with 0/1 corners
EXPECTED_SEGMENTS = {
    0: [],
    1: [(B, L)],
    2: [(R, B)],
    3: [(R, L)],
    4: [(T, R)],
    5: [(T, L), (B, R)],
    6: [(T, B)],
    7: [(T, L)],
    8: [(L, T)],
    9: [(B, T)],
    10: [(L, B), (R, T)],
    11: [(R, T)],
    12: [(L, R)],
    13: [(B, R)],
    14: [(L, B)],
    15: [],
}


def cell_grid(case: int) -> GridField:
    """Build a 2x2 field whose corners encode the given case."""
    bl = 1.0 if case & 1 else 0.0
    br = 1.0 if case & 2 else 0.0
    ur = 1.0 if case & 4 else 0.0
    ul = 1.0 if case & 8 else 0.0
    return GridField([[ul, ur], [bl, br]])


class TestClassifyCell:
    """Tests for classify_cell."""

    def test_bit_assignment(self):
        """Test which corner sets which bit."""
        assert classify_cell(0, 0, 1, 0, 0.5) == 1
        assert classify_cell(0, 0, 0, 1, 0.5) == 2
        assert classify_cell(0, 1, 0, 0, 0.5) == 4
        assert classify_cell(1, 0, 0, 0, 0.5) == 8

    def test_all_below_and_above(self):
        """Test the empty and full cases."""
        assert classify_cell(0, 0, 0, 0, 0.5) == 0
        assert classify_cell(1, 1, 1, 1, 0.5) == 15

    def test_equal_to_threshold_is_below(self):
        """Test that samples must be strictly above the threshold."""
        assert classify_cell(0.5, 0.5, 0.5, 0.5, 0.5) == 0


class TestCaseTable:
    """Tests for the per-case segment table."""

    @pytest.mark.parametrize("case", range(16))
    def test_case_segments(self, case: int):
        """Test the directed segments emitted for every case."""
        segments = emit_segments(cell_grid(case), 0.5)
        assert [(s.start, s.end) for s in segments] == EXPECTED_SEGMENTS[case]

    @pytest.mark.parametrize("case", [1, 2, 4, 8, 7, 11, 13, 14])
    def test_complementary_cases_reverse(self, case: int):
        """Test that inverting the corners reverses the segment direction."""
        (start, end), = EXPECTED_SEGMENTS[case]
        (inv_start, inv_end), = EXPECTED_SEGMENTS[15 - case]
        assert (inv_start, inv_end) == (end, start)

    def test_saddle_decomposition_is_fixed(self):
        """Test the saddle with upper-left and lower-right corners above."""
        field = GridField([[1.0, 0.0], [0.0, 1.0]])
        segments = emit_segments(field, 0.5)
        assert [(s.start, s.end) for s in segments] == [
            ((0.0, 0.5), (0.5, 1.0)),
            ((1.0, 0.5), (0.5, 0.0)),
        ]

    def test_saddle_ignores_centre_value(self):
        """Test that a saddle never depends on the samples' average."""
        low = emit_segments(GridField([[0.6, 0.0], [0.0, 0.6]]), 0.5)
        high = emit_segments(GridField([[10.0, 0.4], [0.4, 10.0]]), 0.5)
        assert len(low) == len(high) == 2


class TestInterpolation:
    """Tests for edge crossing positions."""

    def test_linear_interpolation(self):
        """Test crossings placed by linear interpolation along the edges."""
        field = GridField([[0.0, 10.0], [0.0, 0.0]])
        segments = emit_segments(field, 2.5)

        assert len(segments) == 1
        assert segments[0].start == pytest.approx((0.25, 0.0))
        assert segments[0].end == pytest.approx((1.0, 0.75))

    def test_cell_offset(self):
        """Test that points are offset by the cell position."""
        segments = cell_segments(6, 3, 2, (0.0, 1.0, 0.0, 1.0), 0.5)
        assert [(s.start, s.end) for s in segments] == [((3.5, 2.0), (3.5, 3.0))]

    def test_shared_edges_match_exactly(self):
        """Test that neighbouring cells produce identical crossing points."""
        field = FunctionField(6, 6, lambda x, y: (x * 7 + y * 3) % 5 / 4.0)
        segments = emit_segments(field, 0.37)

        starts = {s.start for s in segments}
        ends = {s.end for s in segments}
        # Every interior end point is the start of another segment
        interior_ends = [p for p in ends if 0 < p[0] < 5 and 0 < p[1] < 5]
        assert interior_ends
        assert all(p in starts for p in interior_ends)


class TestEmitSegments:
    """Tests for the row scan."""

    def test_each_sample_read_once(self):
        """Test that the row cache queries each sample exactly once."""
        calls: list[tuple[int, int]] = []

        def func(x: int, y: int) -> float:
            calls.append((x, y))
            return float((x + y) % 2)

        emit_segments(FunctionField(5, 4, func), 0.5)

        assert len(calls) == 20
        assert len(set(calls)) == 20

    @pytest.mark.parametrize("rows", [[], [[1.0, 0.0, 1.0]], [[1.0], [0.0]]])
    def test_degenerate_fields(self, rows):
        """Test that fields without cells emit nothing."""
        assert emit_segments(GridField(rows), 0.5) == []

    def test_close_border_cells_off_by_default(self):
        """Test that a filled field emits nothing unless asked to."""
        assert emit_segments(GridField([[1.0] * 4] * 4), 0.5) == []


class TestEdgeSegments:
    """Tests for segments along the image edge."""

    def test_interior_cell_emits_nothing(self):
        """Test that cells off the outermost ring never run along the edge."""
        assert edge_segments(1, 1, 4, 4, (1.0, 1.0, 1.0, 1.0), 0.5) == []

    def test_filled_corner_cell(self):
        """Test the two edge sides of the top-left cell of a filled field."""
        segments = edge_segments(0, 0, 4, 4, (1.0, 1.0, 1.0, 1.0), 0.5)
        assert [(s.start, s.end) for s in segments] == [
            ((1.0, 0.0), (0.0, 0.0)),
            ((0.0, 0.0), (0.0, 1.0)),
        ]

    def test_partial_side_ends_at_crossing(self):
        """Test that only the filled stretch of a side is emitted."""
        # Top row cell with ul above and ur below: leftwards from the crossing
        segments = edge_segments(1, 0, 4, 4, (1.0, 0.0, 0.0, 0.0), 0.5)
        assert [(s.start, s.end) for s in segments] == [((1.5, 0.0), (1.0, 0.0))]

    def test_single_cell_field(self):
        """Test that a one-cell field gets all four sides."""
        segments = edge_segments(0, 0, 2, 2, (1.0, 1.0, 1.0, 1.0), 0.5)
        assert len(segments) == 4

    def test_filled_field_outlined(self):
        """Test that a filled field is outlined along its border."""
        contours = march(GridField([[1.0] * 4] * 4), 0.5, close_border_cells=True)

        assert len(contours) == 1
        ring = contours[0]
        assert ring[0] == ring[-1]
        assert len(ring) == 13
        assert all(p[0] in (0.0, 3.0) or p[1] in (0.0, 3.0) for p in ring)
        assert signed_area(ring) == pytest.approx(-9.0)

    def test_region_partly_touching_edge(self):
        """Test that a region cut by the edge closes along the edge."""
        rows = [[1.0 if x <= 2 else 0.0 for x in range(6)] for _ in range(5)]
        contours = march(GridField(rows), 0.5, close_border_cells=True)

        assert len(contours) == 1
        ring = contours[0]
        assert ring[0] == ring[-1]
        assert signed_area(ring) == pytest.approx(-10.0)
        assert simplify(ring)[1:-1] == [(0.0, 0.0), (0.0, 4.0), (2.5, 4.0), (2.5, 0.0), (2.0, 0.0)]

    @pytest.mark.parametrize("seed", range(5))
    def test_all_contours_closed(self, seed: int):
        """Test that every contour is closed on irregular fields."""
        field = FunctionField(7, 6, lambda x, y: ((x * 13 + y * 7 + seed * 5) % 11) / 10.0)
        contours = march(field, 0.45, close_border_cells=True)

        assert contours
        assert all(c[0] == c[-1] for c in contours)

    def test_below_border_unchanged(self):
        """Test that borders below the threshold add no segments."""
        rows = [[0.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 0.0]]
        plain = emit_segments(GridField(rows), 0.5)
        closed = emit_segments(GridField(rows), 0.5, close_border_cells=True)
        assert plain == closed


class TestMarch:
    """Tests for march."""

    def test_all_below(self):
        """Test that a field below the threshold has no contours."""
        assert march(GridField([[0.0] * 5] * 5), 0.5) == []

    def test_all_above(self):
        """Test that a field above the threshold has no contours."""
        assert march(GridField([[1.0] * 5] * 5), 0.5) == []

    def test_single_peak(self):
        """Test the diamond around a single raised sample."""
        field = GridField([[0, 0, 0], [0, 1, 0], [0, 0, 0]])
        contours = march(field, 0.5)

        assert contours == [[(1.5, 1.0), (1.0, 0.5), (0.5, 1.0), (1.0, 1.5), (1.5, 1.0)]]

    def test_filled_area_winding(self):
        """Test that filled regions and holes wind in opposite directions."""
        peak = march(GridField([[0, 0, 0], [0, 1, 0], [0, 0, 0]]), 0.5)
        hole = march(GridField([[1, 1, 1], [1, 0, 1], [1, 1, 1]]), 0.5)

        assert signed_area(peak[0]) == pytest.approx(-0.5)
        assert signed_area(hole[0]) == pytest.approx(0.5)

    def test_framed_all_below(self):
        """Test that framing an all-below field yields one border ring."""
        field = framed(GridField([[0.0] * 6] * 5), 0.5)
        contours = march(field, 0.5)

        assert len(contours) == 1
        assert contours[0][0] == contours[0][-1]

    def test_open_contour_touches_boundary(self):
        """Test that a shape cut by the edge yields an open chain."""
        rows = [[1.0 if x < 2 else 0.0 for x in range(5)] for _ in range(4)]
        contours = march(GridField(rows), 0.5)

        assert len(contours) == 1
        chain = contours[0]
        assert chain[0] != chain[-1]
        assert chain[0] == (1.5, 3.0)
        assert chain[-1] == (1.5, 0.0)
