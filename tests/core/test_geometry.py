import pytest
from hypothesis import given
from hypothesis import strategies as st

from scratchcard.geometry import (BrushPlacement, CellIndex, Rect, Vec2,
                                  cell_rect, compute_brush_placement,
                                  point_to_cell)


@st.composite
def _grid_and_cell(draw: st.DrawFn) -> tuple[Rect, int, int, int, int]:
    width = draw(st.floats(min_value=1.0, max_value=4096.0))
    height = draw(st.floats(min_value=1.0, max_value=4096.0))
    x = draw(st.floats(min_value=-2048.0, max_value=2048.0))
    y = draw(st.floats(min_value=-2048.0, max_value=2048.0))
    columns = draw(st.integers(min_value=1, max_value=256))
    rows = draw(st.integers(min_value=1, max_value=64))
    cx = draw(st.integers(min_value=0, max_value=columns - 1))
    cy = draw(st.integers(min_value=0, max_value=rows - 1))
    return Rect(x, y, width, height), columns, rows, cx, cy


class TestVec2:
    """Keep the small vector type predictable since stroke maths leans on it."""

    def test_arithmetic(self) -> None:
        """Verify add, subtract and scale behave component-wise for interpolation."""
        a = Vec2(1.0, 2.0)
        b = Vec2(4.0, 6.0)

        assert b - a == Vec2(3.0, 4.0)
        assert a + b == Vec2(5.0, 8.0)
        assert a * 2.0 == Vec2(2.0, 4.0)
        assert (b - a).magnitude == pytest.approx(5.0)
        assert a.scale(b) == Vec2(4.0, 12.0)

    def test_of_accepts_tuples(self) -> None:
        """Ensure pointer tuples from the event layer convert to vectors."""
        assert Vec2.of((3, 4)) == Vec2(3.0, 4.0)
        vec = Vec2(1.0, 1.0)
        assert Vec2.of(vec) is vec


class TestRect:
    """Cover rectangle helpers used by layout and degenerate-size guards."""

    def test_from_size_applies_pivot(self) -> None:
        """Confirm a centred pivot puts the local origin in the middle of the rect."""
        rect = Rect.from_size(100.0, 50.0, pivot=Vec2(0.5, 0.5))

        assert rect == Rect(-50.0, -25.0, 100.0, 50.0)

    @pytest.mark.parametrize(
        ("width", "height"),
        [(0.0, 10.0), (10.0, 0.0), (-1.0, 10.0)],
        ids=["zero-width", "zero-height", "negative-width"],
    )
    def test_degenerate_rects_report_zero_aspect(self, width: float, height: float) -> None:
        """Ensure degenerate rectangles never divide by zero when asked for aspect."""
        rect = Rect(0.0, 0.0, width, height)

        assert rect.is_degenerate
        assert rect.aspect == 0.0


class TestCellGeometry:
    """Check cell rectangles and point lookups agree so hit-testing matches the overlay."""

    def test_cell_rect_is_centred_on_the_cell(self) -> None:
        """Verify cell rectangles carry their centre and the per-cell size."""
        rect = cell_rect(Rect(0.0, 0.0, 100.0, 50.0), 16, 8, 0, 0)

        assert rect.x == pytest.approx(3.125)
        assert rect.y == pytest.approx(3.125)
        assert rect.width == pytest.approx(6.25)
        assert rect.height == pytest.approx(6.25)

    def test_point_to_cell_floors_including_negative_offsets(self) -> None:
        """Confirm points left of or above the rect map to negative cells instead of cell zero."""
        container = Rect(0.0, 0.0, 100.0, 50.0)

        assert point_to_cell(container, 16, 8, Vec2(99.9, 49.9)) == CellIndex(15, 7)
        assert point_to_cell(container, 16, 8, Vec2(-0.1, 10.0)) == CellIndex(-1, 1)
        assert point_to_cell(container, 16, 8, Vec2(100.0, 50.0)) == CellIndex(16, 8)

    @given(data=_grid_and_cell())
    def test_cell_centre_round_trips(self, data: tuple[Rect, int, int, int, int]) -> None:
        """Verify every in-range cell centre maps back to its own cell."""
        container, columns, rows, cx, cy = data

        centre = cell_rect(container, columns, rows, cx, cy)

        assert point_to_cell(container, columns, rows, Vec2(centre.x, centre.y)) == CellIndex(cx, cy)


class TestBrushPlacement:
    """Guard the normalised stamp placement handed to compositors."""

    def test_placement_corrects_for_aspect(self) -> None:
        """Verify a square brush is narrowed on a wide surface so stamps stay round."""
        rect = Rect(0.0, 0.0, 200.0, 100.0)

        placement = compute_brush_placement(rect, Vec2(100.0, 50.0), Vec2(0.0, 0.0), Vec2(0.25, 0.25))

        assert placement.offset_x == pytest.approx(0.5 - 0.0625)
        assert placement.offset_y == pytest.approx(0.5 - 0.125)
        assert placement.inv_scale_x == pytest.approx(8.0)
        assert placement.inv_scale_y == pytest.approx(4.0)

    def test_placement_shifts_by_pivot(self) -> None:
        """Confirm centred-pivot local points land in the middle of the normalised frame."""
        rect = Rect.from_size(100.0, 100.0, pivot=Vec2(0.5, 0.5))

        placement = compute_brush_placement(rect, Vec2(0.0, 0.0), Vec2(0.5, 0.5), Vec2(0.2, 0.2))

        assert placement.offset_x == pytest.approx(0.4)
        assert placement.offset_y == pytest.approx(0.4)

    def test_uv_rect_inverts_scale(self) -> None:
        """Ensure the UV rectangle reports the stamp size rather than its inverse."""
        placement = BrushPlacement(0.1, 0.2, 4.0, 5.0)

        assert placement.uv_rect() == pytest.approx((0.1, 0.2, 0.25, 0.2))
        assert placement.as_tuple() == (0.1, 0.2, 4.0, 5.0)
