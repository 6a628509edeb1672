"""Bit-packed coverage grid laid over a scratch surface.

Each column is one ``uint64``; bit ``y`` of column ``x`` is set once the
brush has touched cell ``(x, y)``. Grid height is therefore capped at 64.
"""

from __future__ import annotations

import numpy as np

from scratchcard.geometry import CellIndex, Rect, Vec2, cell_rect, point_to_cell
from scratchcard.utilities.env import COLUMN_BITS
from scratchcard.utilities.env.grid import (DEFAULT_GRID_MAX_HEIGHT,
                                            DEFAULT_GRID_MAX_WIDTH)
from scratchcard.utilities.logging import get_logger

logger = get_logger(__name__)

_ONE = np.uint64(1)


def _bit(y: int) -> np.uint64:
    return _ONE << np.uint64(y)


def _clamp(value: int, lower: int, upper: int) -> int:
    return max(lower, min(upper, value))


class CoverageGrid:
    __slots__ = ("_width", "_height", "_cells")

    def __init__(self, width: int, height: int, cells: np.ndarray | None = None) -> None:
        if width < 0 or height < 0:
            raise ValueError("grid dimensions must not be negative")
        if height > COLUMN_BITS:
            raise ValueError(f"grid height must be at most {COLUMN_BITS}")
        if cells is None:
            cells = np.zeros(width, dtype=np.uint64)
        elif cells.shape != (width,) or cells.dtype != np.uint64:
            raise ValueError("cells must be a uint64 array with one entry per column")

        self._width = width
        self._height = height
        self._cells = cells

    @classmethod
    def empty(cls) -> CoverageGrid:
        """A zero-sized grid; every operation on it is a no-op."""
        return cls(0, 0)

    @classmethod
    def generate(
        cls,
        rect: Rect,
        brush_extent: Vec2,
        density: int,
        previous: CoverageGrid | None = None,
        *,
        max_width: int = DEFAULT_GRID_MAX_WIDTH,
        max_height: int = DEFAULT_GRID_MAX_HEIGHT,
    ) -> CoverageGrid:
        """Size a grid so one brush stamp covers roughly one cell.

        Storage of ``previous`` is shared when the new dimensions match it,
        so visited state survives a relayout that keeps the same cell count.
        """
        if rect.is_degenerate or brush_extent.x <= 0 or brush_extent.y <= 0:
            return cls.empty()

        width = _clamp(round(density * rect.aspect / brush_extent.x), 1, max_width)
        height = _clamp(
            round(density / brush_extent.y), 1, min(max_height, COLUMN_BITS)
        )

        if (
            previous is not None
            and previous.width == width
            and previous.height == height
        ):
            logger.debug("Reusing %dx%d coverage grid storage", width, height)
            return cls(width, height, previous._cells)

        logger.debug("Allocated %dx%d coverage grid", width, height)
        return cls(width, height)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def valid(self) -> bool:
        return self._width > 0 and self._height > 0

    @property
    def cell_count(self) -> int:
        return self._width * self._height

    def columns(self) -> tuple[int, ...]:
        """Snapshot of the raw column bitsets."""
        return tuple(int(column) for column in self._cells)

    def shares_storage_with(self, other: CoverageGrid) -> bool:
        return self._cells is other._cells

    def _in_range(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def get_visited(self, x: int, y: int) -> bool:
        if not self._in_range(x, y):
            return False
        return bool(self._cells[x] & _bit(y))

    def set_visited(self, x: int, y: int, value: bool) -> bool:
        """Set or clear a cell and return whether the stored value changed."""
        if not self._in_range(x, y):
            return False

        column = self._cells[x]
        bit = _bit(y)
        current = bool(column & bit)

        if value:
            column |= bit
        else:
            column &= ~bit

        self._cells[x] = column
        return current != value

    def visited_count(self) -> int:
        if not self.valid:
            return 0
        # Bits above ``height`` are never set, so a plain popcount is exact.
        return int(np.unpackbits(self._cells.view(np.uint8)).sum())

    def get_visited_percent(self) -> float:
        if not self.valid:
            return 0.0
        return self.visited_count() / self.cell_count

    def clear_visited(self) -> None:
        self._cells.fill(0)

    def calculate_cell_rect(self, container: Rect, x: int, y: int) -> Rect:
        if not self.valid:
            return Rect(container.x, container.y, 0.0, 0.0)
        return cell_rect(container, self._width, self._height, x, y)

    def local_point_to_cell(self, rect: Rect, point: Vec2) -> CellIndex:
        if not self.valid or rect.is_degenerate:
            return CellIndex(-1, -1)
        return point_to_cell(rect, self._width, self._height, point)

    def __repr__(self) -> str:
        return (
            f"CoverageGrid(width={self._width}, height={self._height}, "
            f"visited={self.visited_count()})"
        )
