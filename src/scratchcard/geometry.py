"""Coordinate conversions between a surface's local space and its grid.

Local space is whatever unit the host layout uses for the drawable
rectangle. ``Rect.x``/``Rect.y`` are the minimum corner, so a rectangle
whose pivot is its centre has negative ``x``/``y``. The one exception is
:func:`cell_rect`, whose result carries the cell centre in ``x``/``y``.
Every function here is pure and accepts indices outside the grid; clamping
is the caller's choice.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Vec2:
    x: float
    y: float

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vec2:
        return Vec2(self.x * factor, self.y * factor)

    def scale(self, other: Vec2) -> Vec2:
        """Component-wise product."""
        return Vec2(self.x * other.x, self.y * other.y)

    @property
    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    def is_zero(self) -> bool:
        return self.x == 0 and self.y == 0

    @classmethod
    def of(cls, value: Vec2 | tuple[float, float]) -> Vec2:
        if isinstance(value, Vec2):
            return value
        x, y = value
        return cls(float(x), float(y))


ZERO = Vec2(0.0, 0.0)


@dataclass(frozen=True, slots=True)
class Rect:
    x: float
    y: float
    width: float
    height: float

    @property
    def position(self) -> Vec2:
        return Vec2(self.x, self.y)

    @property
    def size(self) -> Vec2:
        return Vec2(self.width, self.height)

    @property
    def is_degenerate(self) -> bool:
        return self.width <= 0 or self.height <= 0

    @property
    def aspect(self) -> float:
        """Width over height, ``0.0`` for degenerate rectangles."""
        if self.is_degenerate:
            return 0.0
        return self.width / self.height

    @classmethod
    def from_size(cls, width: float, height: float, *, pivot: Vec2 = ZERO) -> Rect:
        """Build a rectangle whose local origin sits at ``pivot`` (0..1 per axis)."""
        return cls(-pivot.x * width, -pivot.y * height, width, height)


@dataclass(frozen=True, slots=True)
class CellIndex:
    x: int
    y: int

    def __iter__(self):
        yield self.x
        yield self.y


@dataclass(frozen=True, slots=True)
class BrushPlacement:
    """Normalised stamp placement: UV offset plus inverse UV size."""

    offset_x: float
    offset_y: float
    inv_scale_x: float
    inv_scale_y: float

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.offset_x, self.offset_y, self.inv_scale_x, self.inv_scale_y)

    def uv_rect(self) -> tuple[float, float, float, float]:
        """Return ``(u, v, width, height)`` of the stamp in normalised space."""
        return (
            self.offset_x,
            self.offset_y,
            1.0 / self.inv_scale_x,
            1.0 / self.inv_scale_y,
        )


def cell_rect(container: Rect, columns: int, rows: int, x: int, y: int) -> Rect:
    """Return the rectangle of cell ``(x, y)``.

    The returned ``x``/``y`` are the cell's centre, not its corner; the debug
    overlay draws cubes around that centre.
    """
    w = container.width / columns
    h = container.height / rows

    cx = container.x + x * w + w / 2.0
    cy = container.y + y * h + h / 2.0

    return Rect(cx, cy, w, h)


def point_to_cell(container: Rect, columns: int, rows: int, point: Vec2) -> CellIndex:
    w = container.width / columns
    h = container.height / rows

    return CellIndex(
        math.floor((point.x - container.x) / w),
        math.floor((point.y - container.y) / h),
    )


def compute_brush_placement(
    rect: Rect,
    local_point: Vec2,
    pivot: Vec2,
    brush_extent: Vec2,
) -> BrushPlacement:
    """Map a local point to the normalised frame a stamp compositor expects.

    The horizontal extent is corrected by the inverse aspect so a brush of
    ``(0.25, 0.25)`` stays round on a wide surface.
    """
    point = local_point + pivot.scale(rect.size)

    sx = brush_extent.x * (rect.height / rect.width)
    sy = brush_extent.y

    return BrushPlacement(
        offset_x=point.x / rect.width - 0.5 * sx,
        offset_y=point.y / rect.height - 0.5 * sy,
        inv_scale_x=1.0 / sx,
        inv_scale_y=1.0 / sy,
    )
