from __future__ import annotations

import math
from typing import Callable, Protocol

from scratchcard.geometry import ZERO, BrushPlacement, Rect, Vec2, compute_brush_placement
from scratchcard.grid import CoverageGrid
from scratchcard.utilities.logging import get_logger

logger = get_logger(__name__)


class BrushStamper(Protocol):
    """Composites one brush stamp onto the cover at a normalised placement."""

    def stamp(self, placement: BrushPlacement) -> None: ...


def interpolate_stroke(
    previous: Vec2 | None,
    current: Vec2,
    *,
    max_samples: int,
    min_distance: float,
) -> list[Vec2]:
    """Return the points to draw for a pointer move, ending with ``current``.

    A move of ``k * min_distance`` with ``k >= 1`` yields ``min(k, max_samples)`` points in
    total, the last one being ``current`` itself. Moves shorter than
    ``2 * min_distance`` only draw ``current``.
    """
    points: list[Vec2] = []

    if previous is not None:
        delta = current - previous
        if not delta.is_zero():
            count = min(max_samples, math.floor(delta.magnitude / min_distance))
            for i in range(1, count):
                points.append(previous + delta * (i / count))

    points.append(current)
    return points


class StrokeSampler:
    """Turns drag events into grid updates and brush stamps.

    The grid and rectangle are pulled through callables on every draw since
    both are replaced whenever the owning surface is laid out again.
    """

    def __init__(
        self,
        *,
        grid_source: Callable[[], CoverageGrid],
        rect_source: Callable[[], Rect],
        brush_extent: Vec2,
        stamper: BrushStamper | None = None,
        pivot: Vec2 = ZERO,
        max_samples: int = 4,
        min_distance: float = 8.0,
    ) -> None:
        if max_samples < 1:
            raise ValueError("max_samples must be at least 1")
        if min_distance <= 0:
            raise ValueError("min_distance must be positive")

        self._grid_source = grid_source
        self._rect_source = rect_source
        self._brush_extent = brush_extent
        self._pivot = pivot
        self._max_samples = max_samples
        self._min_distance = min_distance
        self.stamper = stamper
        self._previous: Vec2 | None = None

    @property
    def previous_draw_position(self) -> Vec2 | None:
        return self._previous

    @property
    def is_dragging(self) -> bool:
        return self._previous is not None

    def begin(self, point: Vec2 | tuple[float, float]) -> None:
        """Start a gesture; nothing is drawn until the first move."""
        self._previous = Vec2.of(point)

    def cancel(self) -> None:
        """Forget the gesture. Cells already visited stay visited."""
        self._previous = None

    def move(self, point: Vec2 | tuple[float, float]) -> bool:
        """Draw along the segment to ``point``; ``True`` if coverage grew."""
        current = Vec2.of(point)
        samples = interpolate_stroke(
            self._previous,
            current,
            max_samples=self._max_samples,
            min_distance=self._min_distance,
        )

        changed = False
        for sample in samples:
            changed |= self.draw_at(sample)

        self._previous = current
        logger.debug(
            "stroke.move",
            extra={"samples": len(samples), "changed": changed},
        )
        return changed

    def draw_at(self, point: Vec2) -> bool:
        grid = self._grid_source()
        rect = self._rect_source()
        if not grid.valid or rect.is_degenerate:
            return False

        cell = grid.local_point_to_cell(rect, point)
        changed = grid.set_visited(cell.x, cell.y, True)

        if self.stamper is not None:
            self.stamper.stamp(
                compute_brush_placement(rect, point, self._pivot, self._brush_extent)
            )

        return changed
