from __future__ import annotations

from typing import Protocol

import reactivex

from scratchcard.geometry import ZERO, CellIndex, Rect, Vec2
from scratchcard.grid import CoverageGrid
from scratchcard.reveal import RevealState, RevealTracker
from scratchcard.settings import ScratchSettings
from scratchcard.stroke import BrushStamper, StrokeSampler
from scratchcard.utilities.logging import get_logger

logger = get_logger(__name__)

_NO_RECT = Rect(0.0, 0.0, 0.0, 0.0)


class StampTarget(BrushStamper, Protocol):
    """The paint target holding the cover that stamps erase."""

    def resize(self, rect: Rect) -> None: ...

    def clear(self) -> None: ...

    def release(self) -> None: ...


class ScratchSurface:
    """A scratch-off cover: owns the coverage grid, the stroke sampler and
    the reveal tracker, and forwards stamps to an optional paint target.

    Drag points are in the surface's local space. The host calls
    :meth:`reload` whenever the drawable rectangle changes; until the first
    successful reload, and after :meth:`disable`, drags are ignored.
    """

    def __init__(
        self,
        settings: ScratchSettings | None = None,
        *,
        target: StampTarget | None = None,
        pivot: Vec2 = ZERO,
    ) -> None:
        self.settings = settings or ScratchSettings.from_env()
        self.pivot = pivot
        self._target = target
        self._grid = CoverageGrid.empty()
        self._rect: Rect | None = None
        self._active = False

        self.tracker = RevealTracker(self.settings.reveal_threshold)
        self.sampler = StrokeSampler(
            grid_source=lambda: self._grid,
            rect_source=lambda: self.rect,
            brush_extent=self.settings.brush_extent,
            stamper=target,
            pivot=pivot,
            max_samples=self.settings.interpolation_max_samples,
            min_distance=self.settings.interpolation_min_distance,
        )

    @property
    def grid(self) -> CoverageGrid:
        return self._grid

    @property
    def rect(self) -> Rect:
        return self._rect or _NO_RECT

    @property
    def target(self) -> StampTarget | None:
        return self._target

    @property
    def active(self) -> bool:
        return self._active

    @property
    def is_revealed(self) -> bool:
        return self.reveal_state().is_revealed

    def reveal_progress(self) -> float:
        return self._grid.get_visited_percent()

    def reveal_state(self) -> RevealState:
        return self.tracker.recompute(self._grid)

    def progress_changed(self) -> reactivex.Observable[RevealState]:
        return self.tracker.observable()

    def reload(self, rect: Rect) -> bool:
        """Lay the surface out over ``rect``; safe to call on every layout pass."""
        if rect.is_degenerate:
            logger.warning(
                "Ignoring reload for degenerate rect %.1fx%.1f", rect.width, rect.height
            )
            return False

        self._grid = CoverageGrid.generate(
            rect,
            self.settings.brush_extent,
            max(1, self.settings.grid_density),
            self._grid,
            max_width=self.settings.grid_max_width,
            max_height=self.settings.grid_max_height,
        )
        self._rect = rect
        if self._target is not None:
            self._target.resize(rect)
        self._active = True
        return True

    def disable(self) -> None:
        """Drop the gesture, release the target and forget all coverage."""
        self.sampler.cancel()
        if self._target is not None:
            self._target.release()
        had_coverage = self._grid.visited_count() > 0
        if self._grid.valid:
            self._grid.clear_visited()
        self._active = False
        if had_coverage:
            self.tracker.notify(self._grid)

    def restore(self) -> RevealState:
        """Cover the surface again and announce the reset progress."""
        self._grid.clear_visited()
        if self._active and self._target is not None:
            self._target.clear()
        logger.info("Restored scratch surface")
        return self.tracker.notify(self._grid)

    def begin_drag(self, point: Vec2 | tuple[float, float]) -> None:
        if not self._active:
            return
        self.sampler.begin(point)

    def drag(self, point: Vec2 | tuple[float, float]) -> bool:
        """Scratch towards ``point``; ``True`` if new cells were uncovered."""
        if not self._active or not self._grid.valid:
            return False

        changed = self.sampler.move(point)
        if changed:
            self.tracker.notify(self._grid)
        return changed

    def end_drag(self) -> None:
        self.sampler.cancel()

    def cell_at(self, point: Vec2 | tuple[float, float]) -> CellIndex:
        return self._grid.local_point_to_cell(self.rect, Vec2.of(point))

    def cell_rect(self, x: int, y: int) -> Rect:
        return self._grid.calculate_cell_rect(self.rect, x, y)

    def close(self) -> None:
        self.disable()
        self.tracker.dispose()
