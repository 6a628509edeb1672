from __future__ import annotations

from dataclasses import dataclass

import reactivex
from reactivex.subject import Subject

from scratchcard.grid import CoverageGrid
from scratchcard.utilities.env.reveal import DEFAULT_REVEAL_THRESHOLD
from scratchcard.utilities.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class RevealState:
    progress: float
    is_revealed: bool


class RevealTracker:
    """Publishes reveal progress for a coverage grid.

    Every call to :meth:`notify` emits, even when the state is unchanged.
    Callers only notify after a draw reported new coverage or after a reset,
    and consumers that care about edges compare ``is_revealed`` themselves.
    """

    def __init__(self, threshold: float = DEFAULT_REVEAL_THRESHOLD) -> None:
        if not 0.0 <= threshold <= 1.0:
            raise ValueError("reveal threshold must be within [0, 1]")
        self._threshold = threshold
        self._subject: Subject[RevealState] = Subject()
        self._latest = RevealState(progress=0.0, is_revealed=False)

    @property
    def threshold(self) -> float:
        return self._threshold

    @property
    def latest(self) -> RevealState:
        """The last state emitted, ``(0.0, False)`` before the first emission."""
        return self._latest

    def evaluate(self, progress: float) -> RevealState:
        return RevealState(progress=progress, is_revealed=progress >= self._threshold)

    def recompute(self, grid: CoverageGrid) -> RevealState:
        if not grid.valid:
            # Nothing to scratch, so nothing is revealed even at threshold 0.
            return RevealState(progress=0.0, is_revealed=False)
        return self.evaluate(grid.get_visited_percent())

    def notify(self, grid: CoverageGrid) -> RevealState:
        state = self.recompute(grid)
        if state.is_revealed != self._latest.is_revealed:
            logger.info(
                "Reveal threshold %s at %.1f%%",
                "crossed" if state.is_revealed else "lost",
                state.progress * 100.0,
            )
        self._latest = state
        self._subject.on_next(state)
        return state

    def observable(self) -> reactivex.Observable[RevealState]:
        return self._subject

    def dispose(self) -> None:
        self._subject.on_completed()
        self._subject.dispose()
