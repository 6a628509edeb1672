"""Fade the cover out once a surface is revealed.

Reveal events only matter on edges of ``is_revealed``; the fade itself is
advanced by frame ticks carrying elapsed seconds.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Callable

import reactivex
from reactivex import operators as ops

from scratchcard.dissolve.state import DissolveState
from scratchcard.providers import ObservableProvider
from scratchcard.reveal import RevealState
from scratchcard.utilities.env.reveal import DEFAULT_DISSOLVE_DURATION

MIN_DURATION = 0.001

DissolveUpdate = Callable[[DissolveState], DissolveState]


class DissolveProvider(ObservableProvider[DissolveState]):
    def __init__(self, *, duration: float = DEFAULT_DISSOLVE_DURATION) -> None:
        self.duration = duration

    @staticmethod
    def initial_state(is_revealed: bool) -> DissolveState:
        return DissolveState(alpha=0.0 if is_revealed else 1.0, was_revealed=is_revealed)

    @staticmethod
    def on_reveal(state: DissolveState, reveal: RevealState) -> DissolveState:
        if reveal.is_revealed == state.was_revealed:
            return state
        if reveal.is_revealed:
            return replace(state, elapsed=0.0, dissolving=True, was_revealed=True)
        return DissolveState(alpha=1.0, was_revealed=False)

    def advance(self, state: DissolveState, delta_seconds: float) -> DissolveState:
        if not state.dissolving:
            return state

        step = delta_seconds / max(MIN_DURATION, self.duration)
        elapsed = min(1.0, max(0.0, state.elapsed + step))
        return replace(
            state,
            elapsed=elapsed,
            alpha=1.0 - elapsed,
            dissolving=elapsed < 1.0,
        )

    def observable(
        self,
        reveal_events: reactivex.Observable[RevealState],
        ticks: reactivex.Observable[float],
        *,
        initial_state: DissolveState,
    ) -> reactivex.Observable[DissolveState]:
        reveal_updates = reveal_events.pipe(
            ops.map(lambda reveal: lambda state: self.on_reveal(state, reveal)),
        )
        tick_updates = ticks.pipe(
            ops.filter(lambda dt: dt is not None),
            ops.map(lambda dt: lambda state: self.advance(state, dt)),
        )

        def apply(state: DissolveState, update: DissolveUpdate) -> DissolveState:
            return update(state)

        return reactivex.merge(reveal_updates, tick_updates).pipe(
            ops.scan(apply, seed=initial_state),
            ops.start_with(initial_state),
            ops.distinct_until_changed(),
            ops.share(),
        )
