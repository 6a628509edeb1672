from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DissolveState:
    alpha: float = 1.0
    elapsed: float = 0.0
    dissolving: bool = False
    was_revealed: bool = False
