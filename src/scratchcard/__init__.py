"""Coverage tracking for scratch-off reveal surfaces."""

from scratchcard.geometry import (BrushPlacement, CellIndex, Rect, Vec2,
                                  compute_brush_placement)
from scratchcard.grid import CoverageGrid
from scratchcard.reveal import RevealState, RevealTracker
from scratchcard.settings import ScratchSettings
from scratchcard.stroke import BrushStamper, StrokeSampler, interpolate_stroke
from scratchcard.surface import ScratchSurface, StampTarget

__all__ = [
    "BrushPlacement",
    "BrushStamper",
    "CellIndex",
    "CoverageGrid",
    "Rect",
    "RevealState",
    "RevealTracker",
    "ScratchSettings",
    "ScratchSurface",
    "StampTarget",
    "StrokeSampler",
    "Vec2",
    "compute_brush_placement",
    "interpolate_stroke",
]
