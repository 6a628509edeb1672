from __future__ import annotations

from dataclasses import dataclass

from scratchcard.geometry import Vec2
from scratchcard.utilities.env import COLUMN_BITS, BrushShape, Configuration
from scratchcard.utilities.env.brush import (DEFAULT_BRUSH_EXTENT,
                                             DEFAULT_BRUSH_SHAPE,
                                             DEFAULT_INTERPOLATION_MAX_SAMPLES,
                                             DEFAULT_INTERPOLATION_MIN_DISTANCE)
from scratchcard.utilities.env.grid import (DEFAULT_GRID_DENSITY,
                                            DEFAULT_GRID_MAX_HEIGHT,
                                            DEFAULT_GRID_MAX_WIDTH)
from scratchcard.utilities.env.reveal import (DEFAULT_DISSOLVE_DURATION,
                                              DEFAULT_MASK_TEXTURE_MAX_SIZE,
                                              DEFAULT_MASK_TEXTURE_SCALE,
                                              DEFAULT_REVEAL_THRESHOLD)


@dataclass(frozen=True)
class ScratchSettings:
    """Tunables for one scratch surface."""

    brush_extent: Vec2 = Vec2(*DEFAULT_BRUSH_EXTENT)
    brush_shape: BrushShape = DEFAULT_BRUSH_SHAPE
    grid_density: int = DEFAULT_GRID_DENSITY
    grid_max_width: int = DEFAULT_GRID_MAX_WIDTH
    grid_max_height: int = DEFAULT_GRID_MAX_HEIGHT
    reveal_threshold: float = DEFAULT_REVEAL_THRESHOLD
    interpolation_max_samples: int = DEFAULT_INTERPOLATION_MAX_SAMPLES
    interpolation_min_distance: float = DEFAULT_INTERPOLATION_MIN_DISTANCE
    mask_texture_scale: float = DEFAULT_MASK_TEXTURE_SCALE
    mask_texture_max_size: int = DEFAULT_MASK_TEXTURE_MAX_SIZE
    dissolve_duration: float = DEFAULT_DISSOLVE_DURATION

    def __post_init__(self) -> None:
        if not (0.0 < self.brush_extent.x <= 1.0 and 0.0 < self.brush_extent.y <= 1.0):
            raise ValueError("brush_extent components must be within (0, 1]")
        if self.grid_density < 1:
            raise ValueError("grid_density must be at least 1")
        if self.grid_max_width < 1:
            raise ValueError("grid_max_width must be at least 1")
        if not 1 <= self.grid_max_height <= COLUMN_BITS:
            raise ValueError(f"grid_max_height must be within [1, {COLUMN_BITS}]")
        if not 0.0 <= self.reveal_threshold <= 1.0:
            raise ValueError("reveal_threshold must be within [0, 1]")
        if self.interpolation_max_samples < 1:
            raise ValueError("interpolation_max_samples must be at least 1")
        if self.interpolation_min_distance <= 0:
            raise ValueError("interpolation_min_distance must be positive")
        if self.mask_texture_scale <= 0:
            raise ValueError("mask_texture_scale must be positive")
        if self.mask_texture_max_size < 1:
            raise ValueError("mask_texture_max_size must be at least 1")
        if self.dissolve_duration < 0:
            raise ValueError("dissolve_duration must not be negative")

    @classmethod
    def from_env(cls) -> ScratchSettings:
        return cls(
            brush_extent=Vec2.of(Configuration.brush_extent()),
            brush_shape=Configuration.brush_shape(),
            grid_density=Configuration.grid_density(),
            grid_max_width=Configuration.grid_max_width(),
            grid_max_height=Configuration.grid_max_height(),
            reveal_threshold=Configuration.reveal_threshold(),
            interpolation_max_samples=Configuration.interpolation_max_samples(),
            interpolation_min_distance=Configuration.interpolation_min_distance(),
            mask_texture_scale=Configuration.mask_texture_scale(),
            mask_texture_max_size=Configuration.mask_texture_max_size(),
            dissolve_duration=Configuration.dissolve_duration(),
        )
