"""pygame paint target for a scratch surface.

The cover lives in an ``SRCALPHA`` surface sized from the layout rect. Each
stamp punches a fully transparent hole; ``pygame.draw`` writes the alpha
channel directly instead of blending, which is what erasing needs.
"""

from __future__ import annotations

import pygame

from scratchcard.geometry import BrushPlacement, Rect
from scratchcard.settings import ScratchSettings
from scratchcard.utilities.env import BrushShape
from scratchcard.utilities.env.reveal import (DEFAULT_MASK_TEXTURE_MAX_SIZE,
                                              DEFAULT_MASK_TEXTURE_SCALE)
from scratchcard.utilities.logging import get_logger

logger = get_logger(__name__)

TRANSPARENT = (0, 0, 0, 0)
OPAQUE_WHITE = (255, 255, 255, 255)


def mask_texture_size(
    rect: Rect,
    *,
    scale: float = DEFAULT_MASK_TEXTURE_SCALE,
    max_size: int = DEFAULT_MASK_TEXTURE_MAX_SIZE,
) -> tuple[int, int]:
    aspect = rect.height / rect.width
    width = max(1, int(min(max_size, rect.width * scale)))
    height = max(1, int(width * aspect))
    return width, height


class PygameMaskStamper:
    def __init__(
        self,
        *,
        cover: pygame.Surface | None = None,
        shape: BrushShape = BrushShape.ELLIPSE,
        texture_scale: float = DEFAULT_MASK_TEXTURE_SCALE,
        max_texture_size: int = DEFAULT_MASK_TEXTURE_MAX_SIZE,
    ) -> None:
        self.cover = cover
        self.shape = shape
        self.texture_scale = texture_scale
        self.max_texture_size = max_texture_size
        self.surface: pygame.Surface | None = None
        self.stamp_count = 0

    @classmethod
    def from_settings(
        cls, settings: ScratchSettings, *, cover: pygame.Surface | None = None
    ) -> PygameMaskStamper:
        return cls(
            cover=cover,
            shape=settings.brush_shape,
            texture_scale=settings.mask_texture_scale,
            max_texture_size=settings.mask_texture_max_size,
        )

    def resize(self, rect: Rect) -> None:
        size = mask_texture_size(
            rect, scale=self.texture_scale, max_size=self.max_texture_size
        )
        if self.surface is not None and self.surface.get_size() != size:
            self.release()

        if self.surface is None:
            logger.debug("Creating %dx%d mask target", *size)
            self.surface = pygame.Surface(size, pygame.SRCALPHA)
            self.clear()

    def release(self) -> None:
        self.surface = None

    def clear(self) -> None:
        if self.surface is None:
            return
        if self.cover is None:
            self.surface.fill(OPAQUE_WHITE)
            return
        self.surface.fill(TRANSPARENT)
        self.surface.blit(
            pygame.transform.scale(self.cover, self.surface.get_size()), (0, 0)
        )

    def stamp(self, placement: BrushPlacement) -> None:
        if self.surface is None:
            return

        u, v, w, h = placement.uv_rect()
        target_w, target_h = self.surface.get_size()
        area = pygame.Rect(
            round(u * target_w),
            round(v * target_h),
            max(1, round(w * target_w)),
            max(1, round(h * target_h)),
        )

        if self.shape == BrushShape.RECTANGLE:
            self.surface.fill(TRANSPARENT, area)
        else:
            pygame.draw.ellipse(self.surface, TRANSPARENT, area)
        self.stamp_count += 1
