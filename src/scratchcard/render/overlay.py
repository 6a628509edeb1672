from __future__ import annotations

import pygame

from scratchcard.geometry import Rect, Vec2
from scratchcard.grid import CoverageGrid

OVERLAY_ALPHA = 0.15
HOVER_COLOR = (255, 235, 4)
VISITED_COLOR = (0, 255, 0)
UNVISITED_COLOR = (255, 0, 0)


def draw_grid_overlay(
    window: pygame.Surface,
    grid: CoverageGrid,
    rect: Rect,
    *,
    origin: tuple[int, int] = (0, 0),
    pointer: Vec2 | None = None,
    alpha: float = OVERLAY_ALPHA,
) -> None:
    """Tint every grid cell over the surface drawn at ``origin`` in ``window``.

    ``pointer`` is in the surface's local space; the cell under it is
    highlighted.
    """
    if not grid.valid or rect.is_degenerate:
        return

    hovered = grid.local_point_to_cell(rect, pointer) if pointer is not None else None
    layer = pygame.Surface(window.get_size(), pygame.SRCALPHA)
    channel_alpha = int(round(255 * max(0.0, min(1.0, alpha))))

    for x in range(grid.width):
        for y in range(grid.height):
            cell = grid.calculate_cell_rect(rect, x, y)

            if hovered is not None and (x, y) == tuple(hovered):
                color = HOVER_COLOR
            elif grid.get_visited(x, y):
                color = VISITED_COLOR
            else:
                color = UNVISITED_COLOR

            # Shrink by one unit to leave a gap between neighbours.
            area = pygame.Rect(0, 0, max(1, int(cell.width) - 1), max(1, int(cell.height) - 1))
            area.center = (
                round(origin[0] + cell.x - rect.x),
                round(origin[1] + cell.y - rect.y),
            )
            layer.fill((*color, channel_alpha), area)

    window.blit(layer, (0, 0))
