from pathlib import Path
from typing import Annotated, Optional

import numpy as np
import pygame
import typer
from reactivex.subject import Subject

from scratchcard.dissolve import DissolveProvider, DissolveState
from scratchcard.geometry import Rect, Vec2
from scratchcard.render import PygameMaskStamper, draw_grid_overlay
from scratchcard.reveal import RevealState
from scratchcard.settings import ScratchSettings
from scratchcard.surface import ScratchSurface
from scratchcard.utilities.env import Configuration
from scratchcard.utilities.logging import get_logger

logger = get_logger(__name__)

DEFAULT_WIDTH = 480
DEFAULT_HEIGHT = 240
DEFAULT_FPS = 60


def default_backdrop(size: tuple[int, int]) -> pygame.Surface:
    """Diagonal colour gradient shown underneath the cover."""
    width, height = size
    xs = np.linspace(0.0, 1.0, width)[:, None]
    ys = np.linspace(0.0, 1.0, height)[None, :]
    pixels = np.zeros((width, height, 3), dtype=np.uint8)
    pixels[..., 0] = (255 * xs).astype(np.uint8)
    pixels[..., 1] = (255 * ys).astype(np.uint8)
    pixels[..., 2] = (255 * (1.0 - (xs + ys) / 2.0)).astype(np.uint8)
    return pygame.surfarray.make_surface(pixels)


class ScratchDemo:
    def __init__(
        self,
        window: pygame.Surface,
        settings: ScratchSettings,
        *,
        cover: pygame.Surface | None = None,
        backdrop: pygame.Surface | None = None,
        show_overlay: bool = False,
    ) -> None:
        self.window = window
        self.settings = settings
        self.show_overlay = show_overlay
        size = window.get_size()
        self.backdrop = (
            pygame.transform.scale(backdrop, size)
            if backdrop is not None
            else default_backdrop(size)
        )

        self.stamper = PygameMaskStamper.from_settings(settings, cover=cover)
        self.surface = ScratchSurface(settings, target=self.stamper)
        self.surface.reload(Rect.from_size(*size))

        self.dissolve = DissolveProvider(duration=settings.dissolve_duration)
        self.ticks: Subject[float] = Subject()
        self.dissolve_state = self.dissolve.initial_state(self.surface.is_revealed)
        self._subscriptions = [
            self.dissolve.observable(
                self.surface.progress_changed(),
                self.ticks,
                initial_state=self.dissolve_state,
            ).subscribe(on_next=self._on_dissolve),
            self.surface.progress_changed().subscribe(on_next=self._on_progress),
        ]
        self._dragging = False

    def _on_dissolve(self, state: DissolveState) -> None:
        self.dissolve_state = state

    def _on_progress(self, state: RevealState) -> None:
        logger.debug(
            "Reveal progress %.1f%% (revealed=%s)", state.progress * 100.0, state.is_revealed
        )

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Apply one pygame event; ``False`` once the demo should stop."""
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return False
            if event.key == pygame.K_r:
                self.surface.restore()
            elif event.key == pygame.K_g:
                self.show_overlay = not self.show_overlay
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self._dragging = True
            self.surface.begin_drag(event.pos)
        elif event.type == pygame.MOUSEMOTION and self._dragging:
            self.surface.drag(event.pos)
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self._dragging = False
            self.surface.end_drag()
        return True

    def draw(self, pointer: tuple[int, int] | None = None) -> None:
        self.window.blit(self.backdrop, (0, 0))

        mask = self.stamper.surface
        if mask is not None:
            scaled = pygame.transform.scale(mask, self.window.get_size())
            scaled.set_alpha(round(255 * self.dissolve_state.alpha))
            self.window.blit(scaled, (0, 0))

        if self.show_overlay:
            draw_grid_overlay(
                self.window,
                self.surface.grid,
                self.surface.rect,
                pointer=Vec2.of(pointer) if pointer is not None else None,
            )

    def tick(self, delta_seconds: float) -> None:
        self.ticks.on_next(delta_seconds)

    def close(self) -> None:
        for subscription in self._subscriptions:
            subscription.dispose()
        self.ticks.on_completed()
        self.surface.close()


def demo_command(
    width: int = typer.Option(DEFAULT_WIDTH, min=1, help="Window width in pixels."),
    height: int = typer.Option(DEFAULT_HEIGHT, min=1, help="Window height in pixels."),
    cover: Annotated[
        Optional[Path], typer.Option("--cover", help="Image used as the scratch cover.")
    ] = None,
    backdrop: Annotated[
        Optional[Path], typer.Option("--backdrop", help="Image revealed underneath.")
    ] = None,
    overlay: Annotated[
        Optional[bool],
        typer.Option("--overlay/--no-overlay", help="Show the coverage grid overlay."),
    ] = None,
    frames: int = typer.Option(
        0, min=0, help="Stop after this many frames; 0 runs until the window closes."
    ),
    fps: int = typer.Option(DEFAULT_FPS, min=1, help="Frame rate cap."),
) -> None:
    try:
        settings = ScratchSettings.from_env()
    except ValueError as exc:
        logger.error("Invalid configuration: %s", exc)
        raise typer.Exit(code=1)

    pygame.init()
    try:
        window = pygame.display.set_mode((width, height))
        pygame.display.set_caption("scratchcard")
        demo = ScratchDemo(
            window,
            settings,
            cover=pygame.image.load(str(cover)) if cover else None,
            backdrop=pygame.image.load(str(backdrop)) if backdrop else None,
            show_overlay=Configuration.debug_overlay() if overlay is None else overlay,
        )
        clock = pygame.time.Clock()
        frame = 0
        running = True
        try:
            while running:
                for event in pygame.event.get():
                    running = demo.handle_event(event) and running
                demo.draw(pygame.mouse.get_pos())
                pygame.display.flip()
                demo.tick(clock.tick(fps) / 1000.0)

                frame += 1
                if frames and frame >= frames:
                    running = False
            logger.info(
                "Demo finished after %d frames at %.1f%% revealed",
                frame,
                demo.surface.reveal_progress() * 100.0,
            )
        finally:
            demo.close()
    finally:
        pygame.quit()
