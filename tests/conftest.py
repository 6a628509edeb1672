import os
import tempfile
from pathlib import Path

# Module loggers are created at import time, before any fixture runs.
os.environ.setdefault(
    "SCRATCHCARD_LOG_DIR", str(Path(tempfile.gettempdir()) / "scratchcard-test-logs")
)

import pygame
import pytest
from hypothesis import HealthCheck, settings

from scratchcard.geometry import Rect, Vec2
from scratchcard.settings import ScratchSettings

settings.register_profile(
    "default",
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)
settings.load_profile("default")


class RecordingStamper:
    """Paint target double that remembers every call."""

    def __init__(self) -> None:
        self.placements = []
        self.resized: list[Rect] = []
        self.clears = 0
        self.releases = 0

    def stamp(self, placement) -> None:
        self.placements.append(placement)

    def resize(self, rect: Rect) -> None:
        self.resized.append(rect)

    def clear(self) -> None:
        self.clears += 1

    def release(self) -> None:
        self.releases += 1


@pytest.fixture(autouse=True)
def dummy_sdl_video_driver(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    yield


@pytest.fixture(autouse=True)
def init_pygame() -> None:
    pygame.init()


@pytest.fixture()
def stamper() -> RecordingStamper:
    return RecordingStamper()


@pytest.fixture()
def scratch_settings() -> ScratchSettings:
    return ScratchSettings(
        brush_extent=Vec2(0.25, 0.25),
        grid_density=2,
        reveal_threshold=0.75,
        interpolation_max_samples=4,
        interpolation_min_distance=8.0,
    )
