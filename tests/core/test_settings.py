import pytest

from scratchcard.geometry import Vec2
from scratchcard.settings import ScratchSettings
from scratchcard.utilities.env import BrushShape
from scratchcard.utilities.env.brush import DEFAULT_BRUSH_EXTENT


class TestScratchSettings:
    """Validate tunables so misconfigured surfaces fail at startup rather than mid-drag."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Verify environment-free settings match the stock scratch card tuning."""
        for name in (
            "SCRATCHCARD_BRUSH_EXTENT",
            "SCRATCHCARD_GRID_DENSITY",
            "SCRATCHCARD_REVEAL_THRESHOLD",
            "SCRATCHCARD_INTERPOLATION_MAX_SAMPLES",
            "SCRATCHCARD_INTERPOLATION_MIN_DISTANCE",
        ):
            monkeypatch.delenv(name, raising=False)

        settings = ScratchSettings.from_env()

        assert settings.brush_extent == Vec2(0.25, 0.25)
        assert settings.grid_density == 2
        assert settings.reveal_threshold == pytest.approx(0.75)
        assert settings.interpolation_max_samples == 4
        assert settings.interpolation_min_distance == pytest.approx(8.0)
        assert (settings.grid_max_width, settings.grid_max_height) == (256, 64)

    def test_code_defaults_match_env_defaults(self) -> None:
        """Verify the dataclass defaults come from the same constants as the env readers."""
        settings = ScratchSettings()

        assert settings.brush_extent == Vec2(*DEFAULT_BRUSH_EXTENT)

    def test_from_env_reads_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Confirm every tunable can be overridden through the environment."""
        monkeypatch.setenv("SCRATCHCARD_BRUSH_EXTENT", "0.1, 0.2")
        monkeypatch.setenv("SCRATCHCARD_BRUSH_SHAPE", "Rectangle")
        monkeypatch.setenv("SCRATCHCARD_GRID_DENSITY", "3")
        monkeypatch.setenv("SCRATCHCARD_GRID_MAX_WIDTH", "128")
        monkeypatch.setenv("SCRATCHCARD_GRID_MAX_HEIGHT", "32")
        monkeypatch.setenv("SCRATCHCARD_REVEAL_THRESHOLD", "0.5")
        monkeypatch.setenv("SCRATCHCARD_INTERPOLATION_MAX_SAMPLES", "6")
        monkeypatch.setenv("SCRATCHCARD_INTERPOLATION_MIN_DISTANCE", "2.5")
        monkeypatch.setenv("SCRATCHCARD_DISSOLVE_DURATION", "1.25")

        settings = ScratchSettings.from_env()

        assert settings.brush_extent == Vec2(0.1, 0.2)
        assert settings.brush_shape is BrushShape.RECTANGLE
        assert settings.grid_density == 3
        assert (settings.grid_max_width, settings.grid_max_height) == (128, 32)
        assert settings.reveal_threshold == pytest.approx(0.5)
        assert settings.interpolation_max_samples == 6
        assert settings.interpolation_min_distance == pytest.approx(2.5)
        assert settings.dissolve_duration == pytest.approx(1.25)

    @pytest.mark.parametrize(
        ("env_var", "value"),
        [
            ("SCRATCHCARD_BRUSH_EXTENT", "0,0.25"),
            ("SCRATCHCARD_BRUSH_EXTENT", "1.5"),
            ("SCRATCHCARD_BRUSH_SHAPE", "star"),
            ("SCRATCHCARD_GRID_MAX_HEIGHT", "65"),
            ("SCRATCHCARD_REVEAL_THRESHOLD", "1.2"),
            ("SCRATCHCARD_INTERPOLATION_MIN_DISTANCE", "0"),
        ],
        ids=["zero-brush", "oversized-brush", "unknown-shape", "tall-grid", "threshold", "spacing"],
    )
    def test_from_env_rejects_out_of_bounds(
        self, monkeypatch: pytest.MonkeyPatch, env_var: str, value: str
    ) -> None:
        """Ensure out-of-bounds environment values raise and name the variable."""
        monkeypatch.setenv(env_var, value)

        with pytest.raises(ValueError, match=env_var):
            ScratchSettings.from_env()

    @pytest.mark.parametrize(
        "overrides",
        [
            {"brush_extent": Vec2(0.0, 0.5)},
            {"grid_density": 0},
            {"grid_max_height": 65},
            {"reveal_threshold": -0.1},
            {"interpolation_max_samples": 0},
            {"interpolation_min_distance": 0.0},
            {"mask_texture_scale": 0.0},
            {"dissolve_duration": -1.0},
        ],
        ids=[
            "brush",
            "density",
            "grid-height",
            "threshold",
            "samples",
            "spacing",
            "mask-scale",
            "dissolve",
        ],
    )
    def test_direct_construction_is_validated(self, overrides: dict) -> None:
        """Verify code-built settings obey the same bounds as the environment."""
        with pytest.raises(ValueError):
            ScratchSettings(**overrides)
