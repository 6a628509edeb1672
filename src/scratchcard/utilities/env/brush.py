import os

from scratchcard.utilities.env.enums import BrushShape
from scratchcard.utilities.env.parsing import _env_float, _env_int, _env_pair

DEFAULT_BRUSH_EXTENT = (0.25, 0.25)
DEFAULT_BRUSH_SHAPE = BrushShape.ELLIPSE
DEFAULT_INTERPOLATION_MAX_SAMPLES = 4
DEFAULT_INTERPOLATION_MIN_DISTANCE = 8.0


class BrushConfiguration:
    @classmethod
    def brush_extent(cls) -> tuple[float, float]:
        return _env_pair(
            "SCRATCHCARD_BRUSH_EXTENT",
            default=DEFAULT_BRUSH_EXTENT,
            minimum=0.0,
            maximum=1.0,
            exclusive_minimum=True,
        )

    @classmethod
    def brush_shape(cls) -> BrushShape:
        value = os.environ.get("SCRATCHCARD_BRUSH_SHAPE", DEFAULT_BRUSH_SHAPE)
        try:
            return BrushShape(value.strip().lower())
        except ValueError as exc:
            raise ValueError(
                "SCRATCHCARD_BRUSH_SHAPE must be 'ellipse' or 'rectangle'"
            ) from exc

    @classmethod
    def interpolation_max_samples(cls) -> int:
        return _env_int(
            "SCRATCHCARD_INTERPOLATION_MAX_SAMPLES",
            default=DEFAULT_INTERPOLATION_MAX_SAMPLES,
            minimum=1,
        )

    @classmethod
    def interpolation_min_distance(cls) -> float:
        return _env_float(
            "SCRATCHCARD_INTERPOLATION_MIN_DISTANCE",
            default=DEFAULT_INTERPOLATION_MIN_DISTANCE,
            minimum=0.0,
            exclusive_minimum=True,
        )
