from scratchcard.utilities.env.parsing import _env_flag, _env_float, _env_int

DEFAULT_REVEAL_THRESHOLD = 0.75
DEFAULT_DISSOLVE_DURATION = 0.5
DEFAULT_MASK_TEXTURE_SCALE = 1.0
DEFAULT_MASK_TEXTURE_MAX_SIZE = 512


class RevealConfiguration:
    @classmethod
    def reveal_threshold(cls) -> float:
        return _env_float(
            "SCRATCHCARD_REVEAL_THRESHOLD",
            default=DEFAULT_REVEAL_THRESHOLD,
            minimum=0.0,
            maximum=1.0,
        )

    @classmethod
    def dissolve_duration(cls) -> float:
        return _env_float(
            "SCRATCHCARD_DISSOLVE_DURATION",
            default=DEFAULT_DISSOLVE_DURATION,
            minimum=0.0,
        )


class MaskConfiguration:
    @classmethod
    def mask_texture_scale(cls) -> float:
        return _env_float(
            "SCRATCHCARD_MASK_TEXTURE_SCALE",
            default=DEFAULT_MASK_TEXTURE_SCALE,
            minimum=0.0,
            exclusive_minimum=True,
        )

    @classmethod
    def mask_texture_max_size(cls) -> int:
        return _env_int(
            "SCRATCHCARD_MASK_TEXTURE_MAX_SIZE",
            default=DEFAULT_MASK_TEXTURE_MAX_SIZE,
            minimum=1,
        )

    @classmethod
    def debug_overlay(cls) -> bool:
        return _env_flag("SCRATCHCARD_DEBUG_OVERLAY")
