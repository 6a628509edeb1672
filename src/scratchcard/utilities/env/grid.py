from scratchcard.utilities.env.parsing import _env_int

DEFAULT_GRID_DENSITY = 2
DEFAULT_GRID_MAX_WIDTH = 256
DEFAULT_GRID_MAX_HEIGHT = 64
# One uint64 per column holds the rows.
COLUMN_BITS = 64


class GridConfiguration:
    @classmethod
    def grid_density(cls) -> int:
        return _env_int("SCRATCHCARD_GRID_DENSITY", default=DEFAULT_GRID_DENSITY, minimum=1)

    @classmethod
    def grid_max_width(cls) -> int:
        return _env_int(
            "SCRATCHCARD_GRID_MAX_WIDTH", default=DEFAULT_GRID_MAX_WIDTH, minimum=1
        )

    @classmethod
    def grid_max_height(cls) -> int:
        return _env_int(
            "SCRATCHCARD_GRID_MAX_HEIGHT",
            default=DEFAULT_GRID_MAX_HEIGHT,
            minimum=1,
            maximum=COLUMN_BITS,
        )
