from scratchcard.utilities.env.brush import BrushConfiguration
from scratchcard.utilities.env.grid import GridConfiguration
from scratchcard.utilities.env.reveal import (MaskConfiguration,
                                              RevealConfiguration)


class Configuration(
    BrushConfiguration,
    GridConfiguration,
    RevealConfiguration,
    MaskConfiguration,
):
    """Aggregate environment configuration helpers."""
