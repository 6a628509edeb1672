"""Environment configuration helpers."""

from scratchcard.utilities.env.config import Configuration as Configuration
from scratchcard.utilities.env.enums import BrushShape as BrushShape
from scratchcard.utilities.env.grid import COLUMN_BITS as COLUMN_BITS
