from scratchcard.dissolve.provider import DissolveProvider as DissolveProvider
from scratchcard.dissolve.state import DissolveState as DissolveState
