from backend.engine.gamestate.normalize import (
    canonical_key,
    normalize,
    normalized,
    tile_swap,
)
from backend.engine.gamestate.state import SearchContext

__all__ = ["SearchContext", "canonical_key", "normalize", "normalized", "tile_swap"]
