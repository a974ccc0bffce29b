"""
Tilemap Autotile - Occupancy Masks

Converts between autotilemaps and numpy arrays, for occupancy produced by
level generators and for handing baked tiles to array-based tooling.
"""

import numpy as np

from ..core.autotile import AutoTile
from ..core.autotilemap import AutoTilemap

# Stored in tile arrays for cells with no tile
EMPTY_TILE_VALUE = -1


def load_mask(autotilemap: AutoTilemap, mask) -> None:
    """
    Set occupancy from a 2D mask indexed [row, col].

    Truthy cells become occupied, falsy cells become empty. Like the other
    occupancy setters this takes effect on the next bake().

    Raises:
        ValueError: If the mask shape isn't (height, width)
    """
    mask = np.asarray(mask, dtype=bool)
    expected = (autotilemap.height, autotilemap.width)
    if mask.shape != expected:
        raise ValueError(f"Mask shape {mask.shape} does not match map {expected}")

    for (y, x), occupied in np.ndenumerate(mask):
        autotile = AutoTile.TILE if occupied else AutoTile.NONE
        autotilemap.set_autotile(int(x), int(y), autotile)


def occupancy_mask(autotilemap: AutoTilemap) -> np.ndarray:
    """Occupancy as a (height, width) boolean array."""
    flat = np.array(
        [autotile is AutoTile.TILE for autotile in autotilemap.autotiles], dtype=bool
    )
    return flat.reshape(autotilemap.height, autotilemap.width)


def tile_array(autotilemap: AutoTilemap) -> np.ndarray:
    """Baked tile ids as a (height, width) int array, EMPTY_TILE_VALUE for empty."""
    flat = np.array(
        [EMPTY_TILE_VALUE if t is None else t for t in autotilemap.tiles],
        dtype=np.int64,
    )
    return flat.reshape(autotilemap.height, autotilemap.width)
