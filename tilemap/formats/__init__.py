"""
File formats for autotile data.

JSON documents, text row utilities and numpy occupancy masks.
"""

from .autotile_data import AutoTileData
from .mask import load_mask, occupancy_mask, tile_array

__all__ = ["AutoTileData", "load_mask", "occupancy_mask", "tile_array"]
