"""
Tilemap Autotile

Rule-based autotiling for tile grids: mark cells as occupied or empty and
bake() picks the edge, corner or interior tile for each one from its 5x5
neighborhood.
"""

from .core import (
    AutoTile,
    AutoTileRuleset,
    AutoTileRulesetValue,
    AutoTilemap,
    Tilemap,
    TilemapIndexError,
    get_tilemap_index,
)

__all__ = [
    "AutoTile",
    "AutoTileRuleset",
    "AutoTileRulesetValue",
    "AutoTilemap",
    "Tilemap",
    "TilemapIndexError",
    "get_tilemap_index",
]
