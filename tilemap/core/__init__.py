"""
Core autotiling functionality.

This package contains grid indexing, the base tilemap, autotile rulesets
and the ruleset matcher, and the AutoTilemap that bakes them together.
"""

from .indexing import TilemapIndexError, get_tilemap_index
from .tilemap import Tilemap
from .autotile import AutoTile, AutoTileRuleset, AutoTileRulesetValue
from .autotilemap import AutoTilemap

__all__ = [
    "TilemapIndexError",
    "get_tilemap_index",
    "Tilemap",
    "AutoTile",
    "AutoTileRuleset",
    "AutoTileRulesetValue",
    "AutoTilemap",
]
