"""
Tilemap Autotile - Core Constants

Shared dimensions used by the autotile rulesets and tilemaps.
"""

# Ruleset pattern grid (5x5, centered on the cell being evaluated)
RULESET_GRID_SIZE = 5
RULESET_GRID_CENTER = RULESET_GRID_SIZE // 2

# Tile size in pixels (width, height) when a data file doesn't specify one
DEFAULT_TILE_SIZE = (16, 16)
