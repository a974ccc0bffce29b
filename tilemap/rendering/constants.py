"""
Tilemap Autotile - Debug Rendering Constants

Colors used by the debug renderer.
"""

from typing import List, Tuple

RGBColor = Tuple[int, int, int]

COLOR_BG = (48, 48, 48)
COLOR_GRID = (80, 80, 80)

# Occupied cells that no ruleset matched
COLOR_PLACEHOLDER_1 = (100, 100, 100)
COLOR_PLACEHOLDER_2 = (140, 140, 140)

# Tile ids pick a color by tile_id % len(TILE_COLORS)
TILE_COLORS: List[RGBColor] = [
    (0xE6, 0x19, 0x4B),
    (0x3C, 0xB4, 0x4B),
    (0xFF, 0xE1, 0x19),
    (0x43, 0x63, 0xD8),
    (0xF5, 0x82, 0x31),
    (0x91, 0x1E, 0xB4),
    (0x46, 0xF0, 0xF0),
    (0xF0, 0x32, 0xE6),
    (0xBC, 0xF6, 0x0C),
    (0xFA, 0xBE, 0xBE),
    (0x00, 0x80, 0x80),
    (0x9A, 0x63, 0x24),
]
