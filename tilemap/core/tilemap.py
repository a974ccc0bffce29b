"""
Tilemap Autotile - Base Tilemap

Fixed-size grid of optional tile ids, the storage a renderer draws from.
"""

from typing import Any, List, Optional, Tuple

from .indexing import get_tilemap_index


class Tilemap:
    """A width x height grid holding an optional tile id per cell."""

    def __init__(
        self,
        tilesheet: Any,
        tile_size: Tuple[int, int],
        width: int,
        height: int,
    ):
        """
        Create an empty tilemap.

        Args:
            tilesheet: Opaque handle for the tilesheet texture
            tile_size: Size of one tile in pixels, as (width, height)
            width: Map width in cells
            height: Map height in cells

        Raises:
            ValueError: If width or height is negative
        """
        if width < 0 or height < 0:
            raise ValueError(f"Invalid tilemap size: {width}x{height}")

        self.tilesheet = tilesheet
        self.tile_size = tuple(tile_size)
        self.width = width
        self.height = height
        self.tiles: List[Optional[int]] = [None] * (width * height)

    def set_tile(self, x: int, y: int, tile_id: Optional[int]):
        """Set the tile id at (x, y). None clears the cell."""
        index = get_tilemap_index(x, y, self.width, self.height)
        self.tiles[index] = tile_id

    def get_tile(self, x: int, y: int) -> Optional[int]:
        """Get the tile id at (x, y), or None for an empty cell."""
        index = get_tilemap_index(x, y, self.width, self.height)
        return self.tiles[index]

    def rows(self) -> List[List[Optional[int]]]:
        """Tile ids as a list of rows (rows of columns)."""
        return [
            self.tiles[row * self.width : (row + 1) * self.width]
            for row in range(self.height)
        ]
