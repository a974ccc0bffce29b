"""
Tilemap Autotile - Grid Indexing

Maps 2D cell coordinates onto the flat, row-major storage used by
tilemaps and autotile occupancy grids.
"""


class TilemapIndexError(Exception):
    """Raised when a cell coordinate falls outside the grid."""

    def __init__(self, x: int, y: int, width: int, height: int):
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        super().__init__(str(self))

    def __str__(self) -> str:
        return (
            f"Cell ({self.x}, {self.y}) is out of bounds "
            f"for a {self.width}x{self.height} grid"
        )


def get_tilemap_index(x: int, y: int, width: int, height: int) -> int:
    """
    Get the flat storage index for a cell.

    Args:
        x: Column of the cell
        y: Row of the cell
        width: Grid width in cells
        height: Grid height in cells

    Returns:
        Index into a row-major list of width * height entries

    Raises:
        TilemapIndexError: If (x, y) is outside [0, width) x [0, height)
    """
    if x < 0 or y < 0 or x >= width or y >= height:
        raise TilemapIndexError(x, y, width, height)

    return y * width + x
