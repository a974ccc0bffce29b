"""
Tilemap Autotile - AutoTilemap

Owns the occupancy grid, an ordered list of rulesets, and the base tilemap
that bake() fills with the tile id chosen for every cell.
"""

import logging
from typing import Any, Iterable, List, Optional, Tuple

from .autotile import AutoTile, AutoTileRuleset
from .indexing import get_tilemap_index
from .tilemap import Tilemap

logger = logging.getLogger(__name__)


class AutoTilemap:
    """
    Tilemap whose tiles are derived from cell occupancy and rulesets.

    Occupancy edits are lazy: set_tile(), set_none() and set_autotile() only
    record the marker, and the tilemap is brought up to date by bake().

    Rulesets are evaluated in the order they were added and the first match
    wins, so add them from most specific to least specific.
    """

    def __init__(
        self,
        tilesheet: Any,
        tile_size: Tuple[int, int],
        map_width: int,
        map_height: int,
        rulesets: Optional[Iterable[AutoTileRuleset]] = None,
    ):
        """
        Create an autotilemap with every cell empty.

        Args:
            tilesheet: Opaque handle for the tilesheet texture
            tile_size: Size of one tile in pixels, as (width, height)
            map_width: Map width in cells
            map_height: Map height in cells
            rulesets: Initial rulesets, highest priority first
        """
        self.tilemap = Tilemap(tilesheet, tile_size, map_width, map_height)
        self.rulesets: List[AutoTileRuleset] = list(rulesets) if rulesets else []
        self.autotiles: List[AutoTile] = [AutoTile.NONE] * (map_width * map_height)
        # False until bake() runs, and again after any occupancy or ruleset edit
        self.baked: bool = False

    @property
    def width(self) -> int:
        return self.tilemap.width

    @property
    def height(self) -> int:
        return self.tilemap.height

    @property
    def tilesheet(self) -> Any:
        return self.tilemap.tilesheet

    @property
    def tile_size(self) -> Tuple[int, int]:
        return self.tilemap.tile_size

    @property
    def tiles(self) -> List[Optional[int]]:
        """Copy of the baked tile ids in row-major order."""
        return list(self.tilemap.tiles)

    def bake(self):
        """
        Recompute the tile id of every cell from occupancy and rulesets.

        Raises:
            TilemapIndexError: If a cell lookup falls outside the map
        """
        placed = 0
        for x in range(self.width):
            for y in range(self.height):
                tile_id = self.compute_tile_id(x, y)
                self.tilemap.set_tile(x, y, tile_id)
                if tile_id is not None:
                    placed += 1

        self.baked = True

        logger.debug(
            "Baked %dx%d autotilemap with %d rulesets: %d tiles placed",
            self.width,
            self.height,
            len(self.rulesets),
            placed,
        )

    def add_ruleset(self, ruleset: AutoTileRuleset):
        """Append a ruleset at the lowest priority."""
        self.rulesets.append(ruleset)
        self.baked = False
        logger.debug("Added ruleset for tile 0x%02X", ruleset.tile_id)

    def get_ruleset(self, tile_id: int) -> Optional[AutoTileRuleset]:
        """Get the first ruleset producing tile_id, or None."""
        for ruleset in self.rulesets:
            if ruleset.tile_id == tile_id:
                return ruleset
        return None

    def remove_ruleset(self, tile_id: int) -> Optional[AutoTileRuleset]:
        """
        Remove the first ruleset producing tile_id.

        Returns:
            The removed ruleset, or None if no ruleset has that tile id
        """
        for index, ruleset in enumerate(self.rulesets):
            if ruleset.tile_id == tile_id:
                logger.debug("Removed ruleset for tile 0x%02X", tile_id)
                self.baked = False
                return self.rulesets.pop(index)
        return None

    def get_autotile(self, x: int, y: int) -> AutoTile:
        """Get the occupancy marker at (x, y)."""
        index = get_tilemap_index(x, y, self.width, self.height)
        return self.autotiles[index]

    def set_tile(self, x: int, y: int):
        """Mark (x, y) as occupied."""
        self.set_autotile(x, y, AutoTile.TILE)

    def set_none(self, x: int, y: int):
        """Mark (x, y) as empty."""
        self.set_autotile(x, y, AutoTile.NONE)

    def set_autotile(self, x: int, y: int, autotile: AutoTile):
        """Set the occupancy marker at (x, y). Takes effect on the next bake()."""
        index = get_tilemap_index(x, y, self.width, self.height)
        self.autotiles[index] = autotile
        self.baked = False

    def compute_tile_id(self, x: int, y: int) -> Optional[int]:
        """
        Compute the tile id for the cell at (x, y).

        Returns:
            Tile id of the first matching ruleset, or None if the cell is
            empty or nothing matches

        Raises:
            TilemapIndexError: If (x, y) is outside the map
        """
        index = get_tilemap_index(x, y, self.width, self.height)
        if self.autotiles[index] is not AutoTile.TILE:
            return None

        for ruleset in self.rulesets:
            if ruleset.matches(self.autotiles, self.width, self.height, x, y):
                return ruleset.tile_id

        return None

    def get_tile_id(self, x: int, y: int) -> Optional[int]:
        """Get the baked tile id at (x, y)."""
        return self.tilemap.get_tile(x, y)
