"""
Tilemap Autotile - Autotiles and Rulesets

Occupancy markers, ruleset pattern values, and the ruleset matcher that
decides whether a 5x5 neighborhood pattern applies to a cell.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Sequence, Tuple

from .constants import RULESET_GRID_CENTER, RULESET_GRID_SIZE
from .indexing import TilemapIndexError, get_tilemap_index


class AutoTile(Enum):
    """Occupancy of a single autotile cell."""

    NONE = 0
    TILE = 1


class AutoTileRulesetValue(Enum):
    """Expected state of a neighbor inside a ruleset pattern."""

    NONE = "none"
    TILE = "tile"
    ANY = "any"


RulesetGrid = Tuple[Tuple[AutoTileRulesetValue, ...], ...]


@dataclass
class AutoTileRuleset:
    """
    A neighborhood pattern and the tile id it produces.

    The grid is indexed grid[x][y], with the cell being evaluated at
    grid[2][2]. Written out as nested lists this reads as the pattern
    rotated 90 degrees, so most callers should author patterns with
    from_rows(), which takes the picture as it appears on screen:

        [Any,  Any,  Any,  Any,  Any]
        [Any,  None, None, None, Any]
        [Any,  None, Tile, None, Any]
        [Any,  None, None, None, Any]
        [Any,  Any,  Any,  Any,  Any]

    The pattern above matches a tile with no neighbors at all. The center
    value is never read; the center cell must always be occupied. Patterns
    that only care about the 8 surrounding cells fill the outer ring with Any.
    """

    tile_id: int
    grid: RulesetGrid

    def __post_init__(self):
        if len(self.grid) != RULESET_GRID_SIZE or any(
            len(column) != RULESET_GRID_SIZE for column in self.grid
        ):
            raise ValueError(
                f"Ruleset grid for tile 0x{self.tile_id:02X} must be "
                f"{RULESET_GRID_SIZE}x{RULESET_GRID_SIZE}"
            )
        self.grid = tuple(tuple(column) for column in self.grid)

    @classmethod
    def from_rows(
        cls, tile_id: int, rows: Sequence[Sequence[AutoTileRulesetValue]]
    ) -> "AutoTileRuleset":
        """
        Build a ruleset from a pattern written as rows (rows[y][x]).

        Raises:
            ValueError: If rows isn't 5x5
        """
        if len(rows) != RULESET_GRID_SIZE or any(
            len(row) != RULESET_GRID_SIZE for row in rows
        ):
            raise ValueError(
                f"Ruleset rows for tile 0x{tile_id:02X} must be "
                f"{RULESET_GRID_SIZE}x{RULESET_GRID_SIZE}"
            )
        grid = tuple(
            tuple(rows[y][x] for y in range(RULESET_GRID_SIZE))
            for x in range(RULESET_GRID_SIZE)
        )
        return cls(tile_id, grid)

    def rows(self) -> List[List[AutoTileRulesetValue]]:
        """The pattern as rows (rows[y][x]), the inverse of from_rows()."""
        return [
            [self.grid[x][y] for x in range(RULESET_GRID_SIZE)]
            for y in range(RULESET_GRID_SIZE)
        ]

    def matches(
        self,
        autotiles: Sequence[AutoTile],
        autotilemap_width: int,
        autotilemap_height: int,
        x: int,
        y: int,
    ) -> bool:
        """
        Test the 5x5 area centered on (x, y) against this ruleset.

        Neighbors outside the map resolve to Any, which only equals a
        pattern cell that is itself Any. Since Any pattern cells are
        skipped before any lookup, a concrete None/Tile expectation
        pointing off the map never matches.

        Args:
            autotiles: Row-major occupancy of the whole map
            autotilemap_width: Map width in cells
            autotilemap_height: Map height in cells
            x: Column of the cell being evaluated
            y: Row of the cell being evaluated

        Returns:
            True if the center is occupied and every concrete pattern cell
            agrees with the map
        """
        try:
            index = get_tilemap_index(x, y, autotilemap_width, autotilemap_height)
        except TilemapIndexError:
            return False

        if autotiles[index] is not AutoTile.TILE:
            return False

        for ruleset_x in range(RULESET_GRID_SIZE):
            for ruleset_y in range(RULESET_GRID_SIZE):
                if ruleset_x == RULESET_GRID_CENTER and ruleset_y == RULESET_GRID_CENTER:
                    continue

                expected = self.grid[ruleset_x][ruleset_y]
                if expected is AutoTileRulesetValue.ANY:
                    continue

                actual = self._get_ruleset_value(
                    autotiles,
                    autotilemap_width,
                    autotilemap_height,
                    x - RULESET_GRID_CENTER + ruleset_x,
                    y - RULESET_GRID_CENTER + ruleset_y,
                )
                if expected is not actual:
                    return False

        return True

    def _get_ruleset_value(
        self,
        autotiles: Sequence[AutoTile],
        autotilemap_width: int,
        autotilemap_height: int,
        x: int,
        y: int,
    ) -> AutoTileRulesetValue:
        """Resolve the map cell at (x, y) to a pattern value."""
        # Cells off the map are treated as Any
        if x < 0 or y < 0:
            return AutoTileRulesetValue.ANY

        try:
            index = get_tilemap_index(x, y, autotilemap_width, autotilemap_height)
        except TilemapIndexError:
            return AutoTileRulesetValue.ANY

        if autotiles[index] is AutoTile.TILE:
            return AutoTileRulesetValue.TILE
        return AutoTileRulesetValue.NONE
