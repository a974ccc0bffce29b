"""
Tilemap Autotile - Autotile Data Model

Loads and saves autotilemaps (occupancy, rulesets, tilesheet settings and
baked tiles) as JSON files.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from . import pattern_utils
from ..core.autotile import AutoTile, AutoTileRuleset
from ..core.autotilemap import AutoTilemap
from ..core.constants import DEFAULT_TILE_SIZE

logger = logging.getLogger(__name__)


def parse_tile_id(value: Union[str, int]) -> int:
    """Parse a tile id written as a hex string ("0x1A") or an integer."""
    if isinstance(value, int):
        return value
    return int(value, 16)


def format_tile_id(tile_id: int) -> str:
    return f"0x{tile_id:02X}"


class AutoTileData:
    """Manages an autotilemap document: settings, occupancy, rulesets, tiles."""

    def __init__(self):
        self.tilesheet: Optional[str] = None
        self.tile_size: Tuple[int, int] = DEFAULT_TILE_SIZE
        self.width: int = 0
        self.height: int = 0
        self.occupancy: List[List[AutoTile]] = []
        self.rulesets: List[AutoTileRuleset] = []
        self.tiles: Optional[List[List[Optional[int]]]] = None
        self.filepath: Optional[str] = None

    def load(self, path: Union[str, Path]):
        """
        Load autotile data from a JSON file.

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If occupancy, rulesets or tiles are malformed
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Autotile data file not found: {path}")

        with open(path) as f:
            data = json.load(f)

        self.tilesheet = data.get("tilesheet")

        tile_size = data.get("tile_size")
        if tile_size is None:
            self.tile_size = DEFAULT_TILE_SIZE
        else:
            self.tile_size = (tile_size["width"], tile_size["height"])

        occupancy = data["occupancy"]
        self.width = occupancy["width"]
        self.height = occupancy["height"]
        self.occupancy = pattern_utils.parse_occupancy_rows(occupancy["rows"])
        self._validate_occupancy()

        self.rulesets = []
        for entry in data.get("rulesets", []):
            tile_id = parse_tile_id(entry["tile_id"])
            rows = pattern_utils.parse_pattern_rows(entry["rows"])
            self.rulesets.append(AutoTileRuleset.from_rows(tile_id, rows))

        tiles = data.get("tiles")
        if tiles is None:
            self.tiles = None
        else:
            self.tiles = pattern_utils.parse_tile_rows(tiles["rows"])
            self._validate_tiles()

        self.filepath = str(path)

        logger.info(
            "Loaded %dx%d autotilemap with %d rulesets from %s",
            self.width,
            self.height,
            len(self.rulesets),
            path,
        )

    def save(self, path: Optional[Union[str, Path]] = None):
        """Save autotile data to a JSON file."""
        if path is None:
            path = self.filepath
        if path is None:
            raise ValueError("No save path specified")

        data: Dict[str, Any] = {
            "tilesheet": self.tilesheet,
            "tile_size": {"width": self.tile_size[0], "height": self.tile_size[1]},
            "occupancy": {
                "width": self.width,
                "height": self.height,
                "rows": pattern_utils.format_occupancy_rows(self.occupancy),
            },
            "rulesets": [
                {
                    "tile_id": format_tile_id(ruleset.tile_id),
                    "rows": pattern_utils.format_pattern_rows(ruleset.rows()),
                }
                for ruleset in self.rulesets
            ],
        }

        if self.tiles is not None:
            data["tiles"] = {
                "width": self.width,
                "height": self.height,
                "rows": pattern_utils.format_tile_rows(self.tiles),
            }

        with open(path, "w") as f:
            json.dump(data, f, indent=2)

        self.filepath = str(path)

        logger.info("Saved autotile data to %s", path)

    def to_autotilemap(self) -> AutoTilemap:
        """Build an AutoTilemap with this document's occupancy and rulesets."""
        autotilemap = AutoTilemap(
            self.tilesheet, self.tile_size, self.width, self.height, self.rulesets
        )
        for y, row in enumerate(self.occupancy):
            for x, autotile in enumerate(row):
                autotilemap.set_autotile(x, y, autotile)
        return autotilemap

    @classmethod
    def from_autotilemap(cls, autotilemap: AutoTilemap) -> "AutoTileData":
        """
        Capture an AutoTilemap as a document.

        The "tiles" section is only filled when the autotilemap is baked and
        hasn't been edited since, so saved tiles always agree with the
        saved occupancy and rulesets.
        """
        data = cls()
        data.tilesheet = autotilemap.tilesheet
        data.tile_size = autotilemap.tile_size
        data.width = autotilemap.width
        data.height = autotilemap.height
        data.occupancy = [
            [autotilemap.get_autotile(x, y) for x in range(autotilemap.width)]
            for y in range(autotilemap.height)
        ]
        data.rulesets = list(autotilemap.rulesets)
        if autotilemap.baked:
            data.tiles = autotilemap.tilemap.rows()
        return data

    def _validate_occupancy(self):
        """Check occupancy rows agree with the declared width and height."""
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Invalid occupancy size: {self.width}x{self.height}")

        if len(self.occupancy) != self.height:
            raise ValueError(
                f"Occupancy has {len(self.occupancy)} rows, expected {self.height}"
            )

        for row_idx, row in enumerate(self.occupancy):
            if len(row) != self.width:
                raise ValueError(
                    f"Occupancy row {row_idx} has {len(row)} cells, "
                    f"expected {self.width}"
                )

    def _validate_tiles(self):
        """Check a loaded tiles section matches the occupancy size."""
        if len(self.tiles) != self.height or any(
            len(row) != self.width for row in self.tiles
        ):
            raise ValueError(
                f"Tiles section does not match occupancy size "
                f"{self.width}x{self.height}"
            )
