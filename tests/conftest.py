"""Shared pytest fixtures for autotile tests."""

from pathlib import Path

import pytest

from tilemap.core.autotile import AutoTileRuleset, AutoTileRulesetValue
from tilemap.core.autotilemap import AutoTilemap

A = AutoTileRulesetValue.ANY
N = AutoTileRulesetValue.NONE
T = AutoTileRulesetValue.TILE

ISOLATED_TILE_ID = 0x10
FILL_TILE_ID = 0x20


def make_rows(**cells: AutoTileRulesetValue) -> list[list[AutoTileRulesetValue]]:
    """
    Build 5x5 pattern rows that are Any everywhere except the named cells.

    Cells are named by offset from center, e.g. up=N sets (0, -1),
    right=T sets (1, 0), and far_left=N sets (-2, 0).
    """
    offsets = {
        "up": (0, -1),
        "down": (0, 1),
        "left": (-1, 0),
        "right": (1, 0),
        "up_left": (-1, -1),
        "up_right": (1, -1),
        "down_left": (-1, 1),
        "down_right": (1, 1),
        "far_up": (0, -2),
        "far_down": (0, 2),
        "far_left": (-2, 0),
        "far_right": (2, 0),
    }
    rows = [[A] * 5 for _ in range(5)]
    for name, value in cells.items():
        dx, dy = offsets[name]
        rows[2 + dy][2 + dx] = value
    return rows


@pytest.fixture
def fixtures_path():
    """Path to JSON fixtures."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def isolated_ruleset():
    """Matches an occupied cell whose 4 orthogonal neighbors are empty."""
    return AutoTileRuleset.from_rows(
        ISOLATED_TILE_ID, make_rows(up=N, down=N, left=N, right=N)
    )


@pytest.fixture
def fill_ruleset():
    """All-Any ruleset, matches every occupied cell."""
    return AutoTileRuleset.from_rows(FILL_TILE_ID, make_rows())


@pytest.fixture
def autotilemap_3x3():
    """Empty 3x3 autotilemap with no rulesets."""
    return AutoTilemap("tiles.png", (16, 16), 3, 3)
