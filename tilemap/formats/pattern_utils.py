"""
Tilemap Autotile - Pattern String Utilities

Parsing and formatting of the space-separated text rows used for ruleset
patterns, occupancy and baked tile ids in autotile data files.
"""

from typing import List, Optional

from ..core.autotile import AutoTile, AutoTileRulesetValue

EMPTY_TILE = "--"

PATTERN_SYMBOLS = {
    "#": AutoTileRulesetValue.TILE,
    ".": AutoTileRulesetValue.NONE,
    "*": AutoTileRulesetValue.ANY,
}
PATTERN_CHARS = {value: symbol for symbol, value in PATTERN_SYMBOLS.items()}

OCCUPANCY_SYMBOLS = {
    "#": AutoTile.TILE,
    ".": AutoTile.NONE,
}
OCCUPANCY_CHARS = {value: symbol for symbol, value in OCCUPANCY_SYMBOLS.items()}


def parse_pattern_row(row_str: str) -> List[AutoTileRulesetValue]:
    """
    Parse a space-separated ruleset pattern row.

    Example:
        >>> parse_pattern_row("* . #")
        [<AutoTileRulesetValue.ANY: 'any'>, <AutoTileRulesetValue.NONE: 'none'>, <AutoTileRulesetValue.TILE: 'tile'>]

    Raises:
        ValueError: If the row contains an unknown symbol
    """
    try:
        return [PATTERN_SYMBOLS[symbol] for symbol in row_str.split()]
    except KeyError as e:
        raise ValueError(f"Unknown pattern symbol {e} in row '{row_str}'") from None


def format_pattern_row(row: List[AutoTileRulesetValue]) -> str:
    """Format pattern values as a space-separated row."""
    return " ".join(PATTERN_CHARS[value] for value in row)


def parse_pattern_rows(rows: List[str]) -> List[List[AutoTileRulesetValue]]:
    return [parse_pattern_row(row) for row in rows]


def format_pattern_rows(rows: List[List[AutoTileRulesetValue]]) -> List[str]:
    return [format_pattern_row(row) for row in rows]


def parse_occupancy_row(row_str: str) -> List[AutoTile]:
    """
    Parse a space-separated occupancy row ('#' occupied, '.' empty).

    Raises:
        ValueError: If the row contains anything else, including '*'
    """
    try:
        return [OCCUPANCY_SYMBOLS[symbol] for symbol in row_str.split()]
    except KeyError as e:
        raise ValueError(f"Unknown occupancy symbol {e} in row '{row_str}'") from None


def format_occupancy_row(row: List[AutoTile]) -> str:
    return " ".join(OCCUPANCY_CHARS[autotile] for autotile in row)


def parse_occupancy_rows(rows: List[str]) -> List[List[AutoTile]]:
    return [parse_occupancy_row(row) for row in rows]


def format_occupancy_rows(rows: List[List[AutoTile]]) -> List[str]:
    return [format_occupancy_row(row) for row in rows]


def parse_tile_row(row_str: str) -> List[Optional[int]]:
    """
    Parse a row of hex tile ids, with '--' for empty cells.

    Example:
        >>> parse_tile_row("01 -- 1A")
        [1, None, 26]
    """
    return [None if x == EMPTY_TILE else int(x, 16) for x in row_str.split()]


def format_tile_row(row: List[Optional[int]]) -> str:
    """
    Format tile ids as uppercase hex, with '--' for empty cells.

    Example:
        >>> format_tile_row([1, None, 26])
        '01 -- 1A'
    """
    return " ".join(EMPTY_TILE if t is None else f"{t:02X}" for t in row)


def parse_tile_rows(rows: List[str]) -> List[List[Optional[int]]]:
    return [parse_tile_row(row) for row in rows]


def format_tile_rows(rows: List[List[Optional[int]]]) -> List[str]:
    return [format_tile_row(row) for row in rows]
