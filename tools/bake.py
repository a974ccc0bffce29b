#!/usr/bin/env python3
"""
Tilemap Autotile - Bake Tool

Loads an autotile data file, bakes every cell against its rulesets and
prints the resulting tile ids. Optionally saves the document with its
baked "tiles" section.
"""

import argparse
import sys
from pathlib import Path

from tilemap.core.indexing import TilemapIndexError
from tilemap.formats.autotile_data import AutoTileData
from tilemap.formats.pattern_utils import format_tile_rows
from tilemap.logging_config import add_logging_arguments, configure_logging


def bake_file(input_path: Path, output_path: Path | None = None) -> AutoTileData:
    """
    Bake an autotile data file.

    Args:
        input_path: Autotile JSON file to read
        output_path: Where to save the baked document (optional)

    Returns:
        The baked document
    """
    data = AutoTileData()
    data.load(input_path)

    autotilemap = data.to_autotilemap()
    autotilemap.bake()

    baked = AutoTileData.from_autotilemap(autotilemap)
    if output_path is not None:
        baked.save(output_path)

    return baked


def main():
    parser = argparse.ArgumentParser(
        description="Bake autotile rulesets into tile ids",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  Print baked tile ids:
    autotile-bake maps/cave.json

  Save the baked document:
    autotile-bake maps/cave.json -o maps/cave.baked.json

  Keep a debug log of the run:
    autotile-bake maps/cave.json --log-file bake.log
""",
    )
    parser.add_argument("input", help="Autotile data JSON file")
    parser.add_argument(
        "-o", "--output", help="Save baked data to this JSON file", default=None
    )
    add_logging_arguments(parser)

    args = parser.parse_args()

    configure_logging(verbose=args.verbose, log_file=args.log_file)

    input_path = Path(args.input)
    output_path = Path(args.output) if args.output else None

    try:
        baked = bake_file(input_path, output_path)
    except FileNotFoundError as e:
        print(f"Error: {e}")
        sys.exit(1)
    except (ValueError, KeyError, TilemapIndexError) as e:
        print(f"Error: {e}")
        sys.exit(1)

    print(f"Baked {baked.width}x{baked.height} map with {len(baked.rulesets)} rulesets")
    print()
    for row in format_tile_rows(baked.tiles or []):
        print(f"  {row}")

    if output_path is not None:
        print()
        print(f"Saved baked data to: {output_path}")


if __name__ == "__main__":
    main()
