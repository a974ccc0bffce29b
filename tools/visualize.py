#!/usr/bin/env python3
"""
Tilemap Autotile - Debug Visualizer

Bakes an autotile data file and renders a PNG showing which ruleset tile
landed on each cell. Occupied cells that nothing matched are checkered.
"""

import argparse
import sys
from pathlib import Path

from tilemap.core.indexing import TilemapIndexError
from tilemap.formats.autotile_data import AutoTileData
from tilemap.logging_config import add_logging_arguments, configure_logging
from tilemap.rendering.debug_renderer import render_debug_image


def visualize_file(
    input_path: Path,
    output_path: Path,
    cell_size: int = 16,
    show_grid: bool = True,
):
    """Bake an autotile data file and save its debug image."""
    data = AutoTileData()
    data.load(input_path)

    autotilemap = data.to_autotilemap()
    autotilemap.bake()

    img = render_debug_image(autotilemap, cell_size=cell_size, show_grid=show_grid)
    img.save(output_path)

    print(f"Rendered {autotilemap.width}x{autotilemap.height} map to: {output_path}")


def main():
    parser = argparse.ArgumentParser(
        description="Render autotile ruleset coverage as a PNG image",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  Render next to the input (maps/cave.png):
    autotile-visualize maps/cave.json

  Larger cells without grid lines:
    autotile-visualize maps/cave.json cave.png --cell-size 32 --no-grid
""",
    )
    parser.add_argument("input", help="Autotile data JSON file")
    parser.add_argument(
        "output", nargs="?", help="Output PNG file (default: <input>.png)"
    )
    parser.add_argument(
        "--cell-size",
        type=int,
        default=16,
        help="Size of one cell in pixels (default: 16)",
    )
    parser.add_argument(
        "--no-grid", action="store_true", help="Don't draw cell outlines"
    )
    add_logging_arguments(parser)

    args = parser.parse_args()

    configure_logging(verbose=args.verbose, log_file=args.log_file)

    input_path = Path(args.input)
    output_path = Path(args.output) if args.output else input_path.with_suffix(".png")

    try:
        visualize_file(
            input_path, output_path, cell_size=args.cell_size, show_grid=not args.no_grid
        )
    except FileNotFoundError as e:
        print(f"Error: {e}")
        sys.exit(1)
    except (ValueError, KeyError, TilemapIndexError) as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
