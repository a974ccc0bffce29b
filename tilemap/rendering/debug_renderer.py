"""
Tilemap Autotile - Debug Renderer

PIL-based rendering of an autotilemap's ruleset coverage. Each baked tile id
gets a flat color and occupied cells that no ruleset matched are drawn as a
checkered placeholder, so gaps in a ruleset list stand out.
"""

from PIL import Image, ImageDraw

from ..core.autotile import AutoTile
from ..core.autotilemap import AutoTilemap
from .constants import (
    COLOR_BG,
    COLOR_GRID,
    COLOR_PLACEHOLDER_1,
    COLOR_PLACEHOLDER_2,
    TILE_COLORS,
    RGBColor,
)


def tile_color(tile_id: int) -> RGBColor:
    """Debug color for a tile id."""
    return TILE_COLORS[tile_id % len(TILE_COLORS)]


def render_debug_image(
    autotilemap: AutoTilemap,
    cell_size: int = 16,
    show_grid: bool = True,
) -> Image.Image:
    """
    Render the autotilemap's baked tiles to a PIL Image.

    Reads the tilemap as last baked; call bake() first to see current
    occupancy.

    Args:
        autotilemap: The autotilemap to draw
        cell_size: Size of one cell in pixels
        show_grid: Draw cell outlines

    Returns:
        RGB image of (width * cell_size, height * cell_size) pixels
    """
    if cell_size < 1:
        raise ValueError(f"Cell size must be positive, got {cell_size}")

    img = Image.new(
        "RGB",
        (autotilemap.width * cell_size, autotilemap.height * cell_size),
        COLOR_BG,
    )
    draw = ImageDraw.Draw(img)

    for y in range(autotilemap.height):
        for x in range(autotilemap.width):
            base_x = x * cell_size
            base_y = y * cell_size
            tile_id = autotilemap.get_tile_id(x, y)

            if tile_id is not None:
                draw.rectangle(
                    (base_x, base_y, base_x + cell_size - 1, base_y + cell_size - 1),
                    fill=tile_color(tile_id),
                )
            elif autotilemap.get_autotile(x, y) is AutoTile.TILE:
                _draw_placeholder(draw, base_x, base_y, cell_size)

            if show_grid:
                draw.rectangle(
                    (base_x, base_y, base_x + cell_size - 1, base_y + cell_size - 1),
                    outline=COLOR_GRID,
                )

    return img


def _draw_placeholder(
    draw: ImageDraw.ImageDraw,
    base_x: int,
    base_y: int,
    cell_size: int,
):
    """Draw a 4x4 gray checkerboard filling one cell."""
    checkers = 4 if cell_size >= 4 else 1
    # Uneven cell sizes spread the remainder pixels across the checkers
    edges = [cell_size * i // checkers for i in range(checkers + 1)]

    for row in range(checkers):
        for col in range(checkers):
            color = COLOR_PLACEHOLDER_1 if (row + col) % 2 == 0 else COLOR_PLACEHOLDER_2
            draw.rectangle(
                (
                    base_x + edges[col],
                    base_y + edges[row],
                    base_x + edges[col + 1] - 1,
                    base_y + edges[row + 1] - 1,
                ),
                fill=color,
            )
