"""
Debug rendering for autotilemaps.
"""

from .debug_renderer import render_debug_image, tile_color

__all__ = ["render_debug_image", "tile_color"]
