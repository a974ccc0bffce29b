"""Command line tools for baking and inspecting autotile data."""
