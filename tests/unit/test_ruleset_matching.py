"""
Unit tests for AutoTileRuleset construction and matching.
"""

import pytest

from conftest import A, N, T, make_rows
from tilemap.core.autotile import AutoTile, AutoTileRuleset, AutoTileRulesetValue


# =============================================================================
# Helper Functions
# =============================================================================

def make_autotiles(rows: list[str]) -> tuple[list[AutoTile], int, int]:
    """Build flat occupancy from strings of '#' (occupied) and '.' (empty)."""
    height = len(rows)
    width = len(rows[0]) if rows else 0
    autotiles = [
        AutoTile.TILE if ch == "#" else AutoTile.NONE
        for row in rows
        for ch in row
    ]
    return autotiles, width, height


# =============================================================================
# Construction
# =============================================================================

class TestRulesetConstruction:
    """Tests for building rulesets."""

    def test_from_rows_transposes_into_grid(self):
        """rows[y][x] ends up at grid[x][y]."""
        rows = [[A] * 5 for _ in range(5)]
        rows[0][1] = T
        ruleset = AutoTileRuleset.from_rows(1, rows)
        assert ruleset.grid[1][0] is T
        assert ruleset.grid[0][1] is A

    def test_rows_inverts_from_rows(self):
        rows = make_rows(up=N, right=T, far_down=N)
        ruleset = AutoTileRuleset.from_rows(7, rows)
        assert ruleset.rows() == rows

    def test_grid_is_normalized_to_tuples(self):
        grid = [[A] * 5 for _ in range(5)]
        ruleset = AutoTileRuleset(3, grid)
        assert isinstance(ruleset.grid, tuple)
        assert all(isinstance(column, tuple) for column in ruleset.grid)

    def test_wrong_grid_size_raises(self):
        with pytest.raises(ValueError, match="5x5"):
            AutoTileRuleset(1, [[A] * 3 for _ in range(3)])

    def test_ragged_grid_raises(self):
        grid = [[A] * 5 for _ in range(5)]
        grid[4] = [A] * 4
        with pytest.raises(ValueError, match="5x5"):
            AutoTileRuleset(1, grid)

    def test_wrong_rows_size_raises(self):
        with pytest.raises(ValueError, match="5x5"):
            AutoTileRuleset.from_rows(1, [[A] * 5 for _ in range(4)])

    def test_equal_rulesets_compare_equal(self):
        r1 = AutoTileRuleset.from_rows(1, make_rows(up=N))
        r2 = AutoTileRuleset.from_rows(1, make_rows(up=N))
        assert r1 == r2


# =============================================================================
# Center Cell
# =============================================================================

class TestCenterCell:
    """The evaluated cell itself must be occupied; its pattern value is ignored."""

    def test_empty_center_never_matches(self):
        autotiles, w, h = make_autotiles(["...", "...", "..."])
        ruleset = AutoTileRuleset.from_rows(1, make_rows())
        assert ruleset.matches(autotiles, w, h, 1, 1) is False

    def test_out_of_bounds_center_never_matches(self):
        autotiles, w, h = make_autotiles(["###", "###", "###"])
        ruleset = AutoTileRuleset.from_rows(1, make_rows())
        assert ruleset.matches(autotiles, w, h, 3, 1) is False
        assert ruleset.matches(autotiles, w, h, -1, 1) is False

    @pytest.mark.parametrize("center", [N, T, A])
    def test_center_pattern_value_is_ignored(self, center):
        autotiles, w, h = make_autotiles(["...", ".#.", "..."])
        rows = make_rows()
        rows[2][2] = center
        ruleset = AutoTileRuleset.from_rows(1, rows)
        assert ruleset.matches(autotiles, w, h, 1, 1) is True


# =============================================================================
# Neighbor Matching
# =============================================================================

class TestNeighborMatching:
    """Tests for matching neighbors inside the map."""

    def test_all_any_matches_any_occupied_cell(self):
        autotiles, w, h = make_autotiles(["#.#", ".##", "#.."])
        ruleset = AutoTileRuleset.from_rows(1, make_rows())
        for y in range(h):
            for x in range(w):
                expected = autotiles[y * w + x] is AutoTile.TILE
                assert ruleset.matches(autotiles, w, h, x, y) is expected

    def test_isolated_tile_matches(self, isolated_ruleset):
        autotiles, w, h = make_autotiles(["...", ".#.", "..."])
        assert isolated_ruleset.matches(autotiles, w, h, 1, 1) is True

    def test_occupied_neighbor_breaks_none_expectation(self, isolated_ruleset):
        autotiles, w, h = make_autotiles(["...", ".##", "..."])
        assert isolated_ruleset.matches(autotiles, w, h, 1, 1) is False

    def test_diagonals_are_ignored_when_any(self, isolated_ruleset):
        autotiles, w, h = make_autotiles(["#.#", ".#.", "#.#"])
        assert isolated_ruleset.matches(autotiles, w, h, 1, 1) is True

    def test_tile_expectation(self):
        ruleset = AutoTileRuleset.from_rows(1, make_rows(right=T))
        autotiles, w, h = make_autotiles(["...", ".##", "..."])
        assert ruleset.matches(autotiles, w, h, 1, 1) is True
        autotiles, w, h = make_autotiles(["...", ".#.", "..."])
        assert ruleset.matches(autotiles, w, h, 1, 1) is False

    def test_outer_ring_is_checked(self):
        """Pattern cells two away from center are part of the match."""
        ruleset = AutoTileRuleset.from_rows(1, make_rows(far_right=T, far_up=N))
        autotiles, w, h = make_autotiles([".....", ".....", "..#.#", ".....", "....."])
        assert ruleset.matches(autotiles, w, h, 2, 2) is True
        autotiles, w, h = make_autotiles(["..#..", ".....", "..#.#", ".....", "....."])
        assert ruleset.matches(autotiles, w, h, 2, 2) is False

    def test_grid_is_indexed_x_then_y(self):
        """grid[3][2] is the neighbor to the right, grid[2][3] the one below."""
        grid = [[A] * 5 for _ in range(5)]
        grid[3][2] = T
        grid[2][3] = N
        ruleset = AutoTileRuleset(1, grid)
        autotiles, w, h = make_autotiles(["...", ".##", "..."])
        assert ruleset.matches(autotiles, w, h, 1, 1) is True
        autotiles, w, h = make_autotiles(["...", ".##", ".#."])
        assert ruleset.matches(autotiles, w, h, 1, 1) is False


# =============================================================================
# Map Boundaries
# =============================================================================

class TestBoundaries:
    """Off-map neighbors resolve to Any and only satisfy Any pattern cells."""

    def test_none_expectation_off_left_edge_fails(self, isolated_ruleset):
        autotiles, w, h = make_autotiles(["...", "#..", "..."])
        assert isolated_ruleset.matches(autotiles, w, h, 0, 1) is False

    def test_none_expectation_off_right_edge_fails(self, isolated_ruleset):
        autotiles, w, h = make_autotiles(["...", "..#", "..."])
        assert isolated_ruleset.matches(autotiles, w, h, 2, 1) is False

    def test_tile_expectation_off_edge_fails(self):
        ruleset = AutoTileRuleset.from_rows(1, make_rows(up=T))
        autotiles, w, h = make_autotiles(["#..", "#..", "..."])
        assert ruleset.matches(autotiles, w, h, 0, 0) is False

    def test_any_off_edge_matches(self):
        ruleset = AutoTileRuleset.from_rows(1, make_rows(up=N, down=N, right=N))
        autotiles, w, h = make_autotiles(["...", "#..", "..."])
        assert ruleset.matches(autotiles, w, h, 0, 1) is True

    def test_outer_ring_off_bottom_edge_fails(self):
        ruleset = AutoTileRuleset.from_rows(1, make_rows(far_down=N))
        autotiles, w, h = make_autotiles(["...", ".#.", "..."])
        assert ruleset.matches(autotiles, w, h, 1, 1) is False

    def test_single_cell_map(self):
        autotiles, w, h = make_autotiles(["#"])
        assert AutoTileRuleset.from_rows(1, make_rows()).matches(autotiles, w, h, 0, 0)
        assert not AutoTileRuleset.from_rows(1, make_rows(up=N)).matches(
            autotiles, w, h, 0, 0
        )


class TestGetRulesetValue:
    """Tests for resolving map cells to pattern values."""

    @pytest.fixture
    def ruleset(self):
        return AutoTileRuleset.from_rows(1, make_rows())

    def test_occupied_is_tile(self, ruleset):
        autotiles, w, h = make_autotiles(["#."])
        assert ruleset._get_ruleset_value(autotiles, w, h, 0, 0) is T

    def test_empty_is_none(self, ruleset):
        autotiles, w, h = make_autotiles(["#."])
        assert ruleset._get_ruleset_value(autotiles, w, h, 1, 0) is N

    @pytest.mark.parametrize("x,y", [(-1, 0), (0, -2), (2, 0), (0, 1)])
    def test_off_map_is_any(self, ruleset, x, y):
        autotiles, w, h = make_autotiles(["#."])
        assert ruleset._get_ruleset_value(autotiles, w, h, x, y) is AutoTileRulesetValue.ANY
