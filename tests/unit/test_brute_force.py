"""
Unit tests for the brute force enumerator.
"""
from math import comb

import pytest

from ice_puzzle.core.grid import Grid
from ice_puzzle.search.strategies.brute_force import BruteForceEnumerator, next_subset


def _pattern(grid, universe):
    return "".join("1" if grid.is_obstacle(c) else "0" for c in universe)


class TestNextSubset:
    """Tests for the subset successor rule."""

    def _grid_with_pattern(self, pattern):
        grid = Grid(len(pattern) + 1, 1)
        grid.move_start(grid.coord(len(pattern), 0))
        universe = list(grid.coords())[:-1]
        for coord, bit in zip(universe, pattern):
            if bit == "1":
                grid.set_obstacle(coord)
        return grid, universe

    def test_block_moves(self):
        """Test "0001110" becomes "1100001"."""
        grid, universe = self._grid_with_pattern("0001110")
        assert next_subset(grid, universe)
        assert _pattern(grid, universe) == "1100001"

    def test_single_step(self):
        """Test a lone obstacle moves up by one."""
        grid, universe = self._grid_with_pattern("0100")
        assert next_subset(grid, universe)
        assert _pattern(grid, universe) == "0010"

    def test_full_sequence(self):
        """Test the whole order for two of four cells."""
        grid, universe = self._grid_with_pattern("1100")
        seen = [_pattern(grid, universe)]
        while next_subset(grid, universe):
            seen.append(_pattern(grid, universe))
        assert seen == ["1100", "1010", "0110", "1001", "0101", "0011"]

    def test_last_subset(self):
        """Test the last subset has no successor and is left alone."""
        grid, universe = self._grid_with_pattern("0011")
        assert not next_subset(grid, universe)
        assert _pattern(grid, universe) == "0011"

    def test_no_obstacles(self):
        """Test the empty subset has no successor."""
        grid, universe = self._grid_with_pattern("0000")
        assert not next_subset(grid, universe)


class TestBruteForceEnumerator:
    """Tests for BruteForceEnumerator."""

    def test_start_cells_rectangle(self):
        """Test start cells are limited to the upper-left quadrant."""
        cells = BruteForceEnumerator.start_cells(7, 6)
        assert len(cells) == 16
        assert all(2 * x <= 7 and 2 * y <= 6 for x, y in cells)

    def test_start_cells_square(self):
        """Test square grids also drop cells below the diagonal."""
        cells = BruteForceEnumerator.start_cells(4, 4)
        assert cells == [(0, 0), (1, 0), (2, 0), (1, 1), (2, 1), (2, 2)]

    def test_subsets_complete(self):
        """Test every subset is visited exactly once."""
        strategy = BruteForceEnumerator()
        start = Grid(4, 4).coord(1, 1)

        seen = []
        for grid in strategy.subsets(4, 4, start, 2):
            assert grid.count_obstacles() == 2
            assert grid.start == start
            seen.append(frozenset(grid.obstacle_coords()))

        assert len(seen) == comb(15, 2)
        assert len(set(seen)) == len(seen)
        assert all(start not in subset for subset in seen)

    def test_subsets_zero_obstacles(self):
        """Test the empty placement is visited once."""
        strategy = BruteForceEnumerator()
        assert len(list(strategy.subsets(3, 3, 0, 0))) == 1

    def test_subsets_too_many_obstacles(self):
        """Test impossible obstacle counts are rejected."""
        strategy = BruteForceEnumerator()
        with pytest.raises(ValueError):
            list(strategy.subsets(2, 2, 0, 4))

    def test_subsets_negative_obstacles(self):
        """Test negative obstacle counts are rejected."""
        strategy = BruteForceEnumerator()
        with pytest.raises(ValueError):
            list(strategy.subsets(3, 3, 0, -1))
        with pytest.raises(ValueError):
            strategy.search(3, 3, -1)

    def test_search_4x4(self):
        """Test the exact optimum for two obstacles on 4x4."""
        result = BruteForceEnumerator().search(4, 4, 2)

        assert result.score == 7
        assert result.strategy_id == "brute_force"
        assert result.grid.count_obstacles() == 2
        assert result.candidates_evaluated == 6 * comb(15, 2)

    def test_search_keeps_first_optimum(self):
        """Test ties keep the first grid found in enumeration order."""
        result = BruteForceEnumerator().search(4, 4, 1)
        assert result.score == 5
        assert result.grid.to_rows() == [
            "S#..",
            "....",
            "....",
            "....",
        ]

    @pytest.mark.parametrize("obstacles,expected", [(1, 5), (2, 8)])
    def test_search_7x6(self, obstacles, expected):
        """Test small obstacle counts on the 7x6 grid."""
        result = BruteForceEnumerator().search(7, 6, obstacles)
        assert result.score == expected
        assert result.score <= 4 * obstacles + 1

    @pytest.mark.slow
    def test_search_7x6_three_obstacles(self):
        """Test the 7x6 proof by brute force for three obstacles."""
        result = BruteForceEnumerator().search(7, 6, 3)
        assert result.score == 11
        assert result.candidates_evaluated == 16 * comb(41, 3)
