"""
Unit tests for greedy local search.
"""
import numpy as np

from ice_puzzle.core.grid import Grid
from ice_puzzle.core.solver import SlideSolver
from ice_puzzle.search.strategies.local_search import GreedyLocalSearch, LocalSearchConfig


class TestLocalSearchConfig:
    """Tests for LocalSearchConfig."""

    def test_default_budget(self):
        """Test one scan without ties, ten with them."""
        assert LocalSearchConfig().scan_budget == 1
        assert LocalSearchConfig(accept_equal_scores=True).scan_budget == 10
        assert LocalSearchConfig(budget=3).scan_budget == 3


class TestNeighbors:
    """Tests for the single-change neighbourhood."""

    def test_neighbor_count(self):
        """Test every obstacle move and start move is produced."""
        grid = Grid.from_rows(["S#..", "....", "..#."])
        free = 12 - 2 - 1
        neighbors = list(GreedyLocalSearch(seed=0).neighbors(grid))
        assert len(neighbors) == 2 * free + free

    def test_neighbors_with_swaps(self):
        """Test swaps add one grid per column pair and row pair."""
        grid = Grid.from_rows(["S#..", "....", "..#."])
        free = 12 - 2 - 1
        neighbors = list(GreedyLocalSearch(seed=0).neighbors(grid, swaps=True))
        assert len(neighbors) == 3 * free + 6 + 3

    def test_neighbors_differ_by_one_change(self):
        """Test each neighbour keeps the obstacle count and leaves the input alone."""
        grid = Grid.from_rows(["S#..", "....", "..#."])
        original = grid.copy()
        for neighbor in GreedyLocalSearch(seed=0).neighbors(grid):
            assert neighbor.count_obstacles() == 2
            assert not neighbor.is_obstacle(neighbor.start)
            assert neighbor != grid
        assert grid == original

    def test_destination_mask(self):
        """Test obstacle destinations are limited by the mask."""
        grid = Grid.from_rows(["S#..", "....", "..#."])
        mask = np.zeros((3, 4), dtype=bool)
        mask[1, 1] = True
        neighbors = list(GreedyLocalSearch(seed=0).neighbors(grid, destinations=mask))
        free = 12 - 2 - 1
        assert len(neighbors) == 2 + free
        for neighbor in neighbors[:2]:
            assert neighbor.is_obstacle(grid.coord(1, 1))

    def test_restartable(self):
        """Test re-invoking the enumeration gives the same sequence."""
        grid = Grid.from_rows(["S.#", "..."])
        strategy = GreedyLocalSearch(seed=0)
        first = list(strategy.neighbors(grid))
        second = list(strategy.neighbors(grid))
        assert first == second


class TestGreedyLocalSearch:
    """Tests for GreedyLocalSearch."""

    def test_optimize_never_worse(self):
        """Test local search does not lose score."""
        solver = SlideSolver()
        rng = np.random.default_rng(5)
        strategy = GreedyLocalSearch(seed=5)
        for _ in range(5):
            initial = Grid.random(5, 5, 3, rng)
            result = strategy.optimize(initial)
            assert solver.max_moves(result) >= solver.max_moves(initial)
            assert result.count_obstacles() == 3

    def test_optimize_escapes_boxed_start(self):
        """Test a trapped start is improved."""
        initial = Grid.from_rows(["S#..", "#...", "....", "...."])
        result = GreedyLocalSearch(seed=0).optimize(initial)
        assert SlideSolver().max_moves(result) > 0
        assert initial.to_rows()[0] == "S#.."

    def test_optimize_local_optimum(self):
        """Test the result has no strictly better neighbour."""
        solver = SlideSolver()
        config = LocalSearchConfig(reachable_destinations_only=False)
        strategy = GreedyLocalSearch(seed=1, search_config=config)
        result = strategy.optimize(Grid.random(4, 4, 2, np.random.default_rng(1)))
        score = solver.max_moves(result)
        assert all(solver.max_moves(n) <= score for n in strategy.neighbors(result))

    def test_accept_equal_scores(self):
        """Test plateau walking still returns a valid grid."""
        config = LocalSearchConfig(accept_equal_scores=True, budget=3)
        strategy = GreedyLocalSearch(seed=2, search_config=config)
        result = strategy.optimize(Grid.random(4, 4, 2, np.random.default_rng(2)))
        assert result.count_obstacles() == 2
        assert 1 <= SlideSolver().max_moves(result) <= 7

    def test_swaps(self):
        """Test the swap neighbourhood runs."""
        config = LocalSearchConfig(use_swaps=True)
        strategy = GreedyLocalSearch(seed=3, search_config=config)
        result = strategy.optimize(Grid.random(4, 4, 2, np.random.default_rng(3)))
        assert result.count_obstacles() == 2

    def test_random_restarts(self):
        """Test restarts stay within the exact optimum for 4x4 with 2 obstacles."""
        strategy = GreedyLocalSearch(seed=42)
        grid = strategy.optimize_from_random_restarts(4, 4, 2, runs=5)
        score = SlideSolver().max_moves(grid)
        assert 1 <= score <= 7
        assert grid.count_obstacles() == 2

    def test_search_result(self):
        """Test the strategy interface."""
        result = GreedyLocalSearch(seed=7, runs=3).search(5, 4, 2)
        assert result.strategy_id == "greedy"
        assert result.score == SlideSolver().max_moves(result.grid)
        assert result.score <= 4 * 2 + 1
        assert result.candidates_evaluated > 0
        assert result.elapsed_ms >= 0

    def test_reproducible(self):
        """Test the same seed gives the same puzzle."""
        a = GreedyLocalSearch(seed=11, runs=3).search(5, 5, 3)
        b = GreedyLocalSearch(seed=11, runs=3).search(5, 5, 3)
        assert a.grid == b.grid
        assert a.score == b.score

    def test_injected_generator(self):
        """Test an injected generator is used as given."""
        rng = np.random.default_rng(9)
        strategy = GreedyLocalSearch(rng=rng)
        assert strategy.rng is rng
