"""
Unit tests for simulated annealing.
"""
import pytest

from ice_puzzle.core.solver import SlideSolver
from ice_puzzle.search.strategies.annealing import AnnealingConfig, SimulatedAnnealingSearch


FAST = AnnealingConfig(
    initial_temperature=1.0,
    final_temperature=0.1,
    cooling_ratio=0.5,
    steps_per_temperature=30,
)


class TestAnnealingConfig:
    """Tests for AnnealingConfig validation."""

    def test_defaults(self):
        """Test the default schedule cools."""
        config = AnnealingConfig()
        assert 0 < config.cooling_ratio < 1
        assert config.final_temperature < config.initial_temperature

    def test_bad_ratio(self):
        """Test cooling ratios outside (0, 1) are rejected."""
        with pytest.raises(ValueError):
            AnnealingConfig(cooling_ratio=1.0)
        with pytest.raises(ValueError):
            AnnealingConfig(cooling_ratio=0.0)

    def test_bad_temperatures(self):
        """Test the final temperature must not exceed the initial one."""
        with pytest.raises(ValueError):
            AnnealingConfig(initial_temperature=0.5, final_temperature=1.0)
        with pytest.raises(ValueError):
            AnnealingConfig(final_temperature=0.0)


class TestSimulatedAnnealingSearch:
    """Tests for SimulatedAnnealingSearch."""

    def test_search_4x4(self):
        """Test results stay within the exact optimum."""
        strategy = SimulatedAnnealingSearch(seed=0, annealing_config=FAST, runs=2)
        result = strategy.search(4, 4, 2)

        assert result.strategy_id == "annealing"
        assert result.grid.count_obstacles() == 2
        assert not result.grid.is_obstacle(result.grid.start)
        assert 1 <= result.score <= 7

    def test_score_matches_grid(self):
        """Test the reported score is the solver's score of the best grid."""
        strategy = SimulatedAnnealingSearch(seed=1, annealing_config=FAST, runs=2)
        result = strategy.search(6, 5, 3)
        assert result.score == SlideSolver().max_moves(result.grid)
        assert result.score <= 4 * 3 + 1

    def test_candidates_counted(self):
        """Test every perturbation is scored."""
        strategy = SimulatedAnnealingSearch(seed=2, annealing_config=FAST, runs=1)
        result = strategy.search(5, 5, 2)
        # temperatures 1.0, 0.5, 0.25, 0.125
        assert result.candidates_evaluated == 1 + 4 * 30

    def test_runs_override(self):
        """Test the per-call run count overrides the constructor."""
        strategy = SimulatedAnnealingSearch(seed=3, annealing_config=FAST, runs=5)
        result = strategy.search(5, 5, 2, runs=1)
        assert result.candidates_evaluated == 1 + 4 * 30

    def test_reproducible(self):
        """Test the same seed gives the same puzzle."""
        a = SimulatedAnnealingSearch(seed=4, annealing_config=FAST, runs=2).search(5, 5, 3)
        b = SimulatedAnnealingSearch(seed=4, annealing_config=FAST, runs=2).search(5, 5, 3)
        assert a.grid == b.grid
        assert a.score == b.score

    def test_full_grid(self):
        """Test a grid with no room to move anything still returns."""
        strategy = SimulatedAnnealingSearch(seed=5, annealing_config=FAST, runs=1)
        result = strategy.search(2, 2, 3)
        assert result.grid.count_obstacles() == 3
        assert result.score == 0
