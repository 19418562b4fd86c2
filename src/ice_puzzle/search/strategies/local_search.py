"""
Greedy local search over single changes to a puzzle.

A neighbour differs from the current grid by one relocated obstacle, a
relocated start, or (optionally) two swapped rows or columns.
"""
import logging
import time
from dataclasses import dataclass
from typing import Iterator, Optional

import numpy as np

from ice_puzzle.core.grid import Grid, GridConfig
from .base import Strategy, StrategyInfo, SearchResult

logger = logging.getLogger(__name__)


@dataclass
class LocalSearchConfig:
    """Acceptance and neighbourhood settings for hill climbing."""
    # Accept equally scoring neighbours with probability 1/num_equal_seen
    accept_equal_scores: bool = False

    # Neighbourhood scans without improvement before stopping.
    # None picks 10 when ties are accepted, else 1.
    budget: Optional[int] = None

    # Row and column swaps; expensive and rarely helpful
    use_swaps: bool = False

    # Only move obstacles onto cells some slide can reach
    reachable_destinations_only: bool = True

    @property
    def scan_budget(self) -> int:
        if self.budget is not None:
            return self.budget
        return 10 if self.accept_equal_scores else 1


DEFAULT_LOCAL_SEARCH = LocalSearchConfig()


class GreedyLocalSearch(Strategy):
    """Hill climbing from random placements, keeping the best over restarts."""

    INFO = StrategyInfo(
        id="greedy",
        name="Greedy Local Search",
        short_desc="Hill climbing over single obstacle/start moves",
        algorithm="Scans every grid that differs by one relocated obstacle or a relocated "
                  "start, replacing the current grid as soon as a neighbour scores higher. "
                  "Stops when a full scan finds nothing better. Repeated from independent "
                  "random placements; the best result over all restarts wins.",
        complexity="O(runs * scans * obstacles * cells * solve)",
        category="Heuristic"
    )

    def __init__(
        self,
        seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
        config: Optional[GridConfig] = None,
        search_config: Optional[LocalSearchConfig] = None,
        runs: int = 100
    ):
        super().__init__(seed, rng, config)
        self.search_config = search_config or DEFAULT_LOCAL_SEARCH
        self.runs = runs

    def neighbors(
        self,
        grid: Grid,
        destinations: Optional[np.ndarray] = None,
        swaps: bool = False
    ) -> Iterator[Grid]:
        """
        Yield every grid one change away from ``grid``.

        Args:
            grid: Grid to perturb (left unchanged)
            destinations: Optional (height, width) bool mask of cells
                obstacles may move to
            swaps: Also yield all row and column swaps

        Yields:
            Fresh candidate grids
        """
        free = [c for c in grid.coords() if c != grid.start and not grid.is_obstacle(c)]
        targets = free
        if destinations is not None:
            targets = []
            for c in free:
                x, y = grid.xy(c)
                if destinations[y, x]:
                    targets.append(c)

        for obstacle in grid.obstacle_coords():
            for alt in targets:
                candidate = grid.copy()
                candidate.set_obstacle(obstacle, False)
                candidate.set_obstacle(alt)
                yield candidate

        for alt in free:
            candidate = grid.copy()
            candidate.start = alt
            yield candidate

        if swaps:
            for x1 in range(grid.width):
                for x2 in range(x1 + 1, grid.width):
                    candidate = grid.copy()
                    candidate.swap_columns(x1, x2)
                    yield candidate
            for y1 in range(grid.height):
                for y2 in range(y1 + 1, grid.height):
                    candidate = grid.copy()
                    candidate.swap_rows(y1, y2)
                    yield candidate

    def optimize(self, initial: Grid) -> Grid:
        """
        Hill-climb from ``initial``.

        Args:
            initial: Starting grid (left unchanged)

        Returns:
            The best grid reached
        """
        cfg = self.search_config
        best = initial.copy()
        best_score = self.score(best)
        budget = cfg.scan_budget

        while budget > 0:
            budget -= 1
            current = best
            num_equal = 1
            destinations = None
            if cfg.reachable_destinations_only:
                _, maps = self.solver.solve(current)
                destinations = maps.reachable()

            swaps = cfg.use_swaps and budget == 0
            for candidate in self.neighbors(current, destinations, swaps):
                score = self.score(candidate)
                if score > best_score:
                    best = candidate
                    best_score = score
                    budget = cfg.scan_budget
                    logger.debug("Local search improved to %d", best_score)
                elif cfg.accept_equal_scores and score == best_score:
                    num_equal += 1
                    if self.rng.integers(num_equal) == 0:
                        best = candidate

        return best

    def optimize_from_random_restarts(
        self,
        width: int,
        height: int,
        obstacle_count: int,
        runs: Optional[int] = None
    ) -> Grid:
        """Best of ``runs`` local searches from random placements."""
        runs = self.runs if runs is None else runs
        best = None
        best_score = -1

        for run in range(runs):
            initial = Grid.random(width, height, obstacle_count, self.rng, self.config)
            grid = self.optimize(initial)
            score = self.solver.max_moves(grid)
            if score > best_score:
                best = grid
                best_score = score
                logger.info(
                    "Run %d/%d: %d moves with %d obstacles",
                    run + 1, runs, best_score, obstacle_count
                )

        if best is None:
            best = Grid(width, height, self.config)
        return best

    def search(self, width: int, height: int, obstacle_count: int) -> SearchResult:
        self.reset()
        started = time.perf_counter()
        best = self.optimize_from_random_restarts(width, height, obstacle_count)
        return self._result(best, self.solver.max_moves(best), obstacle_count, started)
