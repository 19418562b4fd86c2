"""
Simulated annealing over obstacle and start placements.
"""
import logging
import math
import time
from dataclasses import dataclass
from typing import Optional

import numpy as np

from ice_puzzle.core.grid import Grid, GridConfig
from .base import Strategy, StrategyInfo, SearchResult

logger = logging.getLogger(__name__)


@dataclass
class AnnealingConfig:
    """Geometric cooling schedule."""
    initial_temperature: float = 2.0
    final_temperature: float = 0.05
    # Temperature multiplier applied after each batch of steps
    cooling_ratio: float = 0.95
    steps_per_temperature: int = 100

    def __post_init__(self):
        if not 0 < self.cooling_ratio < 1:
            raise ValueError(f"Cooling ratio must be in (0, 1), got {self.cooling_ratio}")
        if not 0 < self.final_temperature <= self.initial_temperature:
            raise ValueError("Need 0 < final_temperature <= initial_temperature")


DEFAULT_ANNEALING = AnnealingConfig()


class SimulatedAnnealingSearch(Strategy):
    """Random single-object moves accepted by the Metropolis rule."""

    INFO = StrategyInfo(
        id="annealing",
        name="Simulated Annealing",
        short_desc="Random perturbations with temperature-scheduled acceptance",
        algorithm="Moves one randomly chosen object (an obstacle or the start) to a random "
                  "empty cell. Moves scoring at least the best-ever score are always kept; "
                  "others are kept with probability exp((new - old) / T), else undone. "
                  "T cools geometrically. The best grid ever seen is recorded separately "
                  "from the random walk.",
        complexity="O(runs * temperatures * steps * solve)",
        category="Heuristic"
    )

    def __init__(
        self,
        seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
        config: Optional[GridConfig] = None,
        annealing_config: Optional[AnnealingConfig] = None,
        runs: int = 10
    ):
        super().__init__(seed, rng, config)
        self.annealing_config = annealing_config or DEFAULT_ANNEALING
        self.runs = runs

    def _accept(self, new_score: int, old_score: int, temperature: float) -> bool:
        if new_score >= old_score:
            return True
        return self.rng.random() < math.exp((new_score - old_score) / temperature)

    def search(
        self,
        width: int,
        height: int,
        obstacle_count: int,
        runs: Optional[int] = None
    ) -> SearchResult:
        self.reset()
        started = time.perf_counter()
        cfg = self.annealing_config
        runs = self.runs if runs is None else runs

        best = None
        best_score = -1

        for run in range(runs):
            grid = Grid.random(width, height, obstacle_count, self.rng, self.config)
            obstacles = grid.obstacle_coords()
            score = self.score(grid)
            if score > best_score:
                best, best_score = grid.copy(), score

            temperature = cfg.initial_temperature
            while temperature >= cfg.final_temperature:
                for _ in range(cfg.steps_per_temperature):
                    target = grid.random_empty_cell(self.rng)
                    if target is None:
                        break

                    slot = int(self.rng.integers(obstacle_count + 1))
                    if slot < obstacle_count:
                        old = obstacles[slot]
                        grid.set_obstacle(old, False)
                        grid.set_obstacle(target)
                        obstacles[slot] = target
                    else:
                        old = grid.start
                        grid.move_start(target)

                    new_score = self.score(grid)
                    if new_score >= best_score:
                        if new_score > best_score:
                            best, best_score = grid.copy(), new_score
                            logger.info(
                                "Run %d/%d: %d moves with %d obstacles",
                                run + 1, runs, best_score, obstacle_count
                            )
                        score = new_score
                    elif self._accept(new_score, score, temperature):
                        score = new_score
                    elif slot < obstacle_count:
                        grid.set_obstacle(target, False)
                        grid.set_obstacle(old)
                        obstacles[slot] = old
                    else:
                        grid.move_start(old)

                temperature *= cfg.cooling_ratio

            logger.debug("Run %d/%d finished at %d moves", run + 1, runs, score)

        if best is None:
            best = Grid(width, height, self.config)
            best_score = self.solver.max_moves(best)
        return self._result(best, best_score, obstacle_count, started)
