"""
Base strategy class for puzzle searches.
"""
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Optional

import numpy as np

from ice_puzzle.core.grid import DEFAULT_CONFIG, Grid, GridConfig
from ice_puzzle.core.solver import SlideSolver


@dataclass
class StrategyInfo:
    """Metadata about a strategy for display and comparison."""
    id: str
    name: str
    short_desc: str   # One-line summary
    algorithm: str    # Technical description of the algorithm
    complexity: str
    category: str     # "Heuristic" or "Exhaustive"

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'short_desc': self.short_desc,
            'algorithm': self.algorithm,
            'complexity': self.complexity,
            'category': self.category,
        }


@dataclass
class SearchResult:
    """Best puzzle found by one search."""
    strategy_id: str
    grid: Grid
    score: int
    obstacle_count: int
    candidates_evaluated: int = 0
    elapsed_ms: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'strategy_id': self.strategy_id,
            'rows': self.grid.to_rows(),
            'width': self.grid.width,
            'height': self.grid.height,
            'score': self.score,
            'obstacle_count': self.obstacle_count,
            'candidates_evaluated': self.candidates_evaluated,
            'elapsed_ms': self.elapsed_ms,
        }


class Strategy(ABC):
    """
    Abstract base class for all puzzle search strategies.

    A strategy produces candidate grids, scores each one with the slide
    solver, and keeps the best grid it has seen.
    """

    # Override this in subclasses
    INFO: StrategyInfo = StrategyInfo(
        id="base",
        name="Base Strategy",
        short_desc="Abstract base class",
        algorithm="Override this in subclasses",
        complexity="N/A",
        category="N/A"
    )

    def __init__(
        self,
        seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
        config: Optional[GridConfig] = None
    ):
        """Initialize strategy with an optional random seed or generator."""
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.config = config or DEFAULT_CONFIG
        self.solver = SlideSolver(self.config)
        self.candidates_evaluated = 0

    @abstractmethod
    def search(self, width: int, height: int, obstacle_count: int) -> SearchResult:
        """
        Find a grid with as many required moves as possible.

        Args:
            width: Grid width (an upper bound for size-free searches)
            height: Grid height (an upper bound for size-free searches)
            obstacle_count: Number of obstacles to place

        Returns:
            SearchResult with the best grid found
        """
        pass

    def score(self, grid: Grid) -> int:
        """Maximum number of moves needed to reach any point of ``grid``."""
        self.candidates_evaluated += 1
        return self.solver.max_moves(grid)

    def _result(self, grid: Grid, score: int, obstacle_count: int, started: float) -> SearchResult:
        return SearchResult(
            strategy_id=self.INFO.id,
            grid=grid,
            score=score,
            obstacle_count=obstacle_count,
            candidates_evaluated=self.candidates_evaluated,
            elapsed_ms=(time.perf_counter() - started) * 1000,
        )

    def reset(self):
        """Reset counters before a new search."""
        self.candidates_evaluated = 0

    @classmethod
    def get_info(cls) -> StrategyInfo:
        """Get strategy metadata."""
        return cls.INFO
