"""
Arena for running and comparing puzzle searches.

Supports single runs, side-by-side comparisons on the same seeds, and
sweeps over a range of obstacle counts.
"""
import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

import numpy as np

from ice_puzzle.core.grid import DEFAULT_CONFIG, GridConfig
from ice_puzzle.search.strategies import SearchResult, get_strategy

logger = logging.getLogger(__name__)


@dataclass
class StrategyStats:
    """Accumulated statistics for a strategy."""
    strategy_id: str
    runs: int = 0
    best_score: int = 0
    total_score: int = 0
    total_candidates: int = 0
    total_ms: float = 0.0
    scores: List[int] = field(default_factory=list)

    @property
    def avg_score(self) -> float:
        return self.total_score / self.runs if self.runs else 0

    @property
    def avg_ms(self) -> float:
        return self.total_ms / self.runs if self.runs else 0

    @property
    def score_std(self) -> float:
        return float(np.std(self.scores)) if self.scores else 0

    def add(self, result: SearchResult) -> None:
        self.runs += 1
        self.best_score = max(self.best_score, result.score)
        self.total_score += result.score
        self.total_candidates += result.candidates_evaluated
        self.total_ms += result.elapsed_ms
        self.scores.append(result.score)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'strategy_id': self.strategy_id,
            'runs': self.runs,
            'best_score': self.best_score,
            'avg_score': self.avg_score,
            'score_std': self.score_std,
            'total_candidates': self.total_candidates,
            'avg_ms': self.avg_ms,
        }


class Arena:
    """
    Runs strategies on puzzle-search problems and keeps statistics.

    Every strategy instance gets its own seed derived from the arena seed,
    so repeated comparisons are reproducible.
    """

    def __init__(self, seed: Optional[int] = None, config: Optional[GridConfig] = None):
        self.base_seed = seed if seed is not None else int(datetime.now().timestamp())
        self.config = config or DEFAULT_CONFIG
        self.stats: Dict[str, StrategyStats] = {}
        self.history: List[SearchResult] = []

    def run(
        self,
        strategy_id: str,
        width: int,
        height: int,
        obstacle_count: int,
        seed: Optional[int] = None,
        **kwargs: Any
    ) -> SearchResult:
        """
        Run one search.

        Args:
            strategy_id: Registered strategy id
            width: Grid width (upper bound for size-free strategies)
            height: Grid height (upper bound for size-free strategies)
            obstacle_count: Number of obstacles
            seed: Seed for this run; defaults to the arena seed
            **kwargs: Passed to the strategy constructor

        Returns:
            SearchResult of the run
        """
        run_seed = seed if seed is not None else self.base_seed
        strategy = get_strategy(strategy_id, seed=run_seed, config=self.config, **kwargs)
        result = strategy.search(width, height, obstacle_count)
        self._update_stats(result)
        logger.info(
            "%s: %d moves with %d obstacles in %.0f ms",
            strategy_id, result.score, obstacle_count, result.elapsed_ms
        )
        return result

    def compare(
        self,
        strategy_ids: List[str],
        width: int,
        height: int,
        obstacle_count: int,
        repeats: int = 1,
        callback: Optional[Callable] = None
    ) -> Dict[str, List[SearchResult]]:
        """
        Run every strategy ``repeats`` times on the same problem.

        All strategies see the same sequence of seeds.

        Returns:
            Dict mapping strategy_id to its results
        """
        results: Dict[str, List[SearchResult]] = {sid: [] for sid in strategy_ids}

        for i in range(repeats):
            seed = self.base_seed + i
            for sid in strategy_ids:
                result = self.run(sid, width, height, obstacle_count, seed=seed)
                results[sid].append(result)
                if callback:
                    callback(i + 1, repeats, result)

        return results

    def sweep(
        self,
        strategy_id: str,
        width: int,
        height: int,
        min_obstacles: int,
        max_obstacles: int,
        callback: Optional[Callable] = None,
        **kwargs: Any
    ) -> List[SearchResult]:
        """
        Search each obstacle count from ``min_obstacles`` to ``max_obstacles``.

        Returns:
            One result per obstacle count, in increasing order
        """
        if min_obstacles > max_obstacles:
            raise ValueError(
                f"Empty obstacle range {min_obstacles}..{max_obstacles}"
            )
        results = []
        for obstacle_count in range(min_obstacles, max_obstacles + 1):
            result = self.run(strategy_id, width, height, obstacle_count, **kwargs)
            results.append(result)
            if callback:
                callback(result)
        return results

    def _update_stats(self, result: SearchResult):
        if result.strategy_id not in self.stats:
            self.stats[result.strategy_id] = StrategyStats(strategy_id=result.strategy_id)
        self.stats[result.strategy_id].add(result)
        self.history.append(result)

    def leaderboard(self) -> List[Dict[str, Any]]:
        """Strategies ranked by best score, then average score."""
        rankings = [stats.to_dict() for stats in self.stats.values()]
        rankings.sort(key=lambda x: (x['best_score'], x['avg_score']), reverse=True)

        for i, r in enumerate(rankings):
            r['rank'] = i + 1

        return rankings
