"""
Strategy registry - central place to access all available strategies.
"""
from typing import Any, Dict, List, Optional, Type

from .base import Strategy, StrategyInfo
from .local_search import GreedyLocalSearch
from .annealing import SimulatedAnnealingSearch
from .brute_force import BruteForceEnumerator
from .relative_search import RelativePositionSearch


STRATEGIES: Dict[str, Type[Strategy]] = {
    # Heuristic
    'greedy': GreedyLocalSearch,
    'annealing': SimulatedAnnealingSearch,

    # Exhaustive for a fixed obstacle count
    'brute_force': BruteForceEnumerator,
    'relative': RelativePositionSearch,
}


def get_strategy(strategy_id: str, seed: Optional[int] = None, **kwargs: Any) -> Strategy:
    """
    Get a strategy instance by ID.

    Args:
        strategy_id: The strategy identifier
        seed: Optional random seed
        **kwargs: Passed to the strategy constructor

    Returns:
        Strategy instance

    Raises:
        ValueError: If strategy_id is not found
    """
    if strategy_id not in STRATEGIES:
        available = ", ".join(STRATEGIES.keys())
        raise ValueError(f"Unknown strategy: {strategy_id}. Available: {available}")

    return STRATEGIES[strategy_id](seed=seed, **kwargs)


def list_strategies() -> List[StrategyInfo]:
    """
    Get info about all available strategies.

    Returns:
        List of StrategyInfo objects
    """
    return [cls.INFO for cls in STRATEGIES.values()]


def get_strategies_by_category() -> Dict[str, List[StrategyInfo]]:
    """
    Get strategies grouped by category.

    Returns:
        Dict mapping category names to lists of StrategyInfo
    """
    by_category: Dict[str, List[StrategyInfo]] = {}

    for cls in STRATEGIES.values():
        info = cls.INFO
        if info.category not in by_category:
            by_category[info.category] = []
        by_category[info.category].append(info)

    return by_category
