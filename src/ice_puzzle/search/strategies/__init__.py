"""
Search strategies for ice sliding puzzles.

Each strategy explores obstacle and start placements and keeps the grid
that needs the most slide-moves to reach its farthest point.
"""
from .base import SearchResult, Strategy, StrategyInfo
from .registry import STRATEGIES, get_strategy, list_strategies

__all__ = [
    'SearchResult',
    'Strategy',
    'StrategyInfo',
    'STRATEGIES',
    'get_strategy',
    'list_strategies',
]
