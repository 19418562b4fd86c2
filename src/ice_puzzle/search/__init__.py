from .arena import Arena, StrategyStats
from .strategies import SearchResult, Strategy, StrategyInfo, get_strategy, list_strategies

__all__ = [
    "Arena",
    "StrategyStats",
    "SearchResult",
    "Strategy",
    "StrategyInfo",
    "get_strategy",
    "list_strategies",
]
