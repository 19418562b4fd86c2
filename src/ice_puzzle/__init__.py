"""
Search for ice sliding puzzles that need as many moves as possible.
"""
from .core import DEFAULT_CONFIG, Direction, DistanceMaps, Grid, GridConfig, SlideSolver
from .search import Arena, SearchResult, get_strategy, list_strategies

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_CONFIG",
    "Direction",
    "DistanceMaps",
    "Grid",
    "GridConfig",
    "SlideSolver",
    "Arena",
    "SearchResult",
    "get_strategy",
    "list_strategies",
]
