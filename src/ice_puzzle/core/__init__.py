from .grid import DEFAULT_CONFIG, Direction, Grid, GridConfig
from .solver import DistanceMaps, Slide, SlideSolver
from .relative import Gap, RelativePuzzle

__all__ = [
    "DEFAULT_CONFIG",
    "Direction",
    "Grid",
    "GridConfig",
    "DistanceMaps",
    "Slide",
    "SlideSolver",
    "Gap",
    "RelativePuzzle",
]
