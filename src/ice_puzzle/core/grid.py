"""
Grid representation for ice sliding puzzles.

A grid is a rectangle of cells, some of them obstacles, with one start cell.
Cells are addressed by integer coordinates ``x + y * stride`` where the stride
comes from the configuration and may be wider than the grid itself.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional, Sequence, Tuple

import numpy as np


class Direction(Enum):
    """Cardinal slide directions."""
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


@dataclass(frozen=True)
class GridConfig:
    """Bounds and movement rules shared by grids, the solver and searches."""
    # Largest supported grid
    max_width: int = 32
    max_height: int = 32

    # When False the border does not stop a sliding token
    edges_are_walls: bool = True

    def __post_init__(self):
        if self.max_width <= 0 or self.max_height <= 0:
            raise ValueError(
                f"Maximum size must be positive, got {self.max_width}x{self.max_height}"
            )

    @property
    def stride(self) -> int:
        return self.max_width

    @property
    def unreachable(self) -> int:
        """Distance value used for cells that are never reached."""
        return self.max_width * self.max_height + 1

    def coord(self, x: int, y: int) -> int:
        return x + y * self.stride

    def xy(self, coord: int) -> Tuple[int, int]:
        y, x = divmod(coord, self.stride)
        return x, y


DEFAULT_CONFIG = GridConfig()


class Grid:
    """
    Ice sliding puzzle: obstacle flags plus a start cell.

    The obstacles are a numpy bool array of shape (height, width).
    The start cell is never an obstacle.
    """

    def __init__(self, width: int, height: int, config: Optional[GridConfig] = None):
        """Create an empty grid with the start at the origin."""
        self.config = config or DEFAULT_CONFIG
        if not 0 < width <= self.config.max_width:
            raise ValueError(f"Width must be in 1..{self.config.max_width}, got {width}")
        if not 0 < height <= self.config.max_height:
            raise ValueError(f"Height must be in 1..{self.config.max_height}, got {height}")
        self.width = width
        self.height = height
        self.cells = np.zeros((height, width), dtype=bool)
        self.start = 0

    @classmethod
    def create(cls, width: int, height: int, config: Optional[GridConfig] = None) -> Grid:
        return cls(width, height, config)

    @classmethod
    def from_rows(
        cls,
        rows: Sequence[str],
        start_markers: str = "0sS",
        obstacle_markers: str = "#*",
        config: Optional[GridConfig] = None
    ) -> Grid:
        """
        Parse a grid from its text notation.

        Example::

            Grid.from_rows([
                ".S#....",
                ".#..#..",
            ])

        Args:
            rows: Equal-length strings, one character per cell
            start_markers: Characters marking the start cell
            obstacle_markers: Characters marking obstacles

        Returns:
            The parsed grid. Without a start marker the start is the origin.

        Raises:
            ValueError: On inconsistent row lengths, several start markers,
                or a start cell that is an obstacle
        """
        if not rows:
            raise ValueError("Grid needs at least one row")
        width = len(rows[0])
        for y, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(
                    f"Row {y} has length {len(row)}, expected {width}"
                )

        grid = cls(width, len(rows), config)
        start = None
        for y, row in enumerate(rows):
            for x, char in enumerate(row):
                if char in obstacle_markers:
                    grid.cells[y, x] = True
                elif char in start_markers:
                    if start is not None:
                        raise ValueError(f"More than one start marker (row {y})")
                    start = grid.coord(x, y)

        if start is None:
            if grid.cells[0, 0]:
                raise ValueError("No start marker and the origin is an obstacle")
            start = 0
        grid.start = start
        return grid

    @classmethod
    def random(
        cls,
        width: int,
        height: int,
        obstacle_count: int,
        rng: np.random.Generator,
        config: Optional[GridConfig] = None
    ) -> Grid:
        """Uniformly random start plus ``obstacle_count`` distinct obstacles."""
        if not 0 <= obstacle_count < width * height:
            raise ValueError(
                f"Cannot place {obstacle_count} obstacles on a {width}x{height} grid"
            )
        grid = cls(width, height, config)
        grid.start = grid.random_cell(rng)
        for _ in range(obstacle_count):
            grid.set_obstacle(grid.random_empty_cell(rng))
        return grid

    # -- coordinates -----------------------------------------------------------

    def coord(self, x: int, y: int) -> int:
        return x + y * self.config.stride

    def xy(self, coord: int) -> Tuple[int, int]:
        y, x = divmod(coord, self.config.stride)
        return x, y

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def coords(self) -> Iterator[int]:
        """Iterate over all cells in row-major order."""
        stride = self.config.stride
        for y in range(self.height):
            base = y * stride
            for x in range(self.width):
                yield base + x

    def _check(self, coord: int) -> Tuple[int, int]:
        x, y = self.xy(coord)
        if not self.in_bounds(x, y):
            raise ValueError(f"Coordinate {coord} ({x}, {y}) is outside the grid")
        return x, y

    # -- obstacles and start -----------------------------------------------------

    def is_obstacle(self, coord: int) -> bool:
        x, y = self.xy(coord)
        return bool(self.cells[y, x])

    def set_obstacle(self, coord: int, value: bool = True) -> None:
        if value and coord == self.start:
            raise ValueError("The start cell cannot be an obstacle")
        x, y = self._check(coord)
        self.cells[y, x] = value

    def move_start(self, coord: int) -> None:
        x, y = self._check(coord)
        if self.cells[y, x]:
            raise ValueError(f"Cannot move the start onto obstacle ({x}, {y})")
        self.start = coord

    def count_obstacles(self) -> int:
        return int(np.sum(self.cells))

    def empty_count(self) -> int:
        """Number of cells that are neither obstacles nor the start."""
        return self.width * self.height - self.count_obstacles() - 1

    def obstacle_coords(self) -> List[int]:
        ys, xs = np.nonzero(self.cells)
        return [self.coord(int(x), int(y)) for x, y in zip(xs, ys)]

    def random_cell(self, rng: np.random.Generator) -> int:
        x = int(rng.integers(self.width))
        y = int(rng.integers(self.height))
        return self.coord(x, y)

    def random_empty_cell(self, rng: np.random.Generator) -> Optional[int]:
        """
        Pick a random cell that is neither an obstacle nor the start.

        Returns:
            The coordinate, or None if every cell is taken
        """
        if self.empty_count() <= 0:
            return None
        while True:
            coord = self.random_cell(rng)
            if coord != self.start and not self.is_obstacle(coord):
                return coord

    def swap_columns(self, x1: int, x2: int) -> None:
        """Swap two columns; the start moves with its column."""
        self.cells[:, [x1, x2]] = self.cells[:, [x2, x1]]
        sx, sy = self.xy(self.start)
        if sx == x1:
            self.start = self.coord(x2, sy)
        elif sx == x2:
            self.start = self.coord(x1, sy)

    def swap_rows(self, y1: int, y2: int) -> None:
        """Swap two rows; the start moves with its row."""
        self.cells[[y1, y2], :] = self.cells[[y2, y1], :]
        sx, sy = self.xy(self.start)
        if sy == y1:
            self.start = self.coord(sx, y2)
        elif sy == y2:
            self.start = self.coord(sx, y1)

    def padded_obstacles(self) -> List[bool]:
        """Obstacle flags as a flat list indexed by coordinate."""
        padded = np.zeros((self.height, self.config.stride), dtype=bool)
        padded[:, :self.width] = self.cells
        return padded.ravel().tolist()

    # -- conversion --------------------------------------------------------------

    def copy(self) -> Grid:
        """Create a deep copy of the grid."""
        grid = Grid.__new__(Grid)
        grid.config = self.config
        grid.width = self.width
        grid.height = self.height
        grid.cells = self.cells.copy()
        grid.start = self.start
        return grid

    def to_rows(
        self,
        start_marker: str = "S",
        obstacle_marker: str = "#",
        empty_marker: str = "."
    ) -> List[str]:
        rows = []
        sx, sy = self.xy(self.start)
        for y in range(self.height):
            chars = [obstacle_marker if cell else empty_marker for cell in self.cells[y]]
            if y == sy:
                chars[sx] = start_marker
            rows.append("".join(chars))
        return rows

    def __str__(self) -> str:
        return "\n".join(self.to_rows())

    def __repr__(self) -> str:
        x, y = self.xy(self.start)
        return (f"Grid({self.width}x{self.height}, start=({x}, {y}), "
                f"obstacles={self.count_obstacles()})")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return False
        return (self.start == other.start
                and self.cells.shape == other.cells.shape
                and np.array_equal(self.cells, other.cells))

    def __hash__(self) -> int:
        """Hash of the current contents; do not mutate a grid held in a set or dict."""
        return hash((self.start, self.cells.shape, self.cells.tobytes()))
