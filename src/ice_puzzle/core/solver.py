"""
Slide distance solver.

A slide-move pushes the token in one direction until the next cell is an
obstacle or the border. The solver runs a breadth-first search over resting
cells and records two distances per cell:

- stop distance: fewest slide-moves to come to rest on the cell
- pass distance: fewest slide-moves to travel through the cell on the way
  to some resting cell

The puzzle score is the largest pass distance. The farthest point of a
puzzle need not be a cell where the token can stop.
"""
from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import List, NamedTuple, Optional, Tuple

import numpy as np

from .grid import DEFAULT_CONFIG, Direction, Grid, GridConfig


class Slide(NamedTuple):
    """One slide-move: from ``origin`` in ``direction``, resting on ``end``."""
    origin: int
    direction: Direction
    end: int


@dataclass
class DistanceMaps:
    """
    Result of a single solve.

    ``stop`` and ``passing`` are (height, width) unsigned arrays; cells that are never
    reached hold ``unreachable``.
    """
    stop: np.ndarray
    passing: np.ndarray
    max_moves: int
    unreachable: int
    stride: int
    pass_slides: Optional[List[Optional[Slide]]] = None
    stop_slides: Optional[List[Optional[Slide]]] = None

    def _xy(self, coord: int) -> Tuple[int, int]:
        y, x = divmod(coord, self.stride)
        return x, y

    def stop_distance(self, coord: int) -> int:
        x, y = self._xy(coord)
        return int(self.stop[y, x])

    def pass_distance(self, coord: int) -> int:
        x, y = self._xy(coord)
        return int(self.passing[y, x])

    def reachable(self) -> np.ndarray:
        """Bool mask of cells with a finite pass distance."""
        return self.passing < self.unreachable

    def farthest(self) -> List[int]:
        """Coordinates whose pass distance equals the score."""
        ys, xs = np.nonzero(self.passing == self.max_moves)
        return [int(x) + int(y) * self.stride for x, y in zip(xs, ys)]

    def path_to(self, coord: int) -> List[Slide]:
        """
        Slides from the start to the slide that passes through ``coord``.

        Requires a solve with ``track_path=True``.

        Raises:
            ValueError: If paths were not tracked or the cell is unreachable
        """
        if self.pass_slides is None or self.stop_slides is None:
            raise ValueError("Solve with track_path=True to reconstruct paths")
        if self.pass_distance(coord) >= self.unreachable:
            raise ValueError(f"Coordinate {coord} is unreachable")

        path: List[Slide] = []
        slide = self.pass_slides[coord]
        while slide is not None:
            path.append(slide)
            slide = self.stop_slides[slide.origin]
        path.reverse()
        return path

    def to_text(self, grid: Grid) -> str:
        """Per-cell pass distances: digits, then letters from 10 upwards."""
        lines = []
        for y in range(grid.height):
            chars = []
            for x in range(grid.width):
                dist = int(self.passing[y, x])
                if grid.cells[y, x]:
                    chars.append("#")
                elif dist >= self.unreachable:
                    chars.append(".")
                elif dist < 10:
                    chars.append(str(dist))
                else:
                    chars.append(chr(ord("a") + dist - 10))
            lines.append("".join(chars))
        return "\n".join(lines)


class SlideSolver:
    """
    Breadth-first slide distance solver.

    Every call owns its scratch buffers, so one solver may be shared between
    searches and calls never see each other's state.
    """

    def __init__(self, config: Optional[GridConfig] = None):
        self.config = config or DEFAULT_CONFIG

    def max_moves(self, grid: Grid) -> int:
        """Score of ``grid`` without building distance maps."""
        return self._run(grid, track_path=False)[0]

    def solve(self, grid: Grid, track_path: bool = False) -> Tuple[int, DistanceMaps]:
        """
        Compute the score and distance maps of ``grid``.

        Args:
            grid: Puzzle to solve
            track_path: Also record the slide that first reached each cell

        Returns:
            (max_moves, DistanceMaps)
        """
        max_moves, stop, passing, pass_slides, stop_slides = self._run(grid, track_path)

        stride = self.config.stride
        shape = (grid.height, stride)
        dtype = np.uint16 if self.config.unreachable <= np.iinfo(np.uint16).max else np.uint32
        maps = DistanceMaps(
            stop=np.array(stop, dtype=dtype).reshape(shape)[:, :grid.width].copy(),
            passing=np.array(passing, dtype=dtype).reshape(shape)[:, :grid.width].copy(),
            max_moves=max_moves,
            unreachable=self.config.unreachable,
            stride=stride,
            pass_slides=pass_slides,
            stop_slides=stop_slides,
        )
        return max_moves, maps

    def _run(self, grid: Grid, track_path: bool):
        stride = self.config.stride
        walls = self.config.edges_are_walls
        unreachable = self.config.unreachable
        width, height = grid.width, grid.height
        size = height * stride

        blocked = grid.padded_obstacles()
        stop = [unreachable] * size
        passing = [unreachable] * size
        pass_slides: Optional[List[Optional[Slide]]] = [None] * size if track_path else None
        stop_slides: Optional[List[Optional[Slide]]] = [None] * size if track_path else None

        start = grid.start
        stop[start] = passing[start] = 0
        queue = deque([start])
        max_moves = 0

        while queue:
            pos = queue.popleft()
            dist = stop[pos] + 1
            col = pos % stride
            row_base = pos - col
            # (direction, step, first coordinate past the border)
            moves = (
                (Direction.LEFT, -1, row_base - 1),
                (Direction.RIGHT, 1, row_base + width),
                (Direction.UP, -stride, col - stride),
                (Direction.DOWN, stride, col + height * stride),
            )
            for direction, step, bound in moves:
                p = pos
                while True:
                    nxt = p + step
                    if nxt == bound:
                        at_edge = True
                        break
                    if blocked[nxt]:
                        at_edge = False
                        break
                    p = nxt

                if p == pos:
                    continue
                if at_edge and not walls:
                    # slid off the grid
                    continue

                slide = Slide(pos, direction, p) if track_path else None
                for c in range(pos + step, p + step, step):
                    if passing[c] > dist:
                        passing[c] = dist
                        # queue order: dist never decreases
                        max_moves = dist
                        if track_path:
                            pass_slides[c] = slide
                if stop[p] > dist:
                    stop[p] = dist
                    if track_path:
                        stop_slides[p] = slide
                    queue.append(p)

        return max_moves, stop, passing, pass_slides, stop_slides
