"""
Exhaustive search over all obstacle placements of a fixed size.
"""
import logging
import time
from typing import Iterator, List, Sequence, Tuple

from ice_puzzle.core.grid import Grid
from .base import Strategy, StrategyInfo, SearchResult

logger = logging.getLogger(__name__)


def next_subset(grid: Grid, universe: Sequence[int]) -> bool:
    """
    Move the obstacles of ``grid`` to the next subset of ``universe``.

    Read as a bit string over ``universe``, "0001110" becomes "1100001":
    find the first run of obstacles that is followed by a clear cell, move
    the last obstacle of the run onto that cell and the rest of the run back
    to the front.

    Returns:
        False if this was the last subset (the grid is left unchanged)
    """
    n = len(universe)
    first = 0
    while first < n and not grid.is_obstacle(universe[first]):
        first += 1
    if first == n:
        return False

    clear = first
    while clear < n and grid.is_obstacle(universe[clear]):
        clear += 1
    if clear == n:
        return False

    run = clear - first
    for i in range(run - 1):
        grid.set_obstacle(universe[first + i], False)
        grid.set_obstacle(universe[i])
    grid.set_obstacle(universe[clear - 1], False)
    grid.set_obstacle(universe[clear])
    return True


class BruteForceEnumerator(Strategy):
    """Tries every placement of the obstacles for every distinct start cell."""

    INFO = StrategyInfo(
        id="brute_force",
        name="Brute Force",
        short_desc="Every obstacle subset, symmetry-pruned start cells",
        algorithm="For each start cell in the upper-left quadrant (and on or above the "
                  "diagonal for square grids), enumerates every subset of the other cells "
                  "of the requested size in reverse-lexicographic order and scores each one. "
                  "Exact for the given grid size and obstacle count.",
        complexity="O(starts * C(cells - 1, obstacles) * solve)",
        category="Exhaustive"
    )

    @staticmethod
    def start_cells(width: int, height: int) -> List[Tuple[int, int]]:
        """
        One start cell per mirror/transpose symmetry class.

        Returns:
            (x, y) pairs with 2x <= width, 2y <= height, and y <= x on
            square grids
        """
        cells = []
        for y in range(height):
            for x in range(width):
                if 2 * x > width or 2 * y > height:
                    continue
                if width == height and y > x:
                    continue
                cells.append((x, y))
        return cells

    def subsets(self, width: int, height: int, start: int, obstacle_count: int) -> Iterator[Grid]:
        """
        Yield the grid once per obstacle subset for a fixed start.

        The same grid object is yielded each time and changes on the next
        step; copy it to keep it.
        """
        grid = Grid(width, height, self.config)
        grid.move_start(start)
        universe = [c for c in grid.coords() if c != start]
        if not 0 <= obstacle_count <= len(universe):
            raise ValueError(
                f"Cannot place {obstacle_count} obstacles in {len(universe)} free cells"
            )
        for coord in universe[:obstacle_count]:
            grid.set_obstacle(coord)

        while True:
            yield grid
            if not next_subset(grid, universe):
                break

    def search(self, width: int, height: int, obstacle_count: int) -> SearchResult:
        self.reset()
        started = time.perf_counter()
        best = None
        best_score = -1
        for x, y in self.start_cells(width, height):
            start = self.config.coord(x, y)
            logger.debug("Start (%d, %d)", x, y)
            for grid in self.subsets(width, height, start, obstacle_count):
                score = self.score(grid)
                if score > best_score:
                    best = grid.copy()
                    best_score = score
                    logger.info(
                        "%d moves with %d obstacles (start %d, %d)",
                        best_score, obstacle_count, x, y
                    )

        return self._result(best, best_score, obstacle_count, started)
