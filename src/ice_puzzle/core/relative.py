"""
Relative-position encoding of puzzle layouts.

A layout of ``k`` obstacles and one start is described without fixing the
grid size. The ``k + 1`` objects are listed left to right; the horizontal gap
before each object (and after the last one, up to the wall) is one of SAME,
NEXT or SKIP. Vertical gaps are listed top to bottom the same way, and a
permutation maps the left-to-right order to the top-to-bottom order. Grid
width and height fall out of the gaps, so enumerating encodings explores
grid sizes along with layouts.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, List, MutableSequence, Optional, Sequence

from .grid import DEFAULT_CONFIG, Grid, GridConfig


class Gap(IntEnum):
    SAME = 0
    NEXT = 1
    SKIP = 2


# Cells advanced per gap. SKIP leaves two blank lines, standing in for any
# longer run of blank lines.
GAP_ADVANCE: Dict[Gap, int] = {
    Gap.SAME: 0,
    Gap.NEXT: 1,
    Gap.SKIP: 3,
}


def next_permutation(values: MutableSequence[int]) -> bool:
    """
    Rearrange ``values`` into the next permutation in lexicographic order.

    Scans from the right for the first descent, swaps it with the rightmost
    larger element and reverses the suffix.

    Returns:
        False (leaving ``values`` sorted ascending) if it was the last one
    """
    i = len(values) - 2
    while i >= 0 and values[i] >= values[i + 1]:
        i -= 1
    if i < 0:
        values.reverse()
        return False
    j = len(values) - 1
    while values[j] <= values[i]:
        j -= 1
    values[i], values[j] = values[j], values[i]
    values[i + 1:] = reversed(values[i + 1:])
    return True


def axis_positions(gaps: Sequence[Gap]) -> List[int]:
    """
    Accumulate gaps along one axis.

    Returns:
        One position per object followed by the axis extent
    """
    positions = []
    pos = -1
    for gap in gaps:
        pos += GAP_ADVANCE[gap]
        positions.append(pos)
    return positions


@dataclass
class RelativePuzzle:
    """
    One point of the relative-position search space.

    With ``n`` objects there are ``n + 1`` gaps per axis. Outer gaps are
    never SAME. ``permutation[i]`` is the vertical rank of the i-th object
    from the left, and ``start_index`` picks the object that is the start.
    """
    horizontal: List[Gap]
    vertical: List[Gap]
    permutation: List[int]
    start_index: int = 0

    @property
    def object_count(self) -> int:
        return len(self.permutation)

    @property
    def obstacle_count(self) -> int:
        return len(self.permutation) - 1

    @property
    def canonical_limit(self) -> int:
        """Largest start index / first permutation entry in canonical form."""
        return self.object_count // 2

    @classmethod
    def first(cls, obstacle_count: int, allow_same_gap: bool = True) -> RelativePuzzle:
        """First encoding in successor order."""
        if obstacle_count < 0:
            raise ValueError(f"Obstacle count must be non-negative, got {obstacle_count}")
        n = obstacle_count + 1
        puzzle = cls(
            horizontal=[Gap.NEXT] * (n + 1),
            vertical=[Gap.NEXT] * (n + 1),
            permutation=list(range(n)),
            start_index=0,
        )
        puzzle._reset_gaps(allow_same_gap)
        return puzzle

    def _gap_slots(self):
        # least significant first: horizontal gaps, then vertical
        for gaps in (self.horizontal, self.vertical):
            for i in range(len(gaps)):
                yield gaps, i, i == 0 or i == len(gaps) - 1

    @staticmethod
    def _lowest(outer: bool, allow_same_gap: bool) -> Gap:
        return Gap.SAME if allow_same_gap and not outer else Gap.NEXT

    def _reset_gaps(self, allow_same_gap: bool) -> None:
        for gaps, i, outer in self._gap_slots():
            gaps[i] = self._lowest(outer, allow_same_gap)

    def _advance_gaps(self, allow_same_gap: bool) -> bool:
        for gaps, i, outer in self._gap_slots():
            if gaps[i] < Gap.SKIP:
                gaps[i] = Gap(gaps[i] + 1)
                return True
            gaps[i] = self._lowest(outer, allow_same_gap)
        return False

    def advance(self, allow_same_gap: bool = True) -> bool:
        """
        Step to the next canonical encoding.

        The start index varies fastest, then the permutation, then the gaps
        as a mixed-radix counter.

        Returns:
            False once every gap position has wrapped around
        """
        limit = min(self.canonical_limit, self.object_count - 1)
        if self.start_index < limit:
            self.start_index += 1
            return True
        self.start_index = 0

        if next_permutation(self.permutation) and self.permutation[0] <= self.canonical_limit:
            return True
        # every later permutation starts above the limit too
        self.permutation = list(range(self.object_count))

        return self._advance_gaps(allow_same_gap)

    def is_canonical(self) -> bool:
        n = self.object_count
        return (
            len(self.horizontal) == n + 1
            and len(self.vertical) == n + 1
            and sorted(self.permutation) == list(range(n))
            and self.permutation[0] <= self.canonical_limit
            and 0 <= self.start_index <= self.canonical_limit
            and Gap.SAME not in (self.horizontal[0], self.horizontal[-1],
                                 self.vertical[0], self.vertical[-1])
        )

    def to_grid(
        self,
        config: Optional[GridConfig] = None,
        max_width: Optional[int] = None,
        max_height: Optional[int] = None
    ) -> Optional[Grid]:
        """
        Decode into a concrete grid.

        Returns:
            The grid, or None when the width or height is zero or too large,
            or when two objects land on the same cell
        """
        config = config or DEFAULT_CONFIG
        max_width = min(max_width or config.max_width, config.max_width)
        max_height = min(max_height or config.max_height, config.max_height)

        xs = axis_positions(self.horizontal)
        ys = axis_positions(self.vertical)
        width, height = xs[-1], ys[-1]
        if not 0 < width <= max_width or xs[0] < 0:
            return None
        if not 0 < height <= max_height or ys[0] < 0:
            return None

        grid = Grid(width, height, config)
        seen = set()
        for i in range(self.object_count):
            coord = grid.coord(xs[i], ys[self.permutation[i]])
            if coord in seen:
                return None
            seen.add(coord)
            if i != self.start_index:
                grid.cells[ys[self.permutation[i]], xs[i]] = True
        grid.start = grid.coord(xs[self.start_index], ys[self.permutation[self.start_index]])
        return grid
