"""
Search for hard ice sliding puzzles over a range of obstacle counts.

Prints the best grid found for each obstacle count, its pass distances and
the number of moves it needs.
"""
import argparse
import logging
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from ice_puzzle.core.grid import GridConfig
from ice_puzzle.core.solver import SlideSolver
from ice_puzzle.search.arena import Arena
from ice_puzzle.search.strategies import STRATEGIES


def print_result(result, solver):
    score, maps = solver.solve(result.grid)
    print("=" * 40)
    print(result.grid)
    print()
    print(maps.to_text(result.grid))
    print(f"With {result.obstacle_count} obstacles: {score} steps "
          f"({result.candidates_evaluated} candidates, {result.elapsed_ms:.0f} ms)")


def main():
    parser = argparse.ArgumentParser(
        description="Ice sliding puzzle maker - finds puzzles needing the most moves"
    )
    parser.add_argument("--width", "-W", type=int, default=7)
    parser.add_argument("--height", "-H", type=int, default=6)
    parser.add_argument("--min-obstacles", type=int, default=3)
    parser.add_argument("--max-obstacles", type=int, default=5)
    parser.add_argument(
        "--strategy", "-s",
        default="greedy",
        choices=sorted(STRATEGIES),
        help="Search strategy (default: greedy)"
    )
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument(
        "--runs",
        type=int,
        default=None,
        help="Random restarts for greedy / annealing"
    )
    parser.add_argument(
        "--no-edge-walls",
        action="store_true",
        help="The grid border does not stop a sliding token"
    )
    parser.add_argument("--verbose", "-v", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    config = GridConfig(edges_are_walls=not args.no_edge_walls)
    arena = Arena(seed=args.seed, config=config)
    solver = SlideSolver(config)

    kwargs = {}
    if args.runs is not None and args.strategy in ("greedy", "annealing"):
        kwargs["runs"] = args.runs

    arena.sweep(
        args.strategy,
        args.width,
        args.height,
        args.min_obstacles,
        args.max_obstacles,
        callback=lambda result: print_result(result, solver),
        **kwargs
    )


if __name__ == "__main__":
    main()
