"""
Benchmark the heuristic strategies against the exact optimum on one problem.
"""
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from ice_puzzle.search.arena import Arena


def benchmark(width=5, height=5, obstacle_count=2, repeats=5):
    """Run every strategy on the same problem and print a table."""
    print(f"Benchmarking on {width}x{height} with {obstacle_count} obstacles, "
          f"{repeats} repeats each...\n")

    arena = Arena(seed=0)
    arena.compare(["greedy", "annealing"], width, height, obstacle_count, repeats=repeats)
    arena.run("brute_force", width, height, obstacle_count)
    arena.run("relative", width, height, obstacle_count)

    print(f"{'Strategy':<14} {'Best':>6} {'Mean':>8} {'Std':>6} {'Runs':>6} {'Avg ms':>10}")
    print("=" * 56)

    for row in arena.leaderboard():
        print(f"{row['strategy_id']:<14} {row['best_score']:>6} {row['avg_score']:>8.2f} "
              f"{row['score_std']:>6.2f} {row['runs']:>6} {row['avg_ms']:>10.0f}")


if __name__ == "__main__":
    benchmark()
