"""
Micro-benchmark script comparing the resolver entry points.

Times full resolution, counting and first-page retrieval on a 5x5 puzzle
built from catalog pieces.

NOTE: Timings depend on system load and Python version; this is a
development tool only and should not be used as a test assertion.

Usage:
    python benchmarks/benchmark_resolver.py
    # or
    python -m benchmarks.benchmark_resolver
"""

import os
import sys
import time

# Add parent directory to path to allow imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from tiling.catalog import PieceName
from tiling.puzzle import Puzzle
from tiling.resolver import GameResolver


def benchmark_game() -> Puzzle:
    names = [
        PieceName.RED_SQUARE_1,
        PieceName.BROWN_L_3,
        PieceName.ORANGE_BAR_3,
        PieceName.PINK_BAR_4,
        PieceName.YELLOW_ZIGZAG_4,
        PieceName.PINK_NOT_SQUARE_5,
        PieceName.YELLOW_U_5,
    ]
    return Puzzle(5, tuple(name.piece() for name in names))


def time_call(func, num_runs: int):
    """
    Run a callable several times.

    Returns:
        Tuple of (average_time_ms, result of the last run)
    """
    times = []
    result = None
    for _ in range(num_runs):
        start = time.perf_counter()
        result = func()
        times.append((time.perf_counter() - start) * 1000.0)
    return sum(times) / len(times), result


def main():
    """Run the benchmark and print results."""
    print("=" * 80)
    print("Resolver Performance Benchmark")
    print("=" * 80)

    puzzle = benchmark_game()
    resolver = GameResolver()
    num_runs = 3

    solve_ms, solutions = time_call(lambda: resolver.solve(puzzle), num_runs)
    count_ms, count = time_call(lambda: resolver.solve_count(puzzle), num_runs)
    page_ms, page = time_call(lambda: resolver.solve_page(puzzle, 0, 10), num_runs)

    print(f"Board: {puzzle.rows}x{puzzle.columns}, pieces: {len(puzzle.pieces)}")
    print(f"{'solve':<20} {solve_ms:>10.2f}ms  {len(solutions)} solutions")
    print(f"{'solve_count':<20} {count_ms:>10.2f}ms  {count} solutions")
    print(f"{'solve_page(0, 10)':<20} {page_ms:>10.2f}ms  {len(page)} solutions")


if __name__ == "__main__":
    main()
