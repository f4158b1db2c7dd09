"""Benchmark puzzle generation latency per difficulty."""

from __future__ import annotations

import argparse
import time
from pathlib import Path
import sys

import numpy as np

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from sudoku_backend.engine.backtracking import SudokuSolver
from sudoku_backend.engine.carver import carve
from sudoku_backend.engine.errors import GenerationError
from sudoku_backend.engine.rng import Mulberry32


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Benchmark Sudoku puzzle generation")
    parser.add_argument(
        "--difficulties",
        nargs="+",
        default=["easy", "medium", "hard"],
        help="Difficulty tiers to benchmark",
    )
    parser.add_argument(
        "--rounds",
        type=int,
        default=50,
        help="Number of puzzles generated per difficulty",
    )
    parser.add_argument(
        "--first-seed",
        type=int,
        default=1,
        help="Seed of the first round; later rounds use consecutive seeds",
    )
    parser.add_argument(
        "--check-uniqueness",
        action="store_true",
        help="Also count how many carved puzzles have a unique solution",
    )
    return parser.parse_args()


def summarize_timings(samples_ms: list[float]) -> dict[str, float]:
    """Mean and percentiles of a list of latencies in milliseconds."""
    values = np.asarray(samples_ms, dtype=np.float64)
    if values.size == 0:
        return {"mean": 0.0, "p50": 0.0, "p95": 0.0, "max": 0.0}
    return {
        "mean": float(values.mean()),
        "p50": float(np.percentile(values, 50)),
        "p95": float(np.percentile(values, 95)),
        "max": float(values.max()),
    }


def run_benchmark(difficulty: str, rounds: int, first_seed: int, check_uniqueness: bool):
    timings: list[float] = []
    steps: list[int] = []
    unique_count = 0
    undecided = 0

    for seed in range(first_seed, first_seed + rounds):
        rng = Mulberry32.from_seed(seed)
        solver = SudokuSolver()

        start = time.perf_counter()
        solution = solver.generate(rng)
        carved = carve(solution, difficulty, rng)
        timings.append((time.perf_counter() - start) * 1000.0)
        steps.append(solver.steps)

        if check_uniqueness:
            try:
                if SudokuSolver().count_solutions(carved.original) == 1:
                    unique_count += 1
            except GenerationError:
                undecided += 1

    return summarize_timings(timings), steps, unique_count, undecided


def main() -> int:
    args = parse_args()

    print("Generation benchmark results")
    print(f"rounds={args.rounds} first_seed={args.first_seed}")
    for difficulty in args.difficulties:
        stats, steps, unique_count, undecided = run_benchmark(
            difficulty, args.rounds, args.first_seed, args.check_uniqueness
        )
        line = (
            f"{difficulty}: mean={stats['mean']:.2f}ms p50={stats['p50']:.2f}ms "
            f"p95={stats['p95']:.2f}ms max={stats['max']:.2f}ms "
            f"max_steps={max(steps)}"
        )
        if args.check_uniqueness:
            line += f" unique={unique_count}/{args.rounds} undecided={undecided}"
        print(line)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
