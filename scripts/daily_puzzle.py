"""Print the daily challenge (or a seeded puzzle) as text."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from sudoku_backend.engine.grid import Grid
from sudoku_backend.engine.puzzle import Puzzle, daily_puzzle, new_puzzle

LOGGER = logging.getLogger("daily_puzzle")


def format_grid(grid: Grid, blank: str = ".") -> str:
    """Render a grid with box separators."""
    lines = []
    for r, row in enumerate(grid):
        if r and r % 3 == 0:
            lines.append("------+-------+------")
        chunks = []
        for start in range(0, 9, 3):
            chunks.append(
                " ".join(str(v) if v else blank for v in row[start : start + 3])
            )
        lines.append(" | ".join(chunks))
    return "\n".join(lines)


def puzzle_to_dict(puzzle: Puzzle) -> dict:
    return {
        "difficulty": puzzle.difficulty.value,
        "seed": puzzle.seed,
        "daily": puzzle.daily,
        "cells_removed": puzzle.cells_removed,
        "puzzle": puzzle.original,
        "solution": puzzle.solution,
    }


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        force=True,
    )


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Print a daily or seeded Sudoku puzzle")
    parser.add_argument("--date", default=None, help="ISO date (default: UTC today)")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Use an explicit 32-bit seed instead of the date",
    )
    parser.add_argument(
        "--difficulty",
        choices=["easy", "medium", "hard"],
        default=None,
        help="Difficulty tier (daily default is derived from the date)",
    )
    parser.add_argument("--solution", action="store_true", help="Also print the solution")
    parser.add_argument("--json", action="store_true", help="Emit JSON instead of text")
    parser.add_argument("--debug", action="store_true")
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    _configure_logging(args.debug)

    if args.seed is not None:
        puzzle = new_puzzle(args.difficulty or "medium", seed=args.seed)
    else:
        puzzle = daily_puzzle(args.date, args.difficulty)

    if args.json:
        print(json.dumps(puzzle_to_dict(puzzle)))
        return 0

    print(
        f"difficulty={puzzle.difficulty.value} seed={puzzle.seed} "
        f"givens={81 - puzzle.cells_removed}"
    )
    print(format_grid(puzzle.original))
    if args.solution:
        print()
        print(format_grid(puzzle.solution))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
