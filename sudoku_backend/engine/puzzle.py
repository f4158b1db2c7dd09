"""Build complete puzzles: solution plus carved clue grid."""

from __future__ import annotations

import datetime as dt
import logging
from dataclasses import dataclass
from typing import Optional

from .backtracking import SudokuSolver
from .carver import carve
from .errors import GenerationError
from .grid import Difficulty, Grid, clone_grid, parse_difficulty
from .rng import RandomSource, make_rng, seed_from_date_string

_LOGGER = logging.getLogger(__name__)

_DAILY_TIERS = (Difficulty.EASY, Difficulty.MEDIUM, Difficulty.HARD)


@dataclass
class Puzzle:
    solution: Grid
    original: Grid
    difficulty: Difficulty
    cells_removed: int
    seed: Optional[int] = None
    daily: bool = False
    unique: Optional[bool] = None

    def player_grid(self) -> Grid:
        """Fresh working copy of the clue grid."""
        return clone_grid(self.original)


def new_puzzle(
    difficulty: Difficulty | str,
    seed: Optional[int] = None,
    rng: Optional[RandomSource] = None,
    *,
    max_steps: Optional[int] = None,
    check_uniqueness: bool = False,
    uniqueness_max_steps: Optional[int] = None,
) -> Puzzle:
    """
    Generate a solution and carve it with the same random stream.

    Args:
        difficulty: tier name or ``Difficulty``
        seed: 32-bit seed for a reproducible puzzle; ignored when *rng* is given
        rng: random source to consume (defaults to ``make_rng(seed)``)
        max_steps: placement budget for the generator
        check_uniqueness: also count completions of the carved grid and report
            whether it is unique (the puzzle is returned either way)
        uniqueness_max_steps: placement budget for that count; when it runs
            out ``unique`` is left as None
    """
    tier = parse_difficulty(difficulty)
    if rng is None:
        rng = make_rng(seed)

    solution = SudokuSolver(max_steps=max_steps).generate(rng)
    carved = carve(solution, tier, rng)

    unique = None
    if check_uniqueness:
        counter = SudokuSolver(max_steps=uniqueness_max_steps)
        try:
            unique = counter.count_solutions(carved.original, max_count=2) == 1
        except GenerationError as e:
            _LOGGER.warning("Uniqueness check abandoned: %s", e)

    _LOGGER.info(
        "New %s puzzle (seed=%s, removed=%d)", tier.value, seed, carved.cells_removed
    )
    return Puzzle(
        solution=solution,
        original=carved.original,
        difficulty=tier,
        cells_removed=carved.cells_removed,
        seed=seed,
        unique=unique,
    )


def daily_difficulty(seed: int) -> Difficulty:
    return _DAILY_TIERS[seed % len(_DAILY_TIERS)]


def daily_puzzle(
    date_string: Optional[str] = None,
    difficulty: Difficulty | str | None = None,
    *,
    max_steps: Optional[int] = None,
) -> Puzzle:
    """The daily challenge for *date_string* (ISO date, UTC today by default).

    Without an explicit difficulty the tier is derived from the seed, so every
    player gets the same puzzle for a given day.
    """
    if date_string is None:
        date_string = dt.datetime.now(dt.timezone.utc).date().isoformat()
    seed = seed_from_date_string(date_string)
    tier = daily_difficulty(seed) if difficulty is None else parse_difficulty(difficulty)

    puzzle = new_puzzle(tier, seed=seed, max_steps=max_steps)
    puzzle.daily = True
    return puzzle
