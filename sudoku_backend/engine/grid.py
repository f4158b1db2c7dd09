"""Grid shape, difficulty table and argument checks shared by the engine."""

from __future__ import annotations

from enum import Enum
from typing import List, Tuple

from .errors import PreconditionError

Grid = List[List[int]]
Cell = Tuple[int, int]

SIZE = 9
BOX = 3
DIGITS = tuple(range(1, SIZE + 1))


class Difficulty(str, Enum):
    """Difficulty tiers offered to the player."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def cells_to_remove(self) -> int:
        return CELLS_TO_REMOVE[self]


CELLS_TO_REMOVE = {
    Difficulty.EASY: 40,
    Difficulty.MEDIUM: 50,
    Difficulty.HARD: 60,
}


def parse_difficulty(value: Difficulty | str) -> Difficulty:
    """Coerce a difficulty name into a ``Difficulty``."""
    if isinstance(value, Difficulty):
        return value
    try:
        return Difficulty(str(value).strip().lower())
    except ValueError:
        raise PreconditionError(f"Unknown difficulty: {value!r}") from None


def empty_grid() -> Grid:
    return [[0] * SIZE for _ in range(SIZE)]


def clone_grid(grid: Grid) -> Grid:
    return [row[:] for row in grid]


def box_origin(row: int, col: int) -> Cell:
    return (row // BOX) * BOX, (col // BOX) * BOX


def check_grid(grid: Grid) -> None:
    """Raise ``PreconditionError`` unless *grid* is a 9x9 grid of ints in 0..9."""
    if not isinstance(grid, list) or len(grid) != SIZE:
        raise PreconditionError("Grid must be a list of 9 rows")

    for r, row in enumerate(grid):
        if not isinstance(row, list) or len(row) != SIZE:
            raise PreconditionError(f"Row {r} must be a list of 9 cells")
        for c, cell in enumerate(row):
            if isinstance(cell, bool) or not isinstance(cell, int) or not 0 <= cell <= SIZE:
                raise PreconditionError(
                    f"Cell ({r}, {c}) must be an integer in 0..9, got {cell!r}"
                )


def check_cell(row: int, col: int) -> None:
    if not (0 <= row < SIZE and 0 <= col < SIZE):
        raise PreconditionError(f"Cell ({row}, {col}) is outside the 9x9 grid")


def check_digit(digit: int) -> None:
    if digit not in DIGITS:
        raise PreconditionError(f"Digit must be in 1..9, got {digit!r}")
