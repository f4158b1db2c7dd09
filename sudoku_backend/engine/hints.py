"""Reveal one correct cell of the player's grid."""

from __future__ import annotations

from typing import NamedTuple, Optional

from .errors import PreconditionError
from .grid import SIZE, Grid, check_grid
from .rng import RandomSource, randbelow


class Hint(NamedTuple):
    row: int
    col: int
    value: int


def select_hint(player_grid: Grid, solution: Grid, rng: RandomSource) -> Optional[Hint]:
    """Pick a random empty cell and return its solution value.

    Returns None when the player grid has no empty cell. Neither grid is
    modified; writing the value back is up to the caller.
    """
    check_grid(player_grid)
    check_grid(solution)

    empty_cells = [
        (r, c) for r in range(SIZE) for c in range(SIZE) if player_grid[r][c] == 0
    ]
    if not empty_cells:
        return None

    row, col = empty_cells[randbelow(rng, len(empty_cells))]
    value = solution[row][col]
    if value == 0:
        raise PreconditionError(f"Solution grid has no value at ({row}, {col})")
    return Hint(row=row, col=col, value=value)
