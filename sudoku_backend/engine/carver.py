"""Turn a complete solution into a playable puzzle."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

from .errors import PreconditionError
from .grid import SIZE, Cell, Difficulty, Grid, clone_grid, parse_difficulty
from .rng import RandomSource, randbelow
from .validator import is_grid_complete

_LOGGER = logging.getLogger(__name__)


@dataclass
class CarveResult:
    original: Grid
    cells_removed: int
    removed: List[Cell] = field(default_factory=list)


def carve(solution: Grid, difficulty: Difficulty | str, rng: RandomSource) -> CarveResult:
    """
    Blank out cells of *solution* until the difficulty's removal count is met.

    Coordinates are drawn uniformly with two ``next()`` calls each (row, then
    column); a draw that lands on an already empty cell is discarded. The
    result is not checked for a unique completion.

    Args:
        solution: complete 9x9 grid (left untouched)
        difficulty: tier name or ``Difficulty``
        rng: random source shared with solution generation

    Returns:
        CarveResult with the clue grid and the cleared cells in removal order

    Raises:
        PreconditionError: if *solution* is not a complete, valid grid
    """
    if not is_grid_complete(solution):
        raise PreconditionError("Only a complete, valid solution can be carved")
    tier = parse_difficulty(difficulty)
    target = tier.cells_to_remove

    original = clone_grid(solution)

    removed: List[Cell] = []
    while len(removed) < target:
        row = randbelow(rng, SIZE)
        col = randbelow(rng, SIZE)
        if original[row][col] != 0:
            original[row][col] = 0
            removed.append((row, col))

    _LOGGER.debug("Carved %d cells for %s difficulty", len(removed), tier.value)
    return CarveResult(original=original, cells_removed=len(removed), removed=removed)
