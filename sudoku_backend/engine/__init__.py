"""Puzzle engine exports."""

from .backtracking import SudokuSolver, generate_solution, has_unique_solution, solve
from .carver import CarveResult, carve
from .errors import GenerationError, PreconditionError, SudokuError
from .grid import CELLS_TO_REMOVE, Difficulty, Grid, parse_difficulty
from .hints import Hint, select_hint
from .puzzle import Puzzle, daily_puzzle, new_puzzle
from .rng import (
    Mulberry32,
    SystemRandomSource,
    daily_seed,
    make_rng,
    seed_from_date_string,
)
from .validator import (
    completed_digits,
    find_conflicts,
    is_cell_conflicting,
    is_digit_fully_and_validly_placed,
    is_grid_complete,
    is_valid_grid,
    is_valid_placement,
)

__all__ = [
    "CELLS_TO_REMOVE",
    "CarveResult",
    "Difficulty",
    "GenerationError",
    "Grid",
    "Hint",
    "Mulberry32",
    "PreconditionError",
    "Puzzle",
    "SudokuError",
    "SudokuSolver",
    "SystemRandomSource",
    "carve",
    "completed_digits",
    "daily_puzzle",
    "daily_seed",
    "find_conflicts",
    "generate_solution",
    "has_unique_solution",
    "is_cell_conflicting",
    "is_digit_fully_and_validly_placed",
    "is_grid_complete",
    "is_valid_grid",
    "is_valid_placement",
    "make_rng",
    "new_puzzle",
    "parse_difficulty",
    "seed_from_date_string",
    "select_hint",
    "solve",
]
