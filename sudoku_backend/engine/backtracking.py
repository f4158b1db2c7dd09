"""Backtracking search: random solution generation and puzzle solving."""

from __future__ import annotations

import logging
from typing import Optional

from .errors import GenerationError
from .grid import DIGITS, SIZE, Cell, Grid, check_grid, clone_grid, empty_grid
from .rng import RandomSource, shuffled
from .validator import is_consistent_grid, is_valid_placement

_LOGGER = logging.getLogger(__name__)

DEFAULT_MAX_STEPS = 2_000_000


class SudokuSolver:
    """Fills Sudoku grids by depth-first backtracking in row-major order."""

    def __init__(self, max_steps: Optional[int] = None):
        self.max_steps = DEFAULT_MAX_STEPS if max_steps is None else max(1, int(max_steps))
        self.solutions_count = 0
        self.steps = 0

    def generate(self, rng: RandomSource) -> Grid:
        """
        Fill a blank grid into a complete, valid solution.

        Candidates for each cell are tried in an order permuted by *rng*, so
        the same seeded source always yields the same solution.

        Raises:
            GenerationError: if the search exceeds ``max_steps`` placements
        """
        self.steps = 0
        grid = empty_grid()
        if not self._fill_random(grid, rng):
            raise GenerationError("Backtracking exhausted a blank grid")
        _LOGGER.debug("Generated solution in %d placement attempts", self.steps)
        return grid

    def _fill_random(self, grid: Grid, rng: RandomSource) -> bool:
        empty = self._find_empty_cell(grid)
        if not empty:
            return True

        row, col = empty

        for num in shuffled(rng, DIGITS):
            if is_valid_placement(grid, row, col, num):
                self._count_step()
                grid[row][col] = num

                if self._fill_random(grid, rng):
                    return True

                grid[row][col] = 0

        return False

    def _count_step(self) -> None:
        self.steps += 1
        if self.steps > self.max_steps:
            raise GenerationError(
                f"Solution search exceeded {self.max_steps} placement attempts"
            )

    def solve(self, grid: Grid) -> Optional[Grid]:
        """
        Solve a Sudoku puzzle.

        Args:
            grid: 9x9 list of lists with 0 for empty cells

        Returns:
            Solved 9x9 grid if solution exists, None otherwise
        """
        check_grid(grid)
        self.steps = 0
        grid_copy = clone_grid(grid)
        if not is_consistent_grid(grid_copy):
            return None
        if self._solve_recursive(grid_copy):
            return grid_copy
        return None

    def _solve_recursive(self, grid: Grid) -> bool:
        empty = self._find_empty_cell(grid)
        if not empty:
            return True

        row, col = empty

        for num in DIGITS:
            if is_valid_placement(grid, row, col, num):
                self._count_step()
                grid[row][col] = num

                if self._solve_recursive(grid):
                    return True

                grid[row][col] = 0

        return False

    def _find_empty_cell(self, grid: Grid) -> Optional[Cell]:
        for r in range(SIZE):
            for c in range(SIZE):
                if grid[r][c] == 0:
                    return (r, c)
        return None

    def count_solutions(self, grid: Grid, max_count: int = 2) -> int:
        """
        Count number of solutions (up to max_count).

        Args:
            grid: 9x9 grid to solve
            max_count: Stop counting after finding this many solutions

        Returns:
            Number of solutions found
        """
        check_grid(grid)
        self.solutions_count = 0
        self.steps = 0
        grid_copy = clone_grid(grid)
        if not is_consistent_grid(grid_copy):
            return 0
        self._count_solutions_recursive(grid_copy, max_count)
        return self.solutions_count

    def _count_solutions_recursive(self, grid: Grid, max_count: int) -> None:
        if self.solutions_count >= max_count:
            return

        empty = self._find_empty_cell(grid)
        if not empty:
            self.solutions_count += 1
            return

        row, col = empty

        for num in DIGITS:
            if is_valid_placement(grid, row, col, num):
                self._count_step()
                grid[row][col] = num
                self._count_solutions_recursive(grid, max_count)
                grid[row][col] = 0


def generate_solution(rng: RandomSource, max_steps: Optional[int] = None) -> Grid:
    """Convenience function to generate a complete solution grid."""
    return SudokuSolver(max_steps=max_steps).generate(rng)


def solve(grid: Grid) -> Optional[Grid]:
    """Convenience function to solve a Sudoku grid."""
    solver = SudokuSolver()
    return solver.solve(grid)


def has_unique_solution(grid: Grid) -> bool:
    return SudokuSolver().count_solutions(grid, max_count=2) == 1
