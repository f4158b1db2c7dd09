"""Tests for hint selection."""

import pytest

from sudoku_backend.engine.backtracking import generate_solution
from sudoku_backend.engine.carver import carve
from sudoku_backend.engine.errors import PreconditionError
from sudoku_backend.engine.hints import Hint, select_hint
from sudoku_backend.engine.rng import Mulberry32


class FixedSource:
    def __init__(self, value):
        self.value = value

    def next(self):
        return self.value


@pytest.fixture
def puzzle():
    rng = Mulberry32.from_seed(77)
    solution = generate_solution(rng)
    return solution, carve(solution, "hard", rng).original


def test_hint_targets_empty_cell_with_solution_value(puzzle):
    solution, grid = puzzle
    rng = Mulberry32.from_seed(3)

    for _ in range(20):
        hint = select_hint(grid, solution, rng)
        assert isinstance(hint, Hint)
        assert grid[hint.row][hint.col] == 0
        assert hint.value == solution[hint.row][hint.col]


def test_hint_does_not_mutate_grids(puzzle):
    solution, grid = puzzle
    before = ([row[:] for row in solution], [row[:] for row in grid])

    select_hint(grid, solution, Mulberry32.from_seed(1))

    assert (solution, grid) == before


def test_hint_full_board_returns_none(puzzle):
    solution, _ = puzzle

    assert select_hint(solution, solution, Mulberry32.from_seed(1)) is None


def test_hint_full_but_wrong_board_returns_none(puzzle):
    solution, _ = puzzle
    grid = [row[:] for row in solution]
    grid[0][0], grid[0][1] = grid[0][1], grid[0][0]

    assert select_hint(grid, solution, Mulberry32.from_seed(1)) is None


def test_hint_picks_by_row_major_index(puzzle):
    solution, _ = puzzle
    grid = [row[:] for row in solution]
    grid[2][3] = 0
    grid[6][1] = 0

    assert select_hint(grid, solution, FixedSource(0.0)) == Hint(2, 3, solution[2][3])
    assert select_hint(grid, solution, FixedSource(0.99)) == Hint(6, 1, solution[6][1])


def test_hint_with_incomplete_solution_raises():
    grid = [[0] * 9 for _ in range(9)]

    with pytest.raises(PreconditionError):
        select_hint(grid, grid, FixedSource(0.0))
