"""Row, column and box constraint checks over a grid snapshot.

All functions are pure: they never mutate the grid and hold no state, so
repeated calls on an unchanged grid give the same answer.
"""

from __future__ import annotations

from typing import List

from .grid import (
    BOX,
    DIGITS,
    SIZE,
    Cell,
    Grid,
    box_origin,
    check_cell,
    check_digit,
    check_grid,
)

_FULL_HOUSE = frozenset(DIGITS)


def is_valid_placement(grid: Grid, row: int, col: int, num: int) -> bool:
    """
    Check if placing num at (row, col) is valid.

    The target cell is included in the scan, so it should be empty when
    this is used during search.

    Args:
        grid: Current grid state
        row: Row index
        col: Column index
        num: Number to place (1-9)

    Returns:
        True if placement is valid, False otherwise
    """
    # Check row
    if num in grid[row]:
        return False

    # Check column
    for r in range(SIZE):
        if grid[r][col] == num:
            return False

    # Check 3x3 box
    box_row, box_col = box_origin(row, col)
    for r in range(box_row, box_row + BOX):
        for c in range(box_col, box_col + BOX):
            if grid[r][c] == num:
                return False

    return True


def _has_duplicate_peer(grid: Grid, row: int, col: int, num: int) -> bool:
    for c in range(SIZE):
        if c != col and grid[row][c] == num:
            return True

    for r in range(SIZE):
        if r != row and grid[r][col] == num:
            return True

    box_row, box_col = box_origin(row, col)
    for r in range(box_row, box_row + BOX):
        for c in range(box_col, box_col + BOX):
            if (r != row or c != col) and grid[r][c] == num:
                return True

    return False


def is_cell_conflicting(grid: Grid, row: int, col: int) -> bool:
    """Return True if the cell's digit repeats in its row, column or box.

    Empty cells never conflict. Both cells of a duplicated pair report a
    conflict; no attempt is made to decide which one is wrong.
    """
    check_grid(grid)
    check_cell(row, col)
    num = grid[row][col]
    if num == 0:
        return False
    return _has_duplicate_peer(grid, row, col, num)


def find_conflicts(grid: Grid) -> List[Cell]:
    """All conflicting cells in row-major order."""
    check_grid(grid)
    return [
        (r, c)
        for r in range(SIZE)
        for c in range(SIZE)
        if grid[r][c] != 0 and _has_duplicate_peer(grid, r, c, grid[r][c])
    ]


def _houses(grid: Grid):
    for r in range(SIZE):
        yield grid[r]
    for c in range(SIZE):
        yield [grid[r][c] for r in range(SIZE)]
    for box_row in range(0, SIZE, BOX):
        for box_col in range(0, SIZE, BOX):
            yield [
                grid[r][c]
                for r in range(box_row, box_row + BOX)
                for c in range(box_col, box_col + BOX)
            ]


def is_grid_complete(grid: Grid) -> bool:
    """True when every row, column and box is a permutation of 1..9."""
    check_grid(grid)
    return all(set(house) == _FULL_HOUSE for house in _houses(grid))


def is_digit_fully_and_validly_placed(grid: Grid, digit: int) -> bool:
    """True when *digit* occurs exactly nine times and none of them conflicts."""
    check_grid(grid)
    check_digit(digit)

    cells = [
        (r, c) for r in range(SIZE) for c in range(SIZE) if grid[r][c] == digit
    ]
    if len(cells) != SIZE:
        return False

    return not any(_has_duplicate_peer(grid, r, c, digit) for r, c in cells)


def completed_digits(grid: Grid) -> List[int]:
    """Digits that can be disabled on the number pad."""
    return [d for d in DIGITS if is_digit_fully_and_validly_placed(grid, d)]


def is_consistent_grid(grid: Grid) -> bool:
    """Check existing non-zero givens are mutually consistent."""
    for r in range(SIZE):
        for c in range(SIZE):
            num = grid[r][c]
            if num != 0 and _has_duplicate_peer(grid, r, c, num):
                return False
    return True


def is_valid_grid(grid: Grid) -> bool:
    """
    Validate that a grid has correct structure and initial values.

    Args:
        grid: 9x9 grid to validate

    Returns:
        True if grid is valid, False otherwise
    """
    try:
        check_grid(grid)
    except ValueError:
        return False
    return is_consistent_grid(grid)
