"""Pydantic models for API requests and responses."""

from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, Field

from ..engine.grid import Difficulty


class SudokuCell(BaseModel):
    """A single Sudoku cell."""

    value: int = Field(ge=0, le=9, description="Cell value (0 for empty)")
    row: int = Field(ge=0, le=8, description="Row index (0-8)")
    col: int = Field(ge=0, le=8, description="Column index (0-8)")


class SudokuGrid(BaseModel):
    """A Sudoku grid."""

    cells: list[list[int]] = Field(description="9x9 grid (0 for empty cells)")

    class Config:
        json_schema_extra = {
            "example": {
                "cells": [
                    [5, 3, 0, 0, 7, 0, 0, 0, 0],
                    [6, 0, 0, 1, 9, 5, 0, 0, 0],
                    [0, 9, 8, 0, 0, 0, 0, 6, 0],
                    [8, 0, 0, 0, 6, 0, 0, 0, 3],
                    [4, 0, 0, 8, 0, 3, 0, 0, 1],
                    [7, 0, 0, 0, 2, 0, 0, 0, 6],
                    [0, 6, 0, 0, 0, 0, 2, 8, 0],
                    [0, 0, 0, 4, 1, 9, 0, 0, 5],
                    [0, 0, 0, 0, 8, 0, 0, 7, 9],
                ]
            }
        }


class SolveRequest(BaseModel):
    """Request to solve a Sudoku grid."""

    grid: SudokuGrid = Field(description="The Sudoku puzzle to solve")


class SolveResponse(BaseModel):
    """Response from solving a Sudoku."""

    success: bool = Field(description="Whether the puzzle was solved")
    original: list[list[int]] = Field(description="Original grid")
    solved: list[list[int]] | None = Field(description="Solved grid (if successful)")
    message: str = Field(description="Status message")


class GenerateRequest(BaseModel):
    """Request a new puzzle."""

    difficulty: Difficulty | None = Field(
        default=None, description="easy, medium or hard (server default if omitted)"
    )
    seed: int | None = Field(
        default=None, ge=0, le=0xFFFFFFFF, description="32-bit seed for a reproducible puzzle"
    )
    check_uniqueness: bool = Field(
        default=False, description="Report whether the carved puzzle has one solution"
    )


class DailyRequest(BaseModel):
    """Request the daily challenge."""

    date: dt.date | None = Field(default=None, description="Calendar day (UTC today if omitted)")
    difficulty: Difficulty | None = Field(
        default=None, description="Override the tier derived from the date"
    )


class PuzzleResponse(BaseModel):
    """A generated puzzle."""

    difficulty: Difficulty = Field(description="Difficulty tier")
    seed: int | None = Field(description="Seed used, if reproducible")
    daily: bool = Field(default=False, description="Whether this is a daily challenge")
    cells_removed: int = Field(description="Number of cells blanked from the solution")
    puzzle: list[list[int]] = Field(description="Clue grid (0 for empty cells)")
    solution: list[list[int]] = Field(description="Complete solution grid")
    unique: bool | None = Field(
        default=None, description="Whether the puzzle has a unique solution, if checked"
    )


class ValidateRequest(BaseModel):
    """Request to validate a player grid."""

    grid: list[list[int]] = Field(description="9x9 grid (0 for empty cells)")


class ValidateResponse(BaseModel):
    """Validation state of a grid."""

    complete: bool = Field(description="Whether the grid is a finished, correct solution")
    conflicts: list[SudokuCell] = Field(description="Cells that duplicate a peer")
    completed_digits: list[int] = Field(
        description="Digits placed nine times without conflict"
    )


class HintRequest(BaseModel):
    """Request a hint for a player grid."""

    grid: list[list[int]] = Field(description="Current player grid")
    solution: list[list[int]] = Field(description="Solution grid of the puzzle")
    seed: int | None = Field(
        default=None, ge=0, le=0xFFFFFFFF, description="Seed for a reproducible choice"
    )


class HintResponse(BaseModel):
    """Hint result; ``hint`` is null when the board has no empty cell."""

    found: bool = Field(description="Whether an empty cell was available")
    hint: SudokuCell | None = Field(default=None, description="Revealed cell")


class NewGameRequest(BaseModel):
    """Start a play session."""

    difficulty: Difficulty | None = Field(default=None, description="Difficulty tier")
    seed: int | None = Field(default=None, ge=0, le=0xFFFFFFFF, description="Puzzle seed")
    daily: bool = Field(default=False, description="Play the daily challenge")
    date: dt.date | None = Field(default=None, description="Day of the daily challenge")


class MoveRequest(BaseModel):
    """Write a value into a cell (0 clears it)."""

    row: int = Field(ge=0, le=8, description="Row index (0-8)")
    col: int = Field(ge=0, le=8, description="Column index (0-8)")
    value: int = Field(ge=0, le=9, description="Digit to place, 0 to clear")


class GameStateResponse(BaseModel):
    """Current state of a play session."""

    game_id: str = Field(description="Session identifier")
    difficulty: Difficulty = Field(description="Difficulty tier")
    daily: bool = Field(description="Whether this is a daily challenge")
    original: list[list[int]] = Field(description="Clue grid")
    grid: list[list[int]] = Field(description="Player grid")
    conflicts: list[SudokuCell] = Field(description="Conflicting cells")
    completed_digits: list[int] = Field(description="Digits fully and validly placed")
    complete: bool = Field(description="Whether the puzzle is finished")
    hints_used: int = Field(description="Hints revealed so far")
    used_solve: bool = Field(description="Whether the solution was revealed")
    has_progress: bool = Field(description="Whether the player entered any digit")


class MoveResponse(BaseModel):
    """Result of a move."""

    conflicting: bool = Field(description="Whether the edited cell conflicts")
    state: GameStateResponse = Field(description="Session state after the move")


class GameHintResponse(BaseModel):
    """Result of a session hint."""

    found: bool = Field(description="Whether an empty cell was available")
    hint: SudokuCell | None = Field(default=None, description="Revealed cell")
    state: GameStateResponse = Field(description="Session state after the hint")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(description="Service status")
    default_difficulty: str = Field(description="Difficulty used when requests omit it")
    max_generation_steps: int = Field(description="Generator placement budget")
    active_sessions: int = Field(description="Number of in-memory game sessions")
