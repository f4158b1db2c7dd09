"""API routes for the Sudoku puzzle service."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException

from ..config import EngineSettings, load_settings
from ..engine.backtracking import SudokuSolver
from ..engine.errors import GenerationError, PreconditionError
from ..engine.grid import Difficulty, parse_difficulty
from ..engine.hints import select_hint
from ..engine.puzzle import Puzzle, daily_puzzle, new_puzzle
from ..engine.rng import make_rng
from ..engine.validator import completed_digits, find_conflicts, is_grid_complete, is_valid_grid
from ..game.session import GameSession, SessionStore
from ..models.schemas import (
    DailyRequest,
    GameHintResponse,
    GameStateResponse,
    GenerateRequest,
    HealthResponse,
    HintRequest,
    HintResponse,
    MoveRequest,
    MoveResponse,
    NewGameRequest,
    PuzzleResponse,
    SolveRequest,
    SolveResponse,
    SudokuCell,
    ValidateRequest,
    ValidateResponse,
)

router = APIRouter()
_SETTINGS: EngineSettings | None = None
_STORE: SessionStore | None = None
_LOGGER = logging.getLogger(__name__)


def _get_settings() -> EngineSettings:
    global _SETTINGS

    if _SETTINGS is None:
        _SETTINGS = load_settings()
    return _SETTINGS


def _get_store() -> SessionStore:
    global _STORE

    if _STORE is None:
        _STORE = SessionStore(max_sessions=_get_settings().max_sessions)
    return _STORE


def _resolve_difficulty(difficulty: Optional[Difficulty]) -> Difficulty:
    if difficulty is not None:
        return difficulty
    return parse_difficulty(_get_settings().default_difficulty)


def _cells(grid: list[list[int]], coords) -> list[SudokuCell]:
    return [SudokuCell(row=r, col=c, value=grid[r][c]) for r, c in coords]


def _puzzle_response(puzzle: Puzzle) -> PuzzleResponse:
    return PuzzleResponse(
        difficulty=puzzle.difficulty,
        seed=puzzle.seed,
        daily=puzzle.daily,
        cells_removed=puzzle.cells_removed,
        puzzle=puzzle.original,
        solution=puzzle.solution,
        unique=puzzle.unique,
    )


def _game_state(game_id: str, session: GameSession) -> GameStateResponse:
    return GameStateResponse(
        game_id=game_id,
        difficulty=session.puzzle.difficulty,
        daily=session.puzzle.daily,
        original=session.original,
        grid=session.grid,
        conflicts=_cells(session.grid, session.conflicts()),
        completed_digits=session.completed_digits(),
        complete=session.is_complete(),
        hints_used=session.hints_used,
        used_solve=session.used_solve,
        has_progress=session.has_user_progress(),
    )


def _require_session(game_id: str) -> GameSession:
    session = _get_store().get(game_id)
    if session is None:
        raise HTTPException(status_code=404, detail=f"Unknown game: {game_id}")
    return session


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    settings = _get_settings()

    return HealthResponse(
        status="healthy",
        default_difficulty=settings.default_difficulty,
        max_generation_steps=settings.max_generation_steps,
        active_sessions=len(_get_store()),
    )


@router.post("/api/v1/sudoku:generate", response_model=PuzzleResponse, tags=["Sudoku"])
async def generate_puzzle(request: GenerateRequest):
    """
    Generate a new puzzle.

    The same seed and difficulty always produce the same solution and clue
    grid. Without a seed the puzzle is random.
    """
    try:
        puzzle = new_puzzle(
            _resolve_difficulty(request.difficulty),
            seed=request.seed,
            max_steps=_get_settings().max_generation_steps,
            check_uniqueness=request.check_uniqueness,
            uniqueness_max_steps=_get_settings().max_uniqueness_steps,
        )
    except PreconditionError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except GenerationError as e:
        _LOGGER.error("Puzzle generation failed: %s", e)
        raise HTTPException(status_code=500, detail=str(e))

    return _puzzle_response(puzzle)


@router.post("/api/v1/sudoku:daily", response_model=PuzzleResponse, tags=["Sudoku"])
async def get_daily_puzzle(request: DailyRequest):
    """Return the daily challenge, identical for every caller on a given day."""
    date_string = request.date.isoformat() if request.date else None
    try:
        puzzle = daily_puzzle(
            date_string,
            request.difficulty,
            max_steps=_get_settings().max_generation_steps,
        )
    except GenerationError as e:
        _LOGGER.error("Daily puzzle generation failed: %s", e)
        raise HTTPException(status_code=500, detail=str(e))

    return _puzzle_response(puzzle)


@router.post("/api/v1/sudoku:validate", response_model=ValidateResponse, tags=["Sudoku"])
async def validate_grid(request: ValidateRequest):
    """Report conflicting cells, completed digits and whether the grid is solved."""
    grid = request.grid
    try:
        conflicts = find_conflicts(grid)
        return ValidateResponse(
            complete=is_grid_complete(grid),
            conflicts=_cells(grid, conflicts),
            completed_digits=completed_digits(grid),
        )
    except PreconditionError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/api/v1/sudoku:hint", response_model=HintResponse, tags=["Sudoku"])
async def get_hint(request: HintRequest):
    """
    Reveal the solution value of one random empty cell.

    ``found`` is false when the grid has no empty cell left.
    """
    try:
        hint = select_hint(request.grid, request.solution, make_rng(request.seed))
    except PreconditionError as e:
        raise HTTPException(status_code=400, detail=str(e))

    if hint is None:
        return HintResponse(found=False, hint=None)
    return HintResponse(
        found=True, hint=SudokuCell(row=hint.row, col=hint.col, value=hint.value)
    )


@router.post("/api/v1/sudoku:solve", response_model=SolveResponse, tags=["Sudoku"])
async def solve_sudoku(request: SolveRequest):
    """
    Solve a Sudoku puzzle from a JSON grid.

    Expected JSON format:
    {
        "grid": {
            "cells": [[row1], [row2], ...]
        }
    }
    Where each row is a list of 9 integers (0 for empty).
    """
    try:
        grid = request.grid.cells

        if not is_valid_grid(grid):
            return SolveResponse(
                success=False,
                original=grid,
                solved=None,
                message="Invalid Sudoku grid format",
            )

        solver = SudokuSolver(max_steps=_get_settings().max_generation_steps)
        try:
            solved = solver.solve(grid)
        except GenerationError as e:
            _LOGGER.warning("Solve abandoned: %s", e)
            return SolveResponse(
                success=False,
                original=grid,
                solved=None,
                message="Search limit reached before a solution was found",
            )

        if solved is None:
            return SolveResponse(
                success=False,
                original=grid,
                solved=None,
                message="Puzzle has no solution",
            )

        return SolveResponse(
            success=True,
            original=grid,
            solved=solved,
            message="Puzzle solved successfully",
        )

    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/api/v1/games", response_model=GameStateResponse, tags=["Games"])
async def start_game(request: NewGameRequest):
    """Start a play session, optionally on the daily challenge."""
    settings = _get_settings()
    try:
        if request.daily:
            date_string = request.date.isoformat() if request.date else None
            puzzle = daily_puzzle(
                date_string, request.difficulty, max_steps=settings.max_generation_steps
            )
        else:
            puzzle = new_puzzle(
                _resolve_difficulty(request.difficulty),
                seed=request.seed,
                max_steps=settings.max_generation_steps,
            )
    except PreconditionError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except GenerationError as e:
        _LOGGER.error("Puzzle generation failed: %s", e)
        raise HTTPException(status_code=500, detail=str(e))

    session = GameSession(puzzle)
    game_id = _get_store().add(session)
    _LOGGER.info("Started game %s (%s)", game_id, puzzle.difficulty.value)
    return _game_state(game_id, session)


@router.get("/api/v1/games/{game_id}", response_model=GameStateResponse, tags=["Games"])
async def get_game(game_id: str):
    """Current state of a play session."""
    return _game_state(game_id, _require_session(game_id))


@router.post("/api/v1/games/{game_id}:move", response_model=MoveResponse, tags=["Games"])
async def make_move(game_id: str, request: MoveRequest):
    """Place or clear a digit in an editable cell."""
    session = _require_session(game_id)
    try:
        conflicting = session.place(request.row, request.col, request.value)
    except PreconditionError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return MoveResponse(conflicting=conflicting, state=_game_state(game_id, session))


@router.post("/api/v1/games/{game_id}:hint", response_model=GameHintResponse, tags=["Games"])
async def use_hint(game_id: str):
    """Reveal one empty cell of the session's grid."""
    session = _require_session(game_id)
    hint = session.hint()
    cell = None
    if hint is not None:
        cell = SudokuCell(row=hint.row, col=hint.col, value=hint.value)
    return GameHintResponse(
        found=hint is not None, hint=cell, state=_game_state(game_id, session)
    )


@router.post("/api/v1/games/{game_id}:reset", response_model=GameStateResponse, tags=["Games"])
async def reset_game(game_id: str):
    """Discard the player's entries and restore the clue grid."""
    session = _require_session(game_id)
    session.reset()
    return _game_state(game_id, session)


@router.post("/api/v1/games/{game_id}:solve", response_model=GameStateResponse, tags=["Games"])
async def solve_game(game_id: str):
    """Fill the session's grid with the solution."""
    session = _require_session(game_id)
    session.solve()
    return _game_state(game_id, session)
