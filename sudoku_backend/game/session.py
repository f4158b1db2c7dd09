"""Play sessions: a puzzle plus the player's working grid."""

from __future__ import annotations

import logging
import threading
import uuid
from collections import OrderedDict
from typing import List, Optional

from ..engine.grid import SIZE, Cell, Grid, check_cell, clone_grid
from ..engine.errors import PreconditionError
from ..engine.hints import Hint, select_hint
from ..engine.puzzle import Puzzle
from ..engine.rng import RandomSource, make_rng
from ..engine.validator import (
    completed_digits,
    find_conflicts,
    is_cell_conflicting,
    is_grid_complete,
)

_LOGGER = logging.getLogger(__name__)


class GameSession:
    """Owns the mutable player grid for one puzzle.

    The session's random source is used for hints only and must not be shared
    with other sessions.
    """

    def __init__(self, puzzle: Puzzle, rng: Optional[RandomSource] = None):
        self.puzzle = puzzle
        self.rng = rng if rng is not None else make_rng()
        self.grid = puzzle.player_grid()
        self.hints_used = 0
        self.used_solve = False

    @property
    def solution(self) -> Grid:
        return self.puzzle.solution

    @property
    def original(self) -> Grid:
        return self.puzzle.original

    def is_given(self, row: int, col: int) -> bool:
        check_cell(row, col)
        return self.original[row][col] != 0

    def place(self, row: int, col: int, value: int) -> bool:
        """Write *value* (0 clears) into an editable cell.

        Returns whether the cell now conflicts with a peer.
        """
        check_cell(row, col)
        if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 9:
            raise PreconditionError(f"Value must be an integer in 0..9, got {value!r}")
        if self.is_given(row, col):
            raise PreconditionError(f"Cell ({row}, {col}) is a given clue")

        self.grid[row][col] = value
        return is_cell_conflicting(self.grid, row, col)

    def clear(self, row: int, col: int) -> None:
        self.place(row, col, 0)

    def hint(self) -> Optional[Hint]:
        """Reveal one empty cell, or return None if there is none left."""
        hint = select_hint(self.grid, self.solution, self.rng)
        if hint is None:
            return None

        self.grid[hint.row][hint.col] = hint.value
        self.hints_used += 1
        return hint

    def reset(self) -> None:
        self.grid = clone_grid(self.original)

    def solve(self) -> None:
        self.grid = clone_grid(self.solution)
        self.used_solve = True

    def has_user_progress(self) -> bool:
        """True if the player has entered any digit in an editable cell."""
        return any(
            self.grid[r][c] != 0 and self.grid[r][c] != self.original[r][c]
            for r in range(SIZE)
            for c in range(SIZE)
        )

    def is_complete(self) -> bool:
        return is_grid_complete(self.grid)

    def conflicts(self) -> List[Cell]:
        return find_conflicts(self.grid)

    def completed_digits(self) -> List[int]:
        return completed_digits(self.grid)


class SessionStore:
    """In-memory sessions keyed by id, evicting the oldest beyond capacity."""

    def __init__(self, max_sessions: int = 1000):
        self.max_sessions = max(1, max_sessions)
        self._sessions: OrderedDict[str, GameSession] = OrderedDict()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._sessions)

    def add(self, session: GameSession) -> str:
        session_id = uuid.uuid4().hex
        with self._lock:
            self._sessions[session_id] = session
            while len(self._sessions) > self.max_sessions:
                evicted, _ = self._sessions.popitem(last=False)
                _LOGGER.info("Evicted game session %s", evicted)
        return session_id

    def get(self, session_id: str) -> Optional[GameSession]:
        with self._lock:
            return self._sessions.get(session_id)

    def clear(self) -> None:
        with self._lock:
            self._sessions.clear()
