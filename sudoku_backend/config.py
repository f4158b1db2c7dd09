"""Environment-driven settings for the puzzle service."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import TypeVar

from .engine.backtracking import DEFAULT_MAX_STEPS

_LOGGER = logging.getLogger(__name__)

DEFAULT_MAX_UNIQUENESS_STEPS = 200_000

_T = TypeVar("_T", int, float, str)


def _env(name: str, default: _T) -> _T:
    """Read an environment variable, converting to the same type as *default*."""
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return type(default)(raw)
    except (TypeError, ValueError):
        _LOGGER.warning("Invalid %s=%r, using default %r", name, raw, default)
        return default


@dataclass
class EngineSettings:
    max_generation_steps: int = DEFAULT_MAX_STEPS
    max_uniqueness_steps: int = DEFAULT_MAX_UNIQUENESS_STEPS
    default_difficulty: str = "medium"
    max_sessions: int = 1000
    cors_origins: list[str] = field(default_factory=lambda: ["*"])


def load_settings() -> EngineSettings:
    origins = _env("SUDOKU_CORS_ORIGINS", "*")
    return EngineSettings(
        max_generation_steps=max(1, _env("SUDOKU_MAX_GENERATION_STEPS", DEFAULT_MAX_STEPS)),
        max_uniqueness_steps=max(
            1, _env("SUDOKU_MAX_UNIQUENESS_STEPS", DEFAULT_MAX_UNIQUENESS_STEPS)
        ),
        default_difficulty=_env("SUDOKU_DEFAULT_DIFFICULTY", "medium").strip().lower(),
        max_sessions=max(1, _env("SUDOKU_MAX_SESSIONS", 1000)),
        cors_origins=[o.strip() for o in origins.split(",") if o.strip()] or ["*"],
    )
