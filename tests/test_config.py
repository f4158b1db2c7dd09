"""Tests for environment-driven settings."""

from sudoku_backend.config import DEFAULT_MAX_UNIQUENESS_STEPS, load_settings
from sudoku_backend.engine.backtracking import DEFAULT_MAX_STEPS


def test_defaults(monkeypatch):
    for name in (
        "SUDOKU_MAX_GENERATION_STEPS",
        "SUDOKU_MAX_UNIQUENESS_STEPS",
        "SUDOKU_DEFAULT_DIFFICULTY",
        "SUDOKU_MAX_SESSIONS",
        "SUDOKU_CORS_ORIGINS",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = load_settings()

    assert settings.max_generation_steps == DEFAULT_MAX_STEPS
    assert settings.max_uniqueness_steps == DEFAULT_MAX_UNIQUENESS_STEPS
    assert settings.default_difficulty == "medium"
    assert settings.max_sessions == 1000
    assert settings.cors_origins == ["*"]


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("SUDOKU_MAX_GENERATION_STEPS", "5000")
    monkeypatch.setenv("SUDOKU_MAX_UNIQUENESS_STEPS", "750")
    monkeypatch.setenv("SUDOKU_DEFAULT_DIFFICULTY", " Hard ")
    monkeypatch.setenv("SUDOKU_MAX_SESSIONS", "3")
    monkeypatch.setenv("SUDOKU_CORS_ORIGINS", "http://a.test, http://b.test")

    settings = load_settings()

    assert settings.max_generation_steps == 5000
    assert settings.max_uniqueness_steps == 750
    assert settings.default_difficulty == "hard"
    assert settings.max_sessions == 3
    assert settings.cors_origins == ["http://a.test", "http://b.test"]


def test_invalid_number_falls_back(monkeypatch, caplog):
    monkeypatch.setenv("SUDOKU_MAX_GENERATION_STEPS", "lots")
    monkeypatch.setenv("SUDOKU_MAX_SESSIONS", "0")

    settings = load_settings()

    assert settings.max_generation_steps == DEFAULT_MAX_STEPS
    assert settings.max_sessions == 1
    assert "SUDOKU_MAX_GENERATION_STEPS" in caplog.text
