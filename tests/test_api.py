"""Tests for the HTTP API."""

import pytest
from fastapi.testclient import TestClient

from sudoku_backend import main
from sudoku_backend.api import routes
from sudoku_backend.config import EngineSettings
from sudoku_backend.engine.puzzle import new_puzzle
from sudoku_backend.engine.rng import seed_from_date_string
from sudoku_backend.engine.validator import is_grid_complete
from sudoku_backend.game.session import SessionStore

SOLVED = [
    [4, 7, 1, 9, 3, 5, 6, 2, 8],
    [5, 8, 6, 7, 2, 4, 3, 9, 1],
    [3, 9, 2, 1, 6, 8, 7, 5, 4],
    [7, 1, 8, 4, 5, 3, 2, 6, 9],
    [6, 3, 9, 8, 7, 2, 1, 4, 5],
    [2, 5, 4, 6, 1, 9, 8, 3, 7],
    [9, 6, 7, 2, 4, 1, 5, 8, 3],
    [1, 4, 5, 3, 8, 6, 9, 7, 2],
    [8, 2, 3, 5, 9, 7, 4, 1, 6],
]


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setattr(routes, "_SETTINGS", EngineSettings())
    monkeypatch.setattr(routes, "_STORE", SessionStore(max_sessions=10))
    with TestClient(main.app) as test_client:
        yield test_client


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["default_difficulty"] == "medium"
    assert body["active_sessions"] == 0


def test_generate_with_seed_is_reproducible(client):
    payload = {"difficulty": "hard", "seed": 1234}

    first = client.post("/api/v1/sudoku:generate", json=payload).json()
    second = client.post("/api/v1/sudoku:generate", json=payload).json()

    assert first["puzzle"] == second["puzzle"]
    assert first["solution"] == second["solution"]
    assert first["cells_removed"] == 60
    assert first["seed"] == 1234
    assert first["unique"] is None


def test_generate_uses_default_difficulty(client):
    body = client.post("/api/v1/sudoku:generate", json={}).json()

    assert body["difficulty"] == "medium"
    assert body["cells_removed"] == 50


def test_generate_rejects_unknown_difficulty(client):
    response = client.post("/api/v1/sudoku:generate", json={"difficulty": "expert"})

    assert response.status_code == 422


def test_generate_rejects_out_of_range_seed(client):
    response = client.post("/api/v1/sudoku:generate", json={"seed": 2**32})

    assert response.status_code == 422


def test_daily_endpoint(client):
    body = client.post(
        "/api/v1/sudoku:daily", json={"date": "2024-01-01", "difficulty": "easy"}
    ).json()

    assert body["daily"] is True
    assert body["seed"] == seed_from_date_string("2024-01-01")
    assert sum(1 for row in body["puzzle"] for v in row if v) == 41


def test_validate_reports_conflicts(client):
    grid = [[0] * 9 for _ in range(9)]
    grid[0][0] = grid[0][4] = 6

    body = client.post("/api/v1/sudoku:validate", json={"grid": grid}).json()

    assert body["complete"] is False
    assert [(c["row"], c["col"]) for c in body["conflicts"]] == [(0, 0), (0, 4)]
    assert body["completed_digits"] == []


def test_validate_complete_grid(client):
    body = client.post("/api/v1/sudoku:validate", json={"grid": SOLVED}).json()

    assert body["complete"] is True
    assert body["conflicts"] == []
    assert body["completed_digits"] == list(range(1, 10))


def test_validate_malformed_grid(client):
    response = client.post("/api/v1/sudoku:validate", json={"grid": [[0] * 9]})

    assert response.status_code == 400


def test_hint_endpoint(client):
    grid = [row[:] for row in SOLVED]
    grid[5][5] = 0

    body = client.post(
        "/api/v1/sudoku:hint", json={"grid": grid, "solution": SOLVED, "seed": 1}
    ).json()

    assert body == {"found": True, "hint": {"row": 5, "col": 5, "value": SOLVED[5][5]}}


def test_hint_endpoint_full_board(client):
    body = client.post(
        "/api/v1/sudoku:hint", json={"grid": SOLVED, "solution": SOLVED}
    ).json()

    assert body == {"found": False, "hint": None}


def test_solve_endpoint(client):
    grid = [row[:] for row in SOLVED]
    for r in range(0, 9, 2):
        grid[r][r] = 0

    body = client.post("/api/v1/sudoku:solve", json={"grid": {"cells": grid}}).json()

    assert body["success"] is True
    assert body["solved"] == SOLVED


def test_solve_endpoint_invalid_grid(client):
    grid = [[0] * 9 for _ in range(9)]
    grid[0][0] = grid[1][1] = 2

    body = client.post("/api/v1/sudoku:solve", json={"grid": {"cells": grid}}).json()

    assert body["success"] is False
    assert body["message"] == "Invalid Sudoku grid format"


def test_solve_endpoint_hard_puzzle_never_errors(client):
    puzzle = new_puzzle("hard", seed=2)

    response = client.post(
        "/api/v1/sudoku:solve", json={"grid": {"cells": puzzle.original}}
    )

    assert response.status_code == 200
    body = response.json()
    if body["success"]:
        solved = body["solved"]
        assert is_grid_complete(solved)
        assert all(
            solved[r][c] == puzzle.original[r][c]
            for r in range(9)
            for c in range(9)
            if puzzle.original[r][c] != 0
        )
    else:
        assert body["message"] == "Search limit reached before a solution was found"


def test_solve_endpoint_reports_search_limit(client, monkeypatch):
    monkeypatch.setattr(routes, "_SETTINGS", EngineSettings(max_generation_steps=10))
    puzzle = new_puzzle("hard", seed=2)

    response = client.post(
        "/api/v1/sudoku:solve", json={"grid": {"cells": puzzle.original}}
    )

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is False
    assert body["solved"] is None
    assert body["message"] == "Search limit reached before a solution was found"


def test_generate_uniqueness_out_of_budget(client, monkeypatch):
    monkeypatch.setattr(routes, "_SETTINGS", EngineSettings(max_uniqueness_steps=1000))
    request = {"difficulty": "hard", "seed": 2}

    plain = client.post("/api/v1/sudoku:generate", json=request).json()
    response = client.post(
        "/api/v1/sudoku:generate", json={**request, "check_uniqueness": True}
    )

    assert response.status_code == 200
    body = response.json()
    assert body["unique"] is None
    assert body["puzzle"] == plain["puzzle"]
    assert body["solution"] == plain["solution"]


def test_root_returns_api_info(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json() == {"message": "Sudoku Puzzle API", "docs": "/docs"}


def test_game_lifecycle(client):
    state = client.post("/api/v1/games", json={"difficulty": "easy", "seed": 3}).json()
    game_id = state["game_id"]
    assert state["hints_used"] == 0
    assert state["has_progress"] is False

    hinted = client.post(f"/api/v1/games/{game_id}:hint").json()
    assert hinted["found"] is True
    assert hinted["state"]["hints_used"] == 1

    r, c = next(
        (r, c) for r in range(9) for c in range(9) if hinted["state"]["grid"][r][c] == 0
    )
    moved = client.post(
        f"/api/v1/games/{game_id}:move", json={"row": r, "col": c, "value": 1}
    ).json()
    assert moved["state"]["grid"][r][c] == 1
    assert moved["state"]["has_progress"] is True

    reset = client.post(f"/api/v1/games/{game_id}:reset").json()
    assert reset["grid"] == reset["original"]

    solved = client.post(f"/api/v1/games/{game_id}:solve").json()
    assert solved["complete"] is True
    assert solved["used_solve"] is True

    fetched = client.get(f"/api/v1/games/{game_id}").json()
    assert fetched["grid"] == solved["grid"]


def test_game_move_on_given_cell(client):
    state = client.post("/api/v1/games", json={"difficulty": "easy", "seed": 3}).json()
    r, c = next(
        (r, c) for r in range(9) for c in range(9) if state["original"][r][c] != 0
    )

    response = client.post(
        f"/api/v1/games/{state['game_id']}:move", json={"row": r, "col": c, "value": 0}
    )

    assert response.status_code == 400


def test_daily_game(client):
    state = client.post("/api/v1/games", json={"daily": True, "date": "2024-01-01"}).json()

    assert state["daily"] is True


def test_unknown_game(client):
    assert client.get("/api/v1/games/nope").status_code == 404
    assert client.post("/api/v1/games/nope:hint").status_code == 404
