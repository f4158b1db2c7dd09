"""Main FastAPI application for the Sudoku puzzle service."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.routes import _get_settings, router
from .engine.errors import PreconditionError
from .engine.grid import parse_difficulty


@asynccontextmanager
async def _app_lifespan(_: FastAPI):
    """Validate settings eagerly so misconfiguration fails at startup."""
    settings = _get_settings()
    try:
        parse_difficulty(settings.default_difficulty)
    except PreconditionError as e:
        raise RuntimeError(f"Invalid SUDOKU_DEFAULT_DIFFICULTY at startup: {e}") from e
    yield


app = FastAPI(
    title="Sudoku Puzzle API",
    description="API for generating, validating and hinting Sudoku puzzles",
    version="1.0.0",
    lifespan=_app_lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_get_settings().cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {"message": "Sudoku Puzzle API", "docs": "/docs"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("sudoku_backend.main:app", host="0.0.0.0", port=8000, reload=True)
