"""Exception types raised by the puzzle engine."""


class SudokuError(Exception):
    """Base class for engine errors."""


class PreconditionError(SudokuError, ValueError):
    """Raised when a caller passes a malformed grid, difficulty, digit or coordinate."""


class GenerationError(SudokuError, RuntimeError):
    """Raised when solution generation exceeds its step budget."""
