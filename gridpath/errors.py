"""
Exceptions raised by the gridpath engine.

Unreachable targets are not errors: searches finish normally and report
an empty or partial path.
"""

from __future__ import annotations


class GridPathError(Exception):
    """Base class for all gridpath errors."""


class InvalidConfigurationError(GridPathError, ValueError):
    """
    Raised before any work starts when the grid, start/end cells, or
    walls describe an impossible problem.
    """


class MazeGenerationError(GridPathError, RuntimeError):
    """Raised when no solvable maze was produced within the attempt limit."""

    def __init__(self, attempts: int, message: str | None = None) -> None:
        self.attempts = attempts
        super().__init__(
            message or f"Failed to generate a solvable maze after {attempts} attempts"
        )
