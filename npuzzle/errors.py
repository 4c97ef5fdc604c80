"""Exceptions raised by the puzzle model and the solver."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from npuzzle.engine.solver.solver import SearchStats


class NPuzzleError(Exception):
    """Base class for every error raised by this package."""


class InvalidBoardError(NPuzzleError, ValueError):
    """The tile grid is not a well-formed n×n puzzle."""


class InvalidOperationError(NPuzzleError, RuntimeError):
    """The board does not support the requested transformation."""


class InvalidArgumentError(NPuzzleError, ValueError):
    """A solver argument is missing or out of range."""


class SearchAbortedError(NPuzzleError):
    """The search hit its deadline or expansion budget before finishing."""

    def __init__(self, message: str, stats: SearchStats) -> None:
        super().__init__(message)
        self.stats = stats


class SearchExhaustedError(NPuzzleError):
    """Both frontiers ran dry without reaching a goal."""
