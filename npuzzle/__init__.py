"""Optimal N-puzzle solver: A* over the board and its twin in lockstep."""

from npuzzle.engine.generator import BoardGenerator
from npuzzle.engine.solver import SearchStats, Solver, SolverConfig
from npuzzle.errors import (
    InvalidArgumentError,
    InvalidBoardError,
    InvalidOperationError,
    NPuzzleError,
    SearchAbortedError,
    SearchExhaustedError,
)
from npuzzle.models import Board, Direction

__all__ = [
    "Board",
    "BoardGenerator",
    "Direction",
    "InvalidArgumentError",
    "InvalidBoardError",
    "InvalidOperationError",
    "NPuzzleError",
    "SearchAbortedError",
    "SearchExhaustedError",
    "SearchStats",
    "Solver",
    "SolverConfig",
]
