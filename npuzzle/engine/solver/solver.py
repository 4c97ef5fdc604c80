"""Sliding puzzle solver.

A* over the board graph with the Manhattan heuristic. The input board and
its twin (two adjacent tiles swapped) are searched in lockstep: exactly one
of them is solvable, so whichever reaches the goal first settles whether
the input can be solved, without a separate parity check.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from time import perf_counter

from npuzzle.engine.solver.config import SolverConfig
from npuzzle.engine.solver.node import Frontier, SearchNode
from npuzzle.errors import (
    InvalidArgumentError,
    SearchAbortedError,
    SearchExhaustedError,
)
from npuzzle.models.board import Board, Direction

logger = logging.getLogger(__name__)


@dataclass
class SearchStats:
    """Counters for one solver run, split by original and twin side."""

    expanded: int = 0
    generated: int = 0
    peak_frontier: int = 0
    twin_expanded: int = 0
    twin_generated: int = 0
    twin_peak_frontier: int = 0
    elapsed: float = 0.0

    @property
    def total_expanded(self) -> int:
        return self.expanded + self.twin_expanded


@dataclass
class _Side:
    frontier: Frontier = field(default_factory=Frontier)
    expanded: int = 0
    generated: int = 0

    def seed(self, board: Board) -> None:
        self.frontier.push(SearchNode(board))
        self.generated += 1


class Solver:
    """Solves one board on construction; results are read afterwards."""

    def __init__(self, initial: Board, config: SolverConfig | None = None) -> None:
        if initial is None:
            raise InvalidArgumentError("Initial board cannot be None.")
        if not isinstance(initial, Board):
            raise InvalidArgumentError(
                f"Expected a Board, got {type(initial).__name__}."
            )
        self._initial = initial
        self._config = config or SolverConfig()
        self._solvable: bool = False
        self._goal: SearchNode | None = None
        self.stats = SearchStats()
        self._search()

    # -- search ---------------------------------------------------------------

    def _search(self) -> None:
        start = perf_counter()
        board = self._initial
        logger.debug(
            "Solving %d×%d board (manhattan=%d, hamming=%d)",
            board.size, board.size, board.manhattan(), board.hamming(),
        )

        if board.is_goal():
            self._solvable = True
            self._goal = SearchNode(board)
            self.stats.elapsed = perf_counter() - start
            return

        original, twin = _Side(), _Side()
        original.seed(board)
        twin.seed(board.twin())

        while True:
            if not original.frontier and not twin.frontier:
                self.stats = self._snapshot(original, twin, start)
                raise SearchExhaustedError(
                    "Both frontiers are empty; the board graph has no goal."
                )

            self._check_limits(original, twin, start)
            goal = self._step(original)
            if goal is not None:
                self._solvable = True
                self._goal = goal
                break

            self._check_limits(original, twin, start)
            if self._step(twin) is not None:
                self._solvable = False
                break

        self.stats = self._snapshot(original, twin, start)
        logger.debug(
            "%s side reached the goal: moves=%d expanded=%d elapsed=%.3fs",
            "Original" if self._solvable else "Twin",
            self.moves(),
            self.stats.total_expanded,
            self.stats.elapsed,
        )

    @staticmethod
    def _step(side: _Side) -> SearchNode | None:
        """Pop one node; return it if it is a goal, else expand it."""
        if not side.frontier:
            return None

        node = side.frontier.pop()
        if node.board.is_goal():
            return node

        side.expanded += 1
        parent = node.prev.board if node.prev is not None else None
        for neighbour in node.board.neighbours():
            # Never step straight back to the parent board.
            if neighbour != parent:
                side.frontier.push(SearchNode(neighbour, node.moves + 1, node))
                side.generated += 1
        return None

    def _check_limits(self, original: _Side, twin: _Side, start: float) -> None:
        config = self._config
        reason: str | None = None
        if (
            config.max_expansions is not None
            and original.expanded + twin.expanded >= config.max_expansions
        ):
            reason = f"expansion budget of {config.max_expansions} exhausted"
        elif config.timeout is not None and perf_counter() - start > config.timeout:
            reason = f"timeout of {config.timeout}s exceeded"

        if reason is not None:
            self.stats = self._snapshot(original, twin, start)
            logger.warning(
                "Search aborted: %s after %d expansions",
                reason, self.stats.total_expanded,
            )
            raise SearchAbortedError(f"Search aborted: {reason}.", self.stats)

    @staticmethod
    def _snapshot(original: _Side, twin: _Side, start: float) -> SearchStats:
        return SearchStats(
            expanded=original.expanded,
            generated=original.generated,
            peak_frontier=original.frontier.peak,
            twin_expanded=twin.expanded,
            twin_generated=twin.generated,
            twin_peak_frontier=twin.frontier.peak,
            elapsed=perf_counter() - start,
        )

    # -- queries --------------------------------------------------------------

    def is_solvable(self) -> bool:
        return self._solvable

    def moves(self) -> int:
        """Minimum number of moves to solve the board; -1 if unsolvable."""
        if not self._solvable or self._goal is None:
            return -1
        return self._goal.moves

    def solution(self) -> list[Board] | None:
        """Boards of a shortest solution, initial board first.

        Returns ``None`` if the board is unsolvable.
        """
        if not self._solvable or self._goal is None:
            return None
        return self._goal.path()

    def directions(self) -> list[Direction] | None:
        """Tile slides of a shortest solution, or ``None`` if unsolvable."""
        boards = self.solution()
        if boards is None:
            return None
        return [a.direction_to(b) for a, b in zip(boards, boards[1:])]

    @staticmethod
    def hint(board: Board, config: SolverConfig | None = None) -> Direction | None:
        """Return the first move of a shortest solution.

        ``None`` if *board* is already solved or unsolvable.
        """
        directions = Solver(board, config).directions()
        return directions[0] if directions else None
