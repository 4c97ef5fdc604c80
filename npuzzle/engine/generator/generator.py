"""Generates sliding puzzle boards."""

from __future__ import annotations

import random

from npuzzle.errors import InvalidArgumentError
from npuzzle.models.board import Board


class BoardGenerator:
    """Creates solvable puzzles by random walks from the solved state."""

    @staticmethod
    def solved(size: int) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        if size < 1:
            raise InvalidArgumentError(f"Board size must be positive, got {size}.")
        return Board.from_flat(size, [*range(1, size * size), 0])

    @staticmethod
    def scramble(board: Board, depth: int, rng: random.Random) -> Board:
        """Return the board after *depth* random slides, never undoing one."""
        prev: Board | None = None
        for _ in range(depth):
            candidates = [b for b in board.neighbours() if b != prev]
            prev, board = board, rng.choice(candidates)
        return board

    @staticmethod
    def generate(
        size: int, depth: int | None = None, seed: int | None = None
    ) -> Board:
        """Return a random *solvable*, unsolved board of the given size."""
        if size < 2:
            raise InvalidArgumentError(
                f"Cannot scramble a {size}×{size} board; size must be at least 2."
            )
        if depth is None:
            depth = size * size * 10
        if depth < 1:
            raise InvalidArgumentError(f"Scramble depth must be positive, got {depth}.")

        rng = random.Random(seed)
        goal = BoardGenerator.solved(size)
        while True:
            board = BoardGenerator.scramble(goal, depth, rng)
            # Ensure the board is not already solved
            if not board.is_goal():
                return board

    @staticmethod
    def is_solvable(board: Board) -> bool:
        """Return True if *board* can reach the goal state, by tile parity.

        - odd size: the number of inversions must be even
        - even size: inversions plus the blank's row counted from the
          bottom (1-based) must be odd
        """
        flat = [v for row in board.tiles for v in row if v != 0]
        inversions = sum(
            1
            for i in range(len(flat))
            for j in range(i + 1, len(flat))
            if flat[i] > flat[j]
        )
        if board.size % 2 == 1:
            return inversions % 2 == 0
        blank_row_from_bottom = board.size - board.blank_pos[0]
        return (inversions + blank_row_from_bottom) % 2 == 1
