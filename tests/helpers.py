"""Test helpers: JSON fixture boards and a breadth-first search oracle.

The oracle walks the whole state graph outward from the goal over flat
tuples, so it shares no code with the solver under test.
"""

from __future__ import annotations

import json
from collections import deque
from pathlib import Path

from npuzzle.models.board import Board

FIXTURES_DIR = Path(__file__).resolve().parent.parent / "fixtures"

State = tuple[int, ...]


def load_fixture(name: str) -> list[dict]:
    with open(FIXTURES_DIR / name) as f:
        return json.load(f)


def fixture_id(board_data: dict) -> str:
    return board_data["id"]


def board_from_data(data: dict) -> Board:
    """Reconstruct a ``Board`` from its JSON representation."""
    return Board([row[:] for row in data["tiles"]])


def bfs_distances(size: int) -> dict[State, int]:
    """Distance to the goal of every state reachable from it."""
    goal: State = tuple(list(range(1, size * size)) + [0])
    dist: dict[State, int] = {goal: 0}
    queue: deque[State] = deque([goal])
    while queue:
        state = queue.popleft()
        z = state.index(0)
        r, c = divmod(z, size)
        for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            nr, nc = r + dr, c + dc
            if not (0 <= nr < size and 0 <= nc < size):
                continue
            j = nr * size + nc
            nxt = list(state)
            nxt[z], nxt[j] = nxt[j], nxt[z]
            key = tuple(nxt)
            if key not in dist:
                dist[key] = dist[state] + 1
                queue.append(key)
    return dist


class Oracle:
    """Minimum move counts looked up from precomputed BFS tables."""

    def __init__(self) -> None:
        self._tables: dict[int, dict[State, int]] = {}

    def moves(self, board: Board) -> int:
        """Minimum moves to solve *board*, or -1 if it is unreachable."""
        table = self._tables.get(board.size)
        if table is None:
            table = self._tables[board.size] = bfs_distances(board.size)
        flat = tuple(v for row in board.tiles for v in row)
        return table.get(flat, -1)
