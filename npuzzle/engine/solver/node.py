"""Search tree nodes and the priority queue that orders them."""

from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass, field

from npuzzle.models.board import Board


@dataclass(eq=False)
class SearchNode:
    """A board reached after *moves* slides, linked back to its parent.

    ``priority`` is ``moves + board.manhattan()``. Several frontier nodes
    may share the same ancestors; the chain back to the root stays alive
    for as long as any of them does.
    """

    board: Board
    moves: int = 0
    prev: SearchNode | None = None
    priority: int = field(init=False)

    def __post_init__(self) -> None:
        self.priority = self.moves + self.board.manhattan()

    def path(self) -> list[Board]:
        """Boards from the root to this node, inclusive."""
        boards: list[Board] = []
        node: SearchNode | None = self
        while node is not None:
            boards.append(node.board)
            node = node.prev
        boards.reverse()
        return boards


class Frontier:
    """Min-priority queue of search nodes.

    Nodes with equal priority come out in the order they were pushed
    (FIFO), so a search over the same board is always reproducible.
    """

    def __init__(self) -> None:
        self._heap: list[tuple[int, int, SearchNode]] = []
        self._counter = itertools.count()
        self.peak: int = 0

    def push(self, node: SearchNode) -> None:
        heapq.heappush(self._heap, (node.priority, next(self._counter), node))
        self.peak = max(self.peak, len(self._heap))

    def pop(self) -> SearchNode:
        """Remove and return the node with the lowest priority.

        Raises ``IndexError`` when the frontier is empty.
        """
        return heapq.heappop(self._heap)[2]

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
