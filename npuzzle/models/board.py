"""Board model for the sliding puzzle."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from enum import StrEnum

from npuzzle.errors import InvalidBoardError, InvalidOperationError

Grid = tuple[tuple[int, ...], ...]


class Direction(StrEnum):
    """Direction a *tile* slides into the blank."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


# Offset from the blank to the tile that moves.
# UP   → tile at (br+1, bc) moves up   → blank shifts down
# DOWN → tile at (br-1, bc) moves down  → blank shifts up
# LEFT → tile at (br, bc+1) moves left  → blank shifts right
# RIGHT→ tile at (br, bc-1) moves right → blank shifts left
_TILE_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (1, 0),
    Direction.DOWN: (-1, 0),
    Direction.LEFT: (0, 1),
    Direction.RIGHT: (0, -1),
}
_OFFSET_DIRECTIONS = {offset: d for d, offset in _TILE_OFFSETS.items()}

# Blank swaps with the tile above, below, left, right (in that order).
_NEIGHBOUR_ORDER = (Direction.DOWN, Direction.UP, Direction.RIGHT, Direction.LEFT)


@dataclass(frozen=True)
class Board:
    """Immutable n×n sliding puzzle configuration.

    Tiles are stored as a tuple of row tuples. 0 represents the blank.
    The grid passed in is copied, so later changes to the caller's lists
    never reach the board.
    """

    tiles: Grid

    def __post_init__(self) -> None:
        object.__setattr__(self, "tiles", _validated(self.tiles))

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, size: int, flat: Sequence[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        if len(flat) != size * size:
            raise InvalidBoardError(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(flat)}."
            )
        return cls([flat[r * size : (r + 1) * size] for r in range(size)])

    @classmethod
    def _trusted(cls, tiles: Grid) -> Board:
        # Skips validation; only for grids derived from a valid board.
        obj = object.__new__(cls)
        object.__setattr__(obj, "tiles", tiles)
        return obj

    # -- queries --------------------------------------------------------------

    @property
    def size(self) -> int:
        return len(self.tiles)

    def dimension(self) -> int:
        return self.size

    @property
    def blank_pos(self) -> tuple[int, int]:
        """Row-major position of the blank."""
        for r, row in enumerate(self.tiles):
            for c, v in enumerate(row):
                if v == 0:
                    return r, c
        raise InvalidBoardError("Board does not contain a blank tile (0).")

    def get_tile(self, row: int, col: int) -> int:
        return self.tiles[row][col]

    def hamming(self) -> int:
        """Number of tiles, blank excluded, out of their goal position."""
        return sum(
            1
            for r, row in enumerate(self.tiles)
            for c, v in enumerate(row)
            if v != 0 and self._distance(v, r, c) > 0
        )

    def manhattan(self) -> int:
        """Sum of the grid distances of every tile to its goal position."""
        return sum(
            self._distance(v, r, c)
            for r, row in enumerate(self.tiles)
            for c, v in enumerate(row)
            if v != 0
        )

    def is_goal(self) -> bool:
        return self.manhattan() == 0

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        val = self.tiles[row][col]
        if val == 0:
            return row == self.size - 1 and col == self.size - 1
        return self._distance(val, row, col) == 0

    # -- transformations ------------------------------------------------------

    def neighbours(self) -> Iterator[Board]:
        """Yield every board one slide away.

        The blank is swapped with the tile above, below, left and right,
        skipping directions that fall off the grid. The order is fixed
        because the solver's tie-breaking depends on it.
        """
        blank = self.blank_pos
        for direction in _NEIGHBOUR_ORDER:
            target = self._tile_for(direction, blank)
            if target is not None:
                yield self._swapped(blank, target)

    def slide(self, direction: Direction) -> Board:
        """Return the board after sliding a tile in *direction*.

        E.g. ``Direction.UP`` moves the tile **below** the blank upward.
        """
        blank = self.blank_pos
        target = self._tile_for(direction, blank)
        if target is None:
            raise InvalidOperationError(
                f"No tile can slide {direction.value} with the blank at "
                f"{blank}."
            )
        return self._swapped(blank, target)

    def direction_to(self, other: Board) -> Direction:
        """Return the slide that turns this board into *other*."""
        if other.size == self.size:
            br, bc = self.blank_pos
            tr, tc = other.blank_pos
            direction = _OFFSET_DIRECTIONS.get((tr - br, tc - bc))
            if direction is not None and self.slide(direction) == other:
                return direction
        raise InvalidOperationError("Boards are not one slide apart.")

    def twin(self) -> Board:
        """Swap the first horizontally adjacent pair of non-blank tiles.

        Rows are scanned top to bottom, pairs left to right. The blank
        stays where it is.
        """
        for r, row in enumerate(self.tiles):
            for c in range(self.size - 1):
                if row[c] != 0 and row[c + 1] != 0:
                    return self._swapped((r, c), (r, c + 1))
        raise InvalidOperationError(
            f"No twin exists for a {self.size}×{self.size} board: no row "
            f"holds two adjacent tiles."
        )

    # -- rendering ------------------------------------------------------------

    def __str__(self) -> str:
        width = len(str(self.size * self.size - 1))
        lines = [str(self.size)]
        for row in self.tiles:
            lines.append(" " + " ".join(f"{v:>{width}}" for v in row))
        return "\n".join(lines) + "\n"

    # -- helpers --------------------------------------------------------------

    def _distance(self, value: int, row: int, col: int) -> int:
        goal_row, goal_col = divmod(value - 1, self.size)
        return abs(goal_row - row) + abs(goal_col - col)

    def _tile_for(
        self, direction: Direction, blank: tuple[int, int]
    ) -> tuple[int, int] | None:
        br, bc = blank
        dr, dc = _TILE_OFFSETS[direction]
        tr, tc = br + dr, bc + dc
        if 0 <= tr < self.size and 0 <= tc < self.size:
            return tr, tc
        return None

    def _swapped(self, a: tuple[int, int], b: tuple[int, int]) -> Board:
        rows = [list(row) for row in self.tiles]
        (ar, ac), (br, bc) = a, b
        rows[ar][ac], rows[br][bc] = rows[br][bc], rows[ar][ac]
        return Board._trusted(tuple(tuple(row) for row in rows))


def _validated(tiles: Sequence[Sequence[int]]) -> Grid:
    """Deep-copy *tiles* into a grid, checking it is a valid puzzle."""
    try:
        grid = tuple(tuple(row) for row in tiles)
    except TypeError as exc:
        raise InvalidBoardError("Tiles must be a sequence of rows.") from exc

    size = len(grid)
    if size == 0:
        raise InvalidBoardError("Board must have at least one row.")
    for r, row in enumerate(grid):
        if len(row) != size:
            raise InvalidBoardError(
                f"Row {r} has {len(row)} tiles; expected {size} for a "
                f"{size}×{size} board."
            )

    flat = [v for row in grid for v in row]
    if any(not isinstance(v, int) or isinstance(v, bool) for v in flat):
        raise InvalidBoardError("Tiles must be integers.")
    if 0 not in flat:
        raise InvalidBoardError("Board does not contain a blank tile (0).")
    if sorted(flat) != list(range(size * size)):
        raise InvalidBoardError(
            f"Tiles must be a permutation of 0..{size * size - 1}."
        )
    return grid
