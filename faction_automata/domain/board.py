"""Chunked square board holding one faction id (or nothing) per cell.

Chunking is a storage layout only: every global coordinate maps to exactly
one ``(chunk_x, chunk_y, local_x, local_y)`` tuple and back, and no caller
outside this module needs to know the layout exists.
"""

from __future__ import annotations

from collections.abc import Iterator

Coord = tuple[int, int]
FactionId = int
Cell = FactionId | None

EMPTY: Cell = None
"""Value of an unclaimed cell."""


class OutOfBoundsError(IndexError):
    """Raised when a coordinate outside ``[0, board_size)`` is accessed."""

    def __init__(self, x: int, y: int, board_size: int) -> None:
        super().__init__(f"({x}, {y}) is outside a {board_size}x{board_size} board")
        self.x = x
        self.y = y
        self.board_size = board_size


def chunk_coordinates(x: int, y: int, chunk_size: int) -> tuple[int, int, int, int]:
    """Translate a global coordinate into ``(chunk_x, chunk_y, local_x, local_y)``."""
    return x // chunk_size, y // chunk_size, x % chunk_size, y % chunk_size


def global_coordinates(
    chunk_x: int, chunk_y: int, local_x: int, local_y: int, chunk_size: int
) -> Coord:
    """Inverse of :func:`chunk_coordinates`."""
    return chunk_x * chunk_size + local_x, chunk_y * chunk_size + local_y


class ChunkedBoard:
    """Square board of ``board_size`` cells per edge stored in square chunks."""

    def __init__(self, board_size: int, chunk_size: int) -> None:
        if board_size < 1:
            raise ValueError("board_size must be >= 1")
        if chunk_size < 1:
            raise ValueError("chunk_size must be >= 1")
        self.board_size = board_size
        self.chunk_size = chunk_size
        self.chunk_count = -(-board_size // chunk_size)
        self._chunks: list[list[list[list[Cell]]]] = [
            [[[EMPTY] * chunk_size for _ in range(chunk_size)] for _ in range(self.chunk_count)]
            for _ in range(self.chunk_count)
        ]

    def in_bounds(self, x: int, y: int) -> bool:
        size = self.board_size
        return 0 <= x < size and 0 <= y < size

    def _locate(self, x: int, y: int) -> tuple[int, int, int, int]:
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(x, y, self.board_size)
        return chunk_coordinates(x, y, self.chunk_size)

    def get(self, x: int, y: int) -> Cell:
        chunk_x, chunk_y, local_x, local_y = self._locate(x, y)
        return self._chunks[chunk_x][chunk_y][local_x][local_y]

    def set(self, x: int, y: int, value: Cell) -> None:
        if value is not EMPTY and (
            isinstance(value, bool) or not isinstance(value, int) or value < 0
        ):
            raise ValueError(f"cell value must be EMPTY or a faction id, got {value!r}")
        chunk_x, chunk_y, local_x, local_y = self._locate(x, y)
        self._chunks[chunk_x][chunk_y][local_x][local_y] = value

    def cells(self) -> Iterator[tuple[Coord, Cell]]:
        """Yield ``((x, y), cell)`` for every cell in row-major order."""
        for x in range(self.board_size):
            for y in range(self.board_size):
                yield (x, y), self.get(x, y)

    def count(self, value: Cell) -> int:
        """Number of cells currently holding ``value``."""
        return sum(1 for _, cell in self.cells() if cell == value)

    def rows(self) -> tuple[tuple[Cell, ...], ...]:
        """Return an immutable copy of the board indexed as ``rows[x][y]``."""
        size = self.board_size
        return tuple(tuple(self.get(x, y) for y in range(size)) for x in range(size))
