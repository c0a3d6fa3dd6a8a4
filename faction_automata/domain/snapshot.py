"""Typed read-only view of the board handed to renderers.

``BoardSnapshot`` copies every cell at capture time, so a renderer can never
observe the board mid-mutation and cannot write back into it.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

import numpy as np

from faction_automata.domain.board import EMPTY, Cell, Coord, FactionId

EMPTY_CODE = -1
"""Integer used for unclaimed cells in :meth:`BoardSnapshot.to_array`."""


@dataclass(frozen=True)
class FactionSummary:
    """Per-faction bookkeeping captured alongside the cells."""

    faction: FactionId
    owned: int
    frontier: int
    capital: Coord | None


@dataclass(frozen=True)
class BoardSnapshot:
    """Immutable picture of the whole board at one completed tick."""

    tick: int
    years: int
    board_size: int
    cells: tuple[tuple[Cell, ...], ...]
    factions: tuple[FactionSummary, ...] = field(default_factory=tuple)

    def get(self, x: int, y: int) -> Cell:
        return self.cells[x][y]

    def occupied(self) -> Iterator[tuple[Coord, FactionId]]:
        """Yield ``((x, y), faction)`` for every claimed cell."""
        for x, row in enumerate(self.cells):
            for y, cell in enumerate(row):
                if cell is not EMPTY:
                    yield (x, y), cell

    def to_array(self) -> np.ndarray:
        """Return an ``(N, N)`` int array with :data:`EMPTY_CODE` for empty cells."""
        grid = np.full((self.board_size, self.board_size), EMPTY_CODE, dtype=int)
        for (x, y), faction in self.occupied():
            grid[x, y] = faction
        return grid
