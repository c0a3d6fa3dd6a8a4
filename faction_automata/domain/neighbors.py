"""Neighborhood queries over a :class:`ChunkedBoard`."""

from __future__ import annotations

from faction_automata.config.constants import MOORE_OFFSETS, ORTHOGONAL_OFFSETS
from faction_automata.domain.board import EMPTY, ChunkedBoard, Coord, FactionId


def count_friendly(board: ChunkedBoard, x: int, y: int, faction: FactionId) -> int:
    """Count Moore neighbors of ``(x, y)`` that are empty or held by ``faction``.

    Out-of-bounds neighbors are skipped. The centre itself is never read, so
    this is safe to call on hypothetical positions.
    """
    count = 0
    for dx, dy in MOORE_OFFSETS:
        nx_, ny_ = x + dx, y + dy
        if not board.in_bounds(nx_, ny_):
            continue
        cell = board.get(nx_, ny_)
        if cell is EMPTY or cell == faction:
            count += 1
    return count


def orthogonal_neighbors(board: ChunkedBoard, x: int, y: int) -> list[Coord]:
    """Return in-bounds von Neumann neighbors in fixed candidate order."""
    return [
        (x + dx, y + dy) for dx, dy in ORTHOGONAL_OFFSETS if board.in_bounds(x + dx, y + dy)
    ]
