"""Incremental maintenance of per-faction frontier sets.

A tile is frontier when it is claimed and at least one in-bounds orthogonal
neighbor is empty or held by another faction. Board edges neither trigger nor
block frontier status.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from faction_automata.domain.board import EMPTY, ChunkedBoard
from faction_automata.domain.neighbors import orthogonal_neighbors

if TYPE_CHECKING:
    from faction_automata.simulation.context import SimulationContext


def is_frontier(board: ChunkedBoard, x: int, y: int) -> bool:
    cell = board.get(x, y)
    if cell is EMPTY:
        return False
    for nx_, ny_ in orthogonal_neighbors(board, x, y):
        neighbor = board.get(nx_, ny_)
        if neighbor is EMPTY or neighbor != cell:
            return True
    return False


def refresh_frontier_status(ctx: SimulationContext, x: int, y: int) -> None:
    """Reclassify one tile in its owner's frontier set. Idempotent."""
    board = ctx.board
    if not board.in_bounds(x, y):
        return
    cell = board.get(x, y)
    if cell is EMPTY:
        return
    frontier = ctx.factions[cell].frontier
    if is_frontier(board, x, y):
        frontier.add((x, y))
    else:
        frontier.discard((x, y))


def refresh_around(ctx: SimulationContext, x: int, y: int) -> None:
    """Refresh ``(x, y)`` and every in-bounds orthogonal neighbor."""
    refresh_frontier_status(ctx, x, y)
    for nx_, ny_ in orthogonal_neighbors(ctx.board, x, y):
        refresh_frontier_status(ctx, nx_, ny_)

