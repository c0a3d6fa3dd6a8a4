"""Domain layer: chunked board, neighborhoods, faction state and snapshots."""

from faction_automata.domain.board import (
    EMPTY,
    Cell,
    ChunkedBoard,
    Coord,
    FactionId,
    OutOfBoundsError,
    chunk_coordinates,
    global_coordinates,
)
from faction_automata.domain.factions import FactionState, create_faction_states
from faction_automata.domain.neighbors import count_friendly, orthogonal_neighbors
from faction_automata.domain.snapshot import EMPTY_CODE, BoardSnapshot, FactionSummary

__all__ = [
    "BoardSnapshot",
    "Cell",
    "ChunkedBoard",
    "Coord",
    "EMPTY",
    "EMPTY_CODE",
    "FactionId",
    "FactionState",
    "FactionSummary",
    "OutOfBoundsError",
    "chunk_coordinates",
    "count_friendly",
    "create_faction_states",
    "global_coordinates",
    "orthogonal_neighbors",
]
