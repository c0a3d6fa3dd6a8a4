"""Territory metrics computed from a board snapshot.

All neighborhoods here are non-toroidal 4-neighborhoods: cells on the board
edge simply have fewer neighbors.
"""

from __future__ import annotations

from collections import Counter

from faction_automata.config.constants import ORTHOGONAL_OFFSETS
from faction_automata.domain.board import Coord, FactionId
from faction_automata.domain.snapshot import BoardSnapshot


def territory_counts(snapshot: BoardSnapshot) -> dict[FactionId, int]:
    """Number of cells held by each faction present on the board."""
    return dict(Counter(faction for _, faction in snapshot.occupied()))


def surviving_factions(snapshot: BoardSnapshot) -> tuple[FactionId, ...]:
    return tuple(sorted(territory_counts(snapshot)))


def cluster_count_by_faction(snapshot: BoardSnapshot) -> dict[FactionId, int]:
    """Count 4-connected same-faction components for every present faction."""
    occupied = dict(snapshot.occupied())
    size = snapshot.board_size
    seen: set[Coord] = set()
    clusters: Counter[FactionId] = Counter()

    for start, faction in occupied.items():
        if start in seen:
            continue
        clusters[faction] += 1
        stack = [start]
        seen.add(start)
        while stack:
            x, y = stack.pop()
            for dx, dy in ORTHOGONAL_OFFSETS:
                nx_, ny_ = x + dx, y + dy
                if not (0 <= nx_ < size and 0 <= ny_ < size):
                    continue
                if (nx_, ny_) in seen:
                    continue
                if occupied.get((nx_, ny_)) != faction:
                    continue
                seen.add((nx_, ny_))
                stack.append((nx_, ny_))

    return dict(clusters)


def contested_border_fraction(snapshot: BoardSnapshot) -> float:
    """Fraction of adjacent claimed-cell pairs that belong to different factions.

    Returns NaN when no two claimed cells are adjacent.
    """
    occupied = dict(snapshot.occupied())
    contested = 0
    total = 0
    for (x, y), faction in occupied.items():
        # Look right and down only so each pair is visited once.
        for nx_, ny_ in ((x + 1, y), (x, y + 1)):
            neighbor = occupied.get((nx_, ny_))
            if neighbor is None:
                continue
            total += 1
            if neighbor != faction:
                contested += 1
    if total == 0:
        return float("nan")
    return contested / total
