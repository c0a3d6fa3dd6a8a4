"""Per-faction derived state: owned tiles, frontier tiles and capital."""

from __future__ import annotations

from dataclasses import dataclass, field

from faction_automata.domain.board import Coord, FactionId


@dataclass
class FactionState:
    """Cached views of one faction's territory.

    The board stays authoritative; these sets are updated explicitly at every
    mutation site and must always agree with it.
    """

    faction: FactionId
    owned: set[Coord] = field(default_factory=set)
    frontier: set[Coord] = field(default_factory=set)
    capital: Coord | None = None

    @property
    def eliminated(self) -> bool:
        return not self.owned

    def claim(self, coord: Coord) -> None:
        self.owned.add(coord)

    def release(self, coord: Coord) -> None:
        """Drop ``coord`` from both owned and frontier sets."""
        self.owned.discard(coord)
        self.frontier.discard(coord)


def create_faction_states(faction_count: int) -> dict[FactionId, FactionState]:
    """Build empty states for faction ids ``0 .. faction_count - 1``."""
    return {faction: FactionState(faction=faction) for faction in range(faction_count)}
