"""Capital markers: assigned after seeding, relocated or cleared on loss.

Capitals carry no mechanical effect; growth never reads them.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from faction_automata.domain.board import Coord, FactionId

if TYPE_CHECKING:
    from faction_automata.simulation.context import SimulationContext

logger = logging.getLogger(__name__)


def capital_holder(ctx: SimulationContext, coord: Coord) -> FactionId | None:
    """Return the faction whose capital sits on ``coord``, if any."""
    for faction, state in ctx.factions.items():
        if state.capital == coord:
            return faction
    return None


def relocate_capital(
    ctx: SimulationContext, faction: FactionId, lost: Coord | None = None
) -> Coord | None:
    """Move ``faction``'s capital to a random owned tile other than ``lost``.

    Clears the capital when no such tile exists and returns the new value.
    """
    state = ctx.factions[faction]
    remaining = sorted(state.owned - {lost}) if lost is not None else sorted(state.owned)
    if remaining:
        state.capital = ctx.rng.choice(remaining)
    else:
        state.capital = None
        logger.debug("faction %d lost its last tile; capital cleared", faction)
    return state.capital


def assign_initial_capitals(ctx: SimulationContext) -> None:
    """Give every faction holding territory a uniformly random capital tile."""
    for faction, state in ctx.factions.items():
        if state.owned:
            relocate_capital(ctx, faction)
