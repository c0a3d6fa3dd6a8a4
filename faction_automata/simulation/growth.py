"""Probabilistic growth rule for a single frontier tile.

One attempt runs a percentage gate sized by the tile's friendly
neighborhood, weighs the orthogonal candidates by their own friendly
neighborhoods, picks one by sharply-biased weighted sampling and claims it.
Gate failures and dead ends are ordinary outcomes, not errors.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from enum import Enum
from random import Random
from typing import TYPE_CHECKING

from faction_automata.config.constants import GATE_RANGE, NEIGHBOR_WEIGHT
from faction_automata.domain.board import EMPTY, ChunkedBoard, Coord, FactionId
from faction_automata.domain.neighbors import count_friendly, orthogonal_neighbors
from faction_automata.simulation.capitals import capital_holder, relocate_capital
from faction_automata.simulation.frontier import refresh_around, refresh_frontier_status

if TYPE_CHECKING:
    from faction_automata.simulation.context import SimulationContext

logger = logging.getLogger(__name__)


class GrowthOutcome(Enum):
    """Result of one :func:`attempt_growth` call."""

    GATE_FAILED = "gate_failed"
    NO_DIRECTION = "no_direction"
    EXPANDED = "expanded"
    CAPTURED = "captured"
    NO_CHANGE = "no_change"


def growth_chance(board: ChunkedBoard, x: int, y: int, faction: FactionId, growth_rate: int) -> int:
    """Percentage chance (uncapped) that the tile at ``(x, y)`` acts."""
    return growth_rate + NEIGHBOR_WEIGHT * count_friendly(board, x, y, faction)


def candidate_weights(
    board: ChunkedBoard, candidates: Sequence[Coord], faction: FactionId
) -> list[int]:
    """Weight each candidate; cells already held by ``faction`` weigh zero."""
    weights: list[int] = []
    for cx, cy in candidates:
        if board.get(cx, cy) == faction:
            weights.append(0)
        else:
            weights.append(count_friendly(board, cx, cy, faction))
    return weights


def direction_probabilities(weights: Sequence[float], adjustment: float) -> list[float]:
    """Normalise ``w ** adjustment`` over ``weights``.

    Weights are scaled by their maximum before exponentiation; the resulting
    distribution is identical and large exponents cannot overflow.
    """
    peak = max(weights, default=0)
    if peak <= 0:
        raise ValueError("at least one weight must be positive")
    adjusted = [(w / peak) ** adjustment if w > 0 else 0.0 for w in weights]
    total = sum(adjusted)
    return [a / total for a in adjusted]


def sample_weighted(probabilities: Sequence[float], rng: Random) -> int:
    """Return the first index whose cumulative mass exceeds a uniform draw.

    Falls back to the last index when rounding leaves the total below the draw.
    """
    target = rng.random()
    cumulative = 0.0
    for index, probability in enumerate(probabilities):
        cumulative += probability
        if cumulative > target:
            return index
    return len(probabilities) - 1


def transfer_tile(ctx: SimulationContext, coord: Coord, faction: FactionId) -> GrowthOutcome:
    """Hand ``coord`` to ``faction``, relocating any capital standing on it."""
    x, y = coord
    previous = ctx.board.get(x, y)
    if previous == faction:
        return GrowthOutcome.NO_CHANGE

    holder = capital_holder(ctx, coord)
    if holder is not None:
        relocate_capital(ctx, holder, lost=coord)

    if previous is not EMPTY:
        loser = ctx.factions[previous]
        loser.release(coord)
        if loser.eliminated:
            logger.info("faction %d eliminated by faction %d at %s", previous, faction, coord)

    ctx.board.set(x, y, faction)
    ctx.factions[faction].claim(coord)
    return GrowthOutcome.EXPANDED if previous is EMPTY else GrowthOutcome.CAPTURED


def attempt_growth(ctx: SimulationContext, x: int, y: int, faction: FactionId) -> GrowthOutcome:
    """Run one growth attempt from the frontier tile ``(x, y)``."""
    board = ctx.board
    config = ctx.config

    chance = growth_chance(board, x, y, faction, config.growth_rate)
    if ctx.rng.randrange(GATE_RANGE) >= chance:
        return GrowthOutcome.GATE_FAILED

    candidates = orthogonal_neighbors(board, x, y)
    weights = candidate_weights(board, candidates, faction)
    if sum(weights) == 0:
        return GrowthOutcome.NO_DIRECTION

    probabilities = direction_probabilities(weights, config.weight_adjustment)
    target = candidates[sample_weighted(probabilities, ctx.rng)]

    outcome = transfer_tile(ctx, target, faction)
    refresh_frontier_status(ctx, x, y)
    for cx, cy in candidates:
        refresh_frontier_status(ctx, cx, cy)
    if outcome is not GrowthOutcome.NO_CHANGE:
        # Neighbors of the claimed tile not among the candidates can flip too.
        refresh_around(ctx, *target)
    return outcome
