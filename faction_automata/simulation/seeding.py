"""Initial population placement.

Factions are laid out over a near-square grid of board regions; each faction
drops ``init_population_count`` seeds around its region centre with a small
random jitter. Jittered seeds that fall off the board are clamped onto the
nearest edge cell.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from faction_automata.domain.board import Coord, FactionId
from faction_automata.simulation.frontier import refresh_around
from faction_automata.simulation.growth import transfer_tile

if TYPE_CHECKING:
    from faction_automata.simulation.context import SimulationContext

logger = logging.getLogger(__name__)


def region_layout(faction_count: int) -> tuple[int, int]:
    """Return ``(rows, cols)`` of the near-square region grid."""
    rows = math.ceil(math.sqrt(faction_count))
    cols = math.ceil(faction_count / rows)
    return rows, cols


def region_centers(board_size: int, faction_count: int) -> list[Coord]:
    """Centre coordinate of each faction's region, indexed by faction id."""
    rows, cols = region_layout(faction_count)
    section_width = board_size // cols
    section_height = board_size // rows
    centers: list[Coord] = []
    for index in range(faction_count):
        col = index % cols
        row = index // cols
        centers.append(
            (
                row * section_height + section_height // 2,
                col * section_width + section_width // 2,
            )
        )
    return centers


def _clamp(value: int, board_size: int) -> int:
    return min(max(value, 0), board_size - 1)


def place_seed(ctx: SimulationContext, x: int, y: int, faction: FactionId) -> None:
    """Claim ``(x, y)`` for ``faction`` and keep owned and frontier sets consistent.

    A seed landing on a rival's seed takes it over.
    """
    transfer_tile(ctx, (x, y), faction)
    ctx.factions[faction].frontier.add((x, y))
    refresh_around(ctx, x, y)


def seed_initial_population(ctx: SimulationContext) -> None:
    """Scatter every faction's starting cells around its region centre."""
    config = ctx.config
    size = config.board_size
    jitter = config.spawn_jitter
    for faction, (center_x, center_y) in enumerate(
        region_centers(size, config.faction_count)
    ):
        for _ in range(config.init_population_count):
            raw_x = center_x + ctx.rng.randint(-jitter, jitter)
            raw_y = center_y + ctx.rng.randint(-jitter, jitter)
            x, y = _clamp(raw_x, size), _clamp(raw_y, size)
            if (x, y) != (raw_x, raw_y):
                logger.debug("clamped seed (%d, %d) -> (%d, %d)", raw_x, raw_y, x, y)
            place_seed(ctx, x, y, faction)
