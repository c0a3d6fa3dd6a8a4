"""Configuration layer: constants and typed config dataclasses."""

from faction_automata.config.constants import (
    BOARD_SIZE,
    CHUNK_SIZE,
    FACTION_COUNT,
    FLUSH_THRESHOLD,
    GROWTH_RATE,
    INIT_POPULATION_COUNT,
    ITERATIONS,
    RENDER_EVERY,
    WEIGHT_ADJUSTMENT,
    YEAR_LENGTH,
)
from faction_automata.config.types import RenderMode, SimulationConfig, SimulationResult

__all__ = [
    "BOARD_SIZE",
    "CHUNK_SIZE",
    "FACTION_COUNT",
    "FLUSH_THRESHOLD",
    "GROWTH_RATE",
    "INIT_POPULATION_COUNT",
    "ITERATIONS",
    "RENDER_EVERY",
    "RenderMode",
    "SimulationConfig",
    "SimulationResult",
    "WEIGHT_ADJUSTMENT",
    "YEAR_LENGTH",
]
