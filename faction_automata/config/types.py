"""Configuration dataclasses for territory simulations.

All frozen dataclasses that parameterise a simulation run and the result
container returned by the tick driver live here.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum

from faction_automata.config.constants import (
    BOARD_SIZE,
    CHUNK_SIZE,
    FACTION_COUNT,
    GROWTH_RATE,
    INIT_POPULATION_COUNT,
    ITERATIONS,
    MAX_SUB_STEPS_HIGH,
    MAX_SUB_STEPS_LOW,
    RENDER_EVERY,
    SPAWN_JITTER,
    SUB_STEP_HIGH_FRACTION,
    SUB_STEP_LOW_FRACTION,
    WEIGHT_ADJUSTMENT,
)

__all__ = [
    "RenderMode",
    "SimulationConfig",
    "SimulationResult",
]


# ---------------------------------------------------------------------------
# Result container
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SimulationResult:
    """Top-level result for one completed run."""

    ticks: int
    years: int
    owned_counts: dict[int, int] = field(default_factory=dict)
    capitals: dict[int, tuple[int, int] | None] = field(default_factory=dict)
    elapsed_ms: int = 0

    @property
    def surviving_factions(self) -> tuple[int, ...]:
        return tuple(f for f, n in sorted(self.owned_counts.items()) if n > 0)


# ---------------------------------------------------------------------------
# Config dataclasses
# ---------------------------------------------------------------------------


class RenderMode(Enum):
    """Terminal presentation policy for rendered frames."""

    SEQUENTIAL = "sequential"
    CLEAR = "clear"


@dataclass(frozen=True)
class SimulationConfig:
    """Every tunable knob of a territory simulation run."""

    board_size: int = BOARD_SIZE
    chunk_size: int = CHUNK_SIZE
    init_population_count: int = INIT_POPULATION_COUNT
    growth_rate: int = GROWTH_RATE
    weight_adjustment: float = WEIGHT_ADJUSTMENT
    faction_count: int = FACTION_COUNT
    iterations: int = ITERATIONS
    render_every: int = RENDER_EVERY
    render_final: bool = True
    render_mode: RenderMode = RenderMode.SEQUENTIAL
    spawn_jitter: int = SPAWN_JITTER
    sub_steps_low: int | None = None
    sub_steps_high: int | None = None
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.board_size < 1:
            raise ValueError("board_size must be >= 1")
        if self.chunk_size < 1:
            raise ValueError("chunk_size must be >= 1")
        if self.init_population_count < 0:
            raise ValueError("init_population_count must be >= 0")
        if self.growth_rate < 0:
            raise ValueError("growth_rate must be >= 0")
        if self.weight_adjustment <= 0.0:
            raise ValueError("weight_adjustment must be > 0")
        if self.faction_count < 1:
            raise ValueError("faction_count must be >= 1")
        if self.faction_count > self.board_size * self.board_size:
            raise ValueError("faction_count must not exceed the number of board cells")
        if self.iterations < 0:
            raise ValueError("iterations must be >= 0")
        if self.render_every < 1:
            raise ValueError("render_every must be >= 1")
        if self.spawn_jitter < 0:
            raise ValueError("spawn_jitter must be >= 0")
        if (self.sub_steps_low is None) != (self.sub_steps_high is None):
            raise ValueError("sub_steps_low and sub_steps_high must be set together")
        if self.sub_steps_low is not None and self.sub_steps_high is not None:
            if self.sub_steps_low < 0:
                raise ValueError("sub_steps_low must be >= 0")
            if self.sub_steps_high < self.sub_steps_low:
                raise ValueError("sub_steps_high must be >= sub_steps_low")

    @property
    def chunk_count(self) -> int:
        """Chunks per board edge; the trailing chunk may be partially used."""
        return math.ceil(self.board_size / self.chunk_size)

    def sub_step_bounds(self) -> tuple[int, int]:
        """Return ``(low, high)`` for the per-tick sub-step draw.

        Both bounds scale with board size and are capped by fixed maxima
        unless overridden explicitly. The draw is half-open: ``[low, high)``.
        """
        if self.sub_steps_low is not None and self.sub_steps_high is not None:
            return self.sub_steps_low, self.sub_steps_high
        low = min(int(self.board_size * SUB_STEP_LOW_FRACTION), MAX_SUB_STEPS_LOW)
        high = min(int(self.board_size * SUB_STEP_HIGH_FRACTION), MAX_SUB_STEPS_HIGH)
        return low, high
