"""Centralized domain constants for territory simulations.

All magic numbers that appear across multiple modules are defined here.
Consuming modules should import from this module rather than defining
their own inline literals.
"""

from __future__ import annotations

BOARD_SIZE = 50
"""Default board edge length in cells (the board is square)."""

CHUNK_SIZE = 10
"""Edge length of one storage chunk in cells."""

INIT_POPULATION_COUNT = 10
"""Number of seed draws per faction at simulation start."""

GROWTH_RATE = 1
"""Base percentage chance that a frontier tile acts in one growth attempt."""

NEIGHBOR_WEIGHT = 2
"""Percentage points added to the growth chance per friendly-or-empty neighbor."""

GATE_RANGE = 100
"""Exclusive upper bound of the integer roll compared against growth chance."""

WEIGHT_ADJUSTMENT = 100.0
"""Exponent applied to candidate weights before normalisation."""

FACTION_COUNT = 9
"""Default number of competing factions."""

ITERATIONS = 350_000
"""Default number of outer ticks per run."""

RENDER_EVERY = 5_000
"""Default render cadence in completed ticks."""

YEAR_LENGTH = 12
"""Ticks per cosmetic simulation year."""

SPAWN_JITTER = 2
"""Maximum per-axis offset of a seed cell from its region centre."""

SUB_STEP_LOW_FRACTION = 0.05
"""Fraction of board size used for the lower sub-step bound."""

SUB_STEP_HIGH_FRACTION = 0.10
"""Fraction of board size used for the upper sub-step bound."""

MAX_SUB_STEPS_LOW = 15
"""Cap on the lower sub-step bound."""

MAX_SUB_STEPS_HIGH = 30
"""Cap on the upper sub-step bound."""

MAX_SAMPLE_PER_SUB_STEP = 3
"""Exclusive upper bound on frontier tiles sampled per sub-step (draws 0, 1 or 2)."""

FLUSH_THRESHOLD = 8_192
"""Flush territory log rows to Parquet once this in-memory row count is reached."""

ORTHOGONAL_OFFSETS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
"""Von Neumann offsets in candidate order."""

MOORE_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)
"""Moore-neighborhood offsets used for friendly-neighbor counts."""

EMPTY_GLYPH = ". "
"""Two-column terminal glyph for an unclaimed cell."""

CELL_GLYPH = "██"
"""Two-column terminal glyph for a claimed cell (colored per faction)."""
