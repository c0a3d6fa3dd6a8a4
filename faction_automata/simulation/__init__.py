"""Simulation engine: growth rule, frontier and capital bookkeeping, tick driver."""

from faction_automata.simulation.capitals import (
    assign_initial_capitals,
    capital_holder,
    relocate_capital,
)
from faction_automata.simulation.context import SimulationContext
from faction_automata.simulation.engine import Renderer, Simulation, TickReport, run_simulation
from faction_automata.simulation.frontier import (
    is_frontier,
    refresh_around,
    refresh_frontier_status,
)
from faction_automata.simulation.growth import (
    GrowthOutcome,
    attempt_growth,
    candidate_weights,
    direction_probabilities,
    growth_chance,
    sample_weighted,
    transfer_tile,
)
from faction_automata.simulation.persistence import TerritoryLogWriter, flush_territory_columns
from faction_automata.simulation.seeding import (
    place_seed,
    region_centers,
    region_layout,
    seed_initial_population,
)

__all__ = [
    "GrowthOutcome",
    "Renderer",
    "Simulation",
    "SimulationContext",
    "TerritoryLogWriter",
    "TickReport",
    "assign_initial_capitals",
    "attempt_growth",
    "candidate_weights",
    "capital_holder",
    "direction_probabilities",
    "flush_territory_columns",
    "growth_chance",
    "is_frontier",
    "place_seed",
    "refresh_around",
    "refresh_frontier_status",
    "region_centers",
    "region_layout",
    "relocate_capital",
    "run_simulation",
    "sample_weighted",
    "seed_initial_population",
    "transfer_tile",
]
