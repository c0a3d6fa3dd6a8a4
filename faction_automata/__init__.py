"""Competing-faction territory growth on a chunked grid."""

from faction_automata.config.types import RenderMode, SimulationConfig, SimulationResult
from faction_automata.simulation.engine import Simulation, run_simulation

__all__ = [
    "RenderMode",
    "Simulation",
    "SimulationConfig",
    "SimulationResult",
    "run_simulation",
]
