"""Territory metrics over board snapshots."""

from faction_automata.metrics.territory import (
    cluster_count_by_faction,
    contested_border_fraction,
    surviving_factions,
    territory_counts,
)

__all__ = [
    "cluster_count_by_faction",
    "contested_border_fraction",
    "surviving_factions",
    "territory_counts",
]
