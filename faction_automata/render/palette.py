"""Faction colors shared by the terminal and image renderers."""

from __future__ import annotations

from dataclasses import dataclass
from random import Random

RGB = tuple[int, int, int]


@dataclass(frozen=True)
class Palette:
    """One RGB color per faction id plus the empty-cell color."""

    faction_colors: tuple[RGB, ...]
    empty_color: RGB = (240, 240, 240)

    def color_for(self, faction: int) -> RGB:
        return self.faction_colors[faction % len(self.faction_colors)]

    def hex_colors(self) -> list[str]:
        return ["#{:02x}{:02x}{:02x}".format(*rgb) for rgb in self.faction_colors]


def random_palette(rng: Random, faction_count: int) -> Palette:
    """Draw an independent uniformly random color for each faction."""
    if faction_count < 1:
        raise ValueError("faction_count must be >= 1")
    colors = tuple(
        (rng.randrange(256), rng.randrange(256), rng.randrange(256)) for _ in range(faction_count)
    )
    return Palette(faction_colors=colors)
