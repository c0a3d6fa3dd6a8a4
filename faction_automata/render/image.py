"""Matplotlib still-image rendering of board snapshots."""

from __future__ import annotations

from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.colors import BoundaryNorm, ListedColormap
from matplotlib.patches import Patch

from faction_automata.domain.snapshot import EMPTY_CODE, BoardSnapshot
from faction_automata.io.paths import resolve_within_base
from faction_automata.render.palette import Palette


def _faction_cmap(palette: Palette) -> tuple[ListedColormap, BoundaryNorm]:
    """Discrete colormap: index 0 is empty, index ``f + 1`` is faction ``f``."""
    colors = ["#{:02x}{:02x}{:02x}".format(*palette.empty_color)] + palette.hex_colors()
    cmap = ListedColormap(colors)
    bounds = [i - 0.5 for i in range(len(colors) + 1)]
    return cmap, BoundaryNorm(bounds, cmap.N)


def _color_index_grid(snapshot: BoardSnapshot, palette: Palette) -> np.ndarray:
    grid = snapshot.to_array()
    n_colors = len(palette.faction_colors)
    shifted = np.where(grid == EMPTY_CODE, 0, (grid % n_colors) + 1)
    return shifted.astype(int)


def render_snapshot_png(
    snapshot: BoardSnapshot,
    output_path: Path,
    palette: Palette,
    title: str | None = None,
    dpi: int = 100,
    base_dir: Path | None = None,
) -> Path:
    """Save one snapshot as a PNG and return the written path.

    When *base_dir* is given, *output_path* must resolve inside it.
    """
    output_path = Path(output_path)
    if base_dir is not None:
        output_path = resolve_within_base(output_path, Path(base_dir))
    output_path.parent.mkdir(parents=True, exist_ok=True)
    cmap, norm = _faction_cmap(palette)
    grid = _color_index_grid(snapshot, palette)

    fig, ax = plt.subplots(figsize=(6, 6))
    try:
        ax.imshow(grid, cmap=cmap, norm=norm, origin="upper", aspect="equal")
        ax.set_xticks([])
        ax.set_yticks([])
        ax.set_title(title or f"Tick {snapshot.tick} (year {snapshot.years})")
        handles = [
            Patch(
                facecolor="#{:02x}{:02x}{:02x}".format(*palette.color_for(summary.faction)),
                edgecolor="gray",
                label=f"Faction {summary.faction}",
            )
            for summary in snapshot.factions
            if summary.owned > 0
        ]
        if handles:
            ax.legend(handles=handles, loc="upper left", bbox_to_anchor=(1.02, 1.0), fontsize=8)
        fig.savefig(output_path, dpi=dpi, bbox_inches="tight")
    finally:
        plt.close(fig)
    return output_path


class FinalFrameRenderer:
    """Renderer that keeps the latest snapshot and writes it as a PNG on demand."""

    def __init__(
        self, output_path: Path, palette: Palette, base_dir: Path | None = None
    ) -> None:
        self.output_path = Path(output_path)
        self.palette = palette
        self.base_dir = base_dir
        self.latest: BoardSnapshot | None = None

    def __call__(self, snapshot: BoardSnapshot) -> None:
        self.latest = snapshot

    def save(self) -> Path | None:
        if self.latest is None:
            return None
        return render_snapshot_png(
            self.latest, self.output_path, self.palette, base_dir=self.base_dir
        )
