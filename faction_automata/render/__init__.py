"""Renderers: ANSI terminal output, matplotlib stills and shared palettes."""

from faction_automata.render.image import FinalFrameRenderer, render_snapshot_png
from faction_automata.render.palette import Palette, random_palette
from faction_automata.render.terminal import (
    TerminalRenderer,
    colorize,
    format_board,
    hidden_cursor,
)

__all__ = [
    "FinalFrameRenderer",
    "Palette",
    "TerminalRenderer",
    "colorize",
    "format_board",
    "hidden_cursor",
    "random_palette",
    "render_snapshot_png",
]
