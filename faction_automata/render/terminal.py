"""ANSI terminal renderer.

Each claimed cell is drawn as a two-column truecolor block and each empty
cell as ``". "``. In sequential mode the screen is cleared once and later
frames overwrite the previous one in place; in clear mode every frame clears
the screen and reprints.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TextIO

from faction_automata.config.constants import CELL_GLYPH, EMPTY_GLYPH
from faction_automata.config.types import RenderMode
from faction_automata.domain.board import EMPTY
from faction_automata.domain.snapshot import BoardSnapshot
from faction_automata.render.palette import RGB, Palette

ESC = "\x1b"
CLEAR_SCREEN = f"{ESC}[2J{ESC}[H"
CURSOR_HOME = f"{ESC}[H"
HIDE_CURSOR = f"{ESC}[?25l"
SHOW_CURSOR = f"{ESC}[?25h"
RESET = f"{ESC}[0m"


def colorize(rgb: RGB, text: str = CELL_GLYPH) -> str:
    r, g, b = rgb
    return f"{ESC}[38;2;{r};{g};{b}m{text}{RESET}"


def format_board(snapshot: BoardSnapshot, palette: Palette) -> str:
    """Render the board as text, one line per board row."""
    glyphs: dict[int, str] = {}
    lines: list[str] = []
    for row in snapshot.cells:
        parts: list[str] = []
        for cell in row:
            if cell is EMPTY:
                parts.append(EMPTY_GLYPH)
                continue
            glyph = glyphs.get(cell)
            if glyph is None:
                glyph = glyphs[cell] = colorize(palette.color_for(cell))
            parts.append(glyph)
        lines.append("".join(parts))
    return "\n".join(lines) + "\n"


@contextmanager
def hidden_cursor(stream: TextIO | None = None) -> Iterator[None]:
    """Hide the terminal cursor for the duration of the block."""
    out = stream if stream is not None else sys.stdout
    out.write(HIDE_CURSOR)
    try:
        yield
    finally:
        out.write(SHOW_CURSOR)
        out.flush()


class TerminalRenderer:
    """Print snapshots to a text stream using ANSI escapes."""

    def __init__(
        self,
        palette: Palette,
        mode: RenderMode = RenderMode.SEQUENTIAL,
        stream: TextIO | None = None,
    ) -> None:
        self.palette = palette
        self.mode = mode
        self.stream = stream if stream is not None else sys.stdout
        self.frames = 0

    def __call__(self, snapshot: BoardSnapshot) -> None:
        out = self.stream
        board = format_board(snapshot, self.palette)
        header = f"Tick: {snapshot.tick}  Year: {snapshot.years}\n"
        if self.mode is RenderMode.SEQUENTIAL:
            out.write(CLEAR_SCREEN if self.frames == 0 else CURSOR_HOME)
            out.write(header)
            out.write(board)
            # Park the cursor below the board so later prints do not overwrite it.
            out.write(f"{ESC}[{snapshot.board_size + 3};1H")
        else:
            out.write(CLEAR_SCREEN)
            out.write(header)
            out.write(board)
        out.flush()
        self.frames += 1
