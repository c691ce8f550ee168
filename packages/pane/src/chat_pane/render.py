"""
Viewport renderer — bottom-anchored projection of wrapped lines onto a grid.

Rows are filled from the bottom up: the bottom row shows wrapped line
``n - 1 - offset``, the row above it the line before that, and so on. Rows
left over once the lines run out are blank, so the grid is always dense.
"""
from __future__ import annotations

from typing import Sequence

from rich.style import Style
from rich.text import Text

from .cell import DEFAULT_COLOR, Cell, Grid, Line, blank, continuation
from .theme import Theme

_SGR_RESET = "\x1b[0m"

_ANSI_INDEX = {
    "black": 0,
    "red": 1,
    "green": 2,
    "yellow": 3,
    "blue": 4,
    "magenta": 5,
    "cyan": 6,
    "white": 7,
}


def _row_from_line(line: Line, width: int, filler: Cell) -> list[Cell]:
    row: list[Cell] = []
    x = 0
    for cell in line:
        w = cell.width
        if x + w > width:
            # Line was wrapped for a wider pane; never spill past the edge
            break
        row.append(cell)
        if w > 1:
            row.extend(continuation(cell.fg, cell.bg) for _ in range(w - 1))
        x += w
    row.extend(filler for _ in range(width - x))
    return row


def render_viewport(
    lines: Sequence[Line],
    width: int,
    height: int,
    offset: int = 0,
    theme: Theme | None = None,
) -> Grid:
    """Render ``lines`` into exactly ``height`` rows of exactly ``width`` cells."""
    if height <= 0:
        return []
    width = max(0, width)
    offset = max(0, offset)

    fg = theme.fg if theme else DEFAULT_COLOR
    bg = theme.bg if theme else DEFAULT_COLOR
    filler = blank(fg, bg)

    grid: Grid = [[] for _ in range(height)]
    index = len(lines) - 1 - offset
    for row in range(height - 1, -1, -1):
        if index >= 0:
            grid[row] = _row_from_line(lines[index], width, filler)
            index -= 1
        else:
            grid[row] = [filler] * width
    return grid


# ─────────────────────────────────────────────────────────────────────────────
# Grid conversion for line-based and rich-based hosts
# ─────────────────────────────────────────────────────────────────────────────

def grid_to_text(grid: Grid) -> list[str]:
    return ["".join(cell.char for cell in row) for row in grid]


def _sgr(fg: str, bg: str) -> str:
    fg_code = 30 + _ANSI_INDEX[fg] if fg in _ANSI_INDEX else 39
    bg_code = 40 + _ANSI_INDEX[bg] if bg in _ANSI_INDEX else 49
    return f"\x1b[{fg_code};{bg_code}m"


def grid_to_ansi(grid: Grid) -> list[str]:
    """One string per row with SGR colour codes, each terminated by a reset."""
    out: list[str] = []
    for row in grid:
        buf = ""
        active: tuple[str, str] | None = None
        for cell in row:
            if cell.is_continuation:
                continue
            if (cell.fg, cell.bg) != active:
                active = (cell.fg, cell.bg)
                buf += _sgr(cell.fg, cell.bg)
            buf += cell.char
        out.append(buf + _SGR_RESET)
    return out


def grid_to_rich(grid: Grid) -> Text:
    text = Text()
    for i, row in enumerate(grid):
        if i > 0:
            text.append("\n")
        for cell in row:
            if cell.is_continuation:
                continue
            text.append(cell.char, style=Style(color=cell.fg, bgcolor=cell.bg))
    return text
