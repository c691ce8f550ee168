"""
Line wrapper — turns the message log into display lines no wider than the pane.

Messages never share a line: each message (and each newline inside one)
starts a fresh line. Within a message, glyphs fill a line greedily and break
exactly at the pane edge, with no word-boundary search.
"""
from __future__ import annotations

import unicodedata
from typing import Sequence

from .cell import DEFAULT_COLOR, Cell, Line
from .config import DEFAULT_TAB_WIDTH
from .store import MessageStore
from .utils import expand_tabs, split_graphemes

# Stands in for a glyph wider than the whole pane
OVERSIZE_PLACEHOLDER = "?"
CONTROL_PLACEHOLDER = "\ufffd"


def _normalize(text: str) -> str:
    if "\r" in text:
        text = text.replace("\r\n", "\n").replace("\r", "\n")
    return text


def build_cells(
    text: str,
    fg: str = DEFAULT_COLOR,
    bg: str = DEFAULT_COLOR,
    tab_width: int = DEFAULT_TAB_WIDTH,
) -> list[Cell]:
    """Build cells for one line of message text (no newlines expected)."""
    cells: list[Cell] = []
    for glyph in split_graphemes(expand_tabs(text, tab_width)):
        if unicodedata.category(glyph[0]) == "Cc":
            glyph = CONTROL_PLACEHOLDER
        cells.append(Cell(glyph, fg, bg))
    return cells


def _fill(cells: list[Cell], width: int) -> list[Line]:
    lines: list[Line] = []
    current: list[Cell] = []
    x = 0
    for cell in cells:
        w = cell.width
        if w > width:
            cell = Cell(OVERSIZE_PLACEHOLDER, cell.fg, cell.bg)
            w = 1
        if x + w > width:
            lines.append(tuple(current))
            current = []
            x = 0
        current.append(cell)
        x += w
    lines.append(tuple(current))
    return lines


def wrap_messages(
    messages: Sequence[str],
    width: int,
    fg: str = DEFAULT_COLOR,
    bg: str = DEFAULT_COLOR,
    tab_width: int = DEFAULT_TAB_WIDTH,
) -> list[Line]:
    """
    Wrap ``messages`` to ``width`` columns.

    Returns an empty list for an empty log or a non-positive width. An empty
    message still produces one empty line.
    """
    if width <= 0 or not messages:
        return []

    lines: list[Line] = []
    for message in messages:
        for segment in _normalize(message).split("\n"):
            lines.extend(_fill(build_cells(segment, fg, bg, tab_width), width))
    return lines


class WrapCache:
    """
    Memoises the most recent wrap of one store.

    Keyed on the store version plus every wrap argument, so a single append
    or a resize is enough to force a re-wrap.
    """

    def __init__(self) -> None:
        self._key: tuple | None = None
        self._lines: tuple[Line, ...] = ()
        self.hits = 0
        self.misses = 0

    def invalidate(self) -> None:
        self._key = None
        self._lines = ()

    def get(
        self,
        store: MessageStore,
        width: int,
        fg: str = DEFAULT_COLOR,
        bg: str = DEFAULT_COLOR,
        tab_width: int = DEFAULT_TAB_WIDTH,
    ) -> tuple[Line, ...]:
        version, messages = store.snapshot()
        key = (version, width, fg, bg, tab_width)
        if key == self._key:
            self.hits += 1
            return self._lines
        self.misses += 1
        self._lines = tuple(wrap_messages(messages, width, fg, bg, tab_width))
        self._key = key
        return self._lines
