"""Cell, Line and Grid — the values the wrapper and renderer produce."""
from __future__ import annotations

from dataclasses import dataclass, field

from .utils import char_width

DEFAULT_COLOR = "default"


@dataclass(frozen=True)
class Cell:
    """
    One grid position: a glyph plus foreground/background colour names.

    A cell whose ``char`` is empty is a continuation: it sits in the column
    right of a wide glyph and draws nothing.
    """
    char: str = " "
    fg: str = DEFAULT_COLOR
    bg: str = DEFAULT_COLOR
    width: int = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        # Measured once; wrap and render read it for every cell
        object.__setattr__(self, "width", 0 if self.char == "" else char_width(self.char))

    @property
    def is_continuation(self) -> bool:
        return self.char == ""


Line = tuple[Cell, ...]
Grid = list[list[Cell]]


def blank(fg: str = DEFAULT_COLOR, bg: str = DEFAULT_COLOR) -> Cell:
    return Cell(" ", fg, bg)


def continuation(fg: str = DEFAULT_COLOR, bg: str = DEFAULT_COLOR) -> Cell:
    return Cell("", fg, bg)


def line_width(line: Line) -> int:
    return sum(cell.width for cell in line)


def line_text(line: Line) -> str:
    return "".join(cell.char for cell in line)
