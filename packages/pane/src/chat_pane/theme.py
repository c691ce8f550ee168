"""
Colour themes for the chat pane.

A Theme is an explicit, immutable value handed to the pane at construction.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

COLORS: tuple[str, ...] = (
    "default",
    "black",
    "red",
    "green",
    "yellow",
    "blue",
    "magenta",
    "cyan",
    "white",
)


class ThemeError(ValueError):
    """Raised for unknown theme names or colours."""


class Theme(BaseModel):
    """Colour table used when building and padding cells."""
    name: str = "dark"
    fg: str = "default"
    bg: str = "default"
    border_fg: str = "default"
    label_fg: str = "default"
    par_fg: str = "default"
    par_label_bg: str = "default"

    model_config = ConfigDict(frozen=True)

    @field_validator("fg", "bg", "border_fg", "label_fg", "par_fg", "par_label_bg")
    @classmethod
    def _known_color(cls, value: str) -> str:
        if value not in COLORS:
            raise ValueError(f"unknown colour {value!r}; expected one of {', '.join(COLORS)}")
        return value


LIGHT = Theme(
    name="light",
    fg="black",
    bg="white",
    border_fg="black",
    label_fg="blue",
    par_fg="yellow",
    par_label_bg="white",
)

DARK = Theme(name="dark")

THEMES: dict[str, Theme] = {
    "light": LIGHT,
    "dark": DARK,
}


def get_theme(name: str) -> Theme:
    try:
        return THEMES[name]
    except KeyError:
        raise ThemeError(f"unknown theme {name!r}; available: {', '.join(sorted(THEMES))}") from None
