"""
Pane settings.

Settings arrive as a plain dict from whoever owns the settings file; this
module only merges, applies environment overrides and validates them.
"""
from __future__ import annotations

import os
from dataclasses import asdict, dataclass
from typing import Any

from .theme import THEMES

ENV_THEME = "CHAT_PANE_THEME"
ENV_SCROLL_STEP = "CHAT_PANE_SCROLL_STEP"

DEFAULT_SCROLL_STEP = 10
DEFAULT_TAB_WIDTH = 3


class ConfigError(ValueError):
    """Raised when settings fail validation."""


@dataclass
class PaneSettings:
    theme: str = "dark"
    scroll_step: int = DEFAULT_SCROLL_STEP
    initial_fetch: int | None = None   # default: viewport height
    tab_width: int = DEFAULT_TAB_WIDTH

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PaneSettings":
        known = cls.__dataclass_fields__.keys()
        filtered = {k: v for k, v in data.items() if k in known}
        return cls(**filtered)

    def merge(self, other: dict[str, Any]) -> "PaneSettings":
        """Return a copy with every non-None value of ``other`` applied."""
        base = self.to_dict()
        for k, v in other.items():
            if v is None or k not in base:
                continue
            base[k] = v
        return PaneSettings.from_dict(base)

    def with_env(self, environ: dict[str, str] | None = None) -> "PaneSettings":
        env = os.environ if environ is None else environ
        overrides: dict[str, Any] = {}
        if env.get(ENV_THEME):
            overrides["theme"] = env[ENV_THEME]
        if env.get(ENV_SCROLL_STEP):
            try:
                overrides["scroll_step"] = int(env[ENV_SCROLL_STEP])
            except ValueError:
                raise ConfigError(
                    f"{ENV_SCROLL_STEP} must be an integer, got {env[ENV_SCROLL_STEP]!r}"
                ) from None
        return self.merge(overrides)

    def validate(self) -> "PaneSettings":
        if self.theme not in THEMES:
            raise ConfigError(f"unknown theme {self.theme!r}")
        if self.scroll_step < 1:
            raise ConfigError("scroll_step must be at least 1")
        if self.tab_width < 0:
            raise ConfigError("tab_width must not be negative")
        if self.initial_fetch is not None and self.initial_fetch < 0:
            raise ConfigError("initial_fetch must not be negative")
        return self


def load_settings(data: dict[str, Any] | None = None, environ: dict[str, str] | None = None) -> PaneSettings:
    """Build validated settings from a dict, then apply environment overrides."""
    settings = PaneSettings.from_dict(data or {})
    return settings.with_env(environ).validate()
