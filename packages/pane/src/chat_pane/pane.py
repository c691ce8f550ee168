"""
ChatPane — the chat log view a host UI loop drives.

Owns the message store, the scroll offset and a wrap cache; everything else
(layout, key dispatch, the chat service) is handed in by the host.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Mapping

from .cell import Grid, Line
from .config import PaneSettings
from .render import grid_to_ansi, render_viewport
from .scroll import ScrollController
from .store import MessageStore
from .theme import Theme, get_theme
from .wrap import WrapCache

logger = logging.getLogger(__name__)

FetchMessages = Callable[[Any, int], Iterable[str] | None]

HELP_HEADER: tuple[str, ...] = (
    "chat-pane - chat client for your terminal",
    "",
    "USAGE:",
    "    chat-pane preview [messages-file]",
    "",
    "KEY BINDINGS:",
    "",
)


def format_title(name: str, topic: str = "") -> str:
    if topic:
        return f"{name} - {topic}"
    return name


class ChatPane:
    """
    Bottom-anchored, scrollable view over an append-only message log.

    ``append_message`` may be called from an ingestion thread; all other
    methods belong to the UI thread.
    """

    def __init__(
        self,
        width: int = 0,
        height: int = 0,
        theme: Theme | None = None,
        settings: PaneSettings | None = None,
    ) -> None:
        self.settings = settings or PaneSettings()
        self.theme = theme or get_theme(self.settings.theme)
        self.store = MessageStore()
        self.scroll = ScrollController(self.settings.scroll_step)
        self._cache = WrapCache()
        self._width = max(0, width)
        self._height = max(0, height)
        self._title = ""

    # ── geometry ────────────────────────────────────────────────────────────

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def set_viewport(self, width: int, height: int) -> None:
        width, height = max(0, width), max(0, height)
        if (width, height) != (self._width, self._height):
            logger.debug("Viewport %dx%d -> %dx%d", self._width, self._height, width, height)
        self._width = width
        self._height = height

    # ── title ───────────────────────────────────────────────────────────────

    @property
    def title(self) -> str:
        return self._title

    def set_title(self, channel_name: str, topic: str = "") -> None:
        self._title = format_title(channel_name, topic)

    # ── messages ────────────────────────────────────────────────────────────

    def append_message(self, raw: str) -> None:
        self.store.append(raw)

    def load_initial(self, raw_messages: Iterable[str] | None) -> None:
        self.store.load(raw_messages)

    def clear_messages(self) -> None:
        self.store.clear()
        self.scroll.reset()

    def fetch_messages(self, fetch: FetchMessages, channel: Any) -> int:
        """
        Load the most recent messages of ``channel`` through ``fetch``.

        Asks for as many messages as the viewport has rows unless settings
        say otherwise. A failing fetch loads nothing. Returns the count loaded.
        """
        count = self.settings.initial_fetch
        if count is None:
            count = self._height
        try:
            raw = list(fetch(channel, count) or ())
        except Exception:
            logger.warning("Fetching messages for %r failed; showing an empty log", channel, exc_info=True)
            raw = []
        self.load_initial(raw)
        return len(raw)

    def show_help(self, key_map: Mapping[str, Mapping[str, str]]) -> None:
        """Replace the log with usage text and the key bindings per mode."""
        help_lines = list(HELP_HEADER)
        for mode in sorted(key_map):
            help_lines.append(f"    {mode.upper()}")
            help_lines.append("")
            mapping = key_map[mode]
            for key in sorted(mapping):
                help_lines.append(f"    {key:<12}{mapping[key]:<15}")
            help_lines.append("")
        self.store.load(help_lines)
        self.scroll.reset()

    # ── wrapping / scrolling ────────────────────────────────────────────────

    def lines(self) -> tuple[Line, ...]:
        return self._cache.get(
            self.store,
            self._width,
            self.theme.fg,
            self.theme.bg,
            self.settings.tab_width,
        )

    def line_count(self) -> int:
        return len(self.lines())

    @property
    def offset(self) -> int:
        return self.scroll.offset

    def scroll_up(self) -> int:
        return self.scroll.scroll_up(self.line_count())

    def scroll_down(self) -> int:
        return self.scroll.scroll_down(self.line_count())

    # ── rendering ───────────────────────────────────────────────────────────

    def invalidate(self) -> None:
        self._cache.invalidate()

    def render(self) -> Grid:
        lines = self.lines()
        offset = self.scroll.clamp(len(lines))
        return render_viewport(lines, self._width, self._height, offset, self.theme)

    def render_lines(self) -> list[str]:
        """The current frame as ANSI-coloured rows for a line-based compositor."""
        return grid_to_ansi(self.render())
