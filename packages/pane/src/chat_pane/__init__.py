"""
chat_pane — bottom-anchored, scrollable chat log rendering for terminal panes.
"""
from .cell import Cell, Grid, Line, blank, line_text, line_width
from .config import ConfigError, PaneSettings, load_settings
from .feed import feed_messages
from .pane import ChatPane, format_title
from .render import grid_to_ansi, grid_to_rich, grid_to_text, render_viewport
from .scroll import ScrollController
from .store import MessageStore
from .theme import DARK, LIGHT, Theme, ThemeError, get_theme
from .utils import char_width, decode_entities, split_graphemes
from .wrap import WrapCache, build_cells, wrap_messages

__all__ = [
    # cell
    "Cell",
    "Grid",
    "Line",
    "blank",
    "line_text",
    "line_width",
    # config
    "ConfigError",
    "PaneSettings",
    "load_settings",
    # feed
    "feed_messages",
    # pane
    "ChatPane",
    "format_title",
    # render
    "grid_to_ansi",
    "grid_to_rich",
    "grid_to_text",
    "render_viewport",
    # scroll
    "ScrollController",
    # store
    "MessageStore",
    # theme
    "DARK",
    "LIGHT",
    "Theme",
    "ThemeError",
    "get_theme",
    # utils
    "char_width",
    "decode_entities",
    "split_graphemes",
    # wrap
    "WrapCache",
    "build_cells",
    "wrap_messages",
]
