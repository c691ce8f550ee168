"""
CLI entry point — render a message log into a pane and print it.
"""
from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from .config import ConfigError, load_settings
from .pane import ChatPane
from .render import grid_to_rich
from .theme import ThemeError, get_theme

app = typer.Typer(
    name="chat-pane",
    help="Chat pane — bottom-anchored chat log rendering",
    no_args_is_help=True,
)

console = Console()


@app.callback()
def main() -> None:
    """Chat pane developer tools."""


@app.command()
def preview(
    source: Optional[Path] = typer.Argument(None, help="File with one message per line (default: stdin)"),
    width: int = typer.Option(60, "--width", "-w", help="Pane width in columns"),
    height: int = typer.Option(20, "--height", help="Pane height in rows"),
    offset: int = typer.Option(0, "--offset", "-o", help="Scroll offset in wrapped lines"),
    theme: Optional[str] = typer.Option(None, "--theme", "-t", help="Theme name: light/dark"),
    title: str = typer.Option("", "--title", help="Channel name shown above the pane"),
    topic: str = typer.Option("", "--topic", help="Channel topic shown after the name"),
) -> None:
    """Render a message log the way the pane would show it."""
    try:
        settings = load_settings().merge({"theme": theme}).validate()
        pane_theme = get_theme(settings.theme)
    except (ConfigError, ThemeError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1)

    if source is None:
        raw = sys.stdin.read()
    else:
        raw = source.read_text(encoding="utf-8")

    pane = ChatPane(width, height, theme=pane_theme, settings=settings)
    pane.load_initial(raw.splitlines())
    pane.set_title(title, topic)
    pane.scroll.scroll_to(offset, pane.line_count())

    body = grid_to_rich(pane.render())
    console.print(Panel(body, title=Text(pane.title) if pane.title else None, expand=False))
