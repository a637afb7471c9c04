"""Taskboard CLI — the main entry point."""

from __future__ import annotations

import json
import logging

import typer
from rich.console import Console
from rich.table import Table

from taskboard import __version__

app = typer.Typer(
    name="taskboard",
    help="Three-lane task board for the terminal.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)
console = Console()


@app.callback(invoke_without_command=True)
def version_callback(
    version: bool = typer.Option(False, "--version", "-v", help="Show version"),
):
    if version:
        console.print(f"taskboard [dim]v{__version__}[/dim]")
        raise typer.Exit()


@app.command()
def run(
    dark: bool | None = typer.Option(
        None, "--dark/--light", help="Start in dark or light mode (default: from config)",
    ),
    demo: bool | None = typer.Option(
        None, "--demo/--no-demo", help="Seed the board with sample cards (default: from config)",
    ),
):
    """Open the board."""
    from taskboard.config.settings import get_settings
    from taskboard.tui.app import run_tui

    settings = _load_settings(get_settings)
    _configure_logging(settings.log_level)
    run_tui(dark_mode=dark, seed_demo=demo)


@app.command()
def lanes():
    """List the board's lanes in display order."""
    from taskboard.board.models import LANES
    from taskboard.board.service import demo_items
    from taskboard.config.constants import LANE_COLORS

    sample = demo_items()
    table = Table(title="Lanes", show_lines=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Key")
    table.add_column("Title", style="bold")
    table.add_column("Light")
    table.add_column("Dark")
    table.add_column("Demo cards", justify="right")

    for index, lane in enumerate(LANES, start=1):
        light, dark = LANE_COLORS[lane.value]
        count = sum(1 for item in sample if item.lane is lane)
        table.add_row(
            str(index),
            lane.value,
            lane.display_name,
            f"[{light}]{light}[/{light}]",
            f"[{dark}]{dark}[/{dark}]",
            str(count),
        )
    console.print(table)


@app.command()
def config():
    """Show the effective configuration."""
    from taskboard.config.constants import CONFIG_FILE
    from taskboard.config.settings import get_settings

    settings = _load_settings(get_settings)
    source = str(CONFIG_FILE) if CONFIG_FILE.exists() else "defaults"
    console.print(f"[dim]Source: {source}[/dim]")
    console.print_json(json.dumps(settings.model_dump(mode="json")))


def _load_settings(loader):
    """Load settings, turning validation errors into a clean exit."""
    from pydantic import ValidationError

    try:
        return loader()
    except ValidationError as exc:
        console.print(f"[red]Invalid configuration:[/red]\n{exc}")
        raise typer.Exit(1)


def _configure_logging(level: str) -> None:
    """Send logs to ~/.taskboard/logs — the terminal belongs to the TUI."""
    from taskboard.config.constants import LOG_FILE

    LOG_FILE.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        filename=str(LOG_FILE),
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


if __name__ == "__main__":
    app()
