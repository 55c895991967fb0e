from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from udpctl.cli.common import (
    build_database,
    load_settings_or_exit,
    resolve_config_path_or_exit,
)

app = typer.Typer(no_args_is_help=True)


def _describe(path: Path) -> str:
    text = escape(str(path))
    return text if path.exists() else f"{text} [dim](not created yet)[/dim]"


@app.command("show")
def show_config(
    raw: bool = typer.Option(False, "--raw", help="Print the settings as TOML"),
) -> None:
    """Show where device definitions live and how commands are sent."""
    settings = load_settings_or_exit()
    config_path, config_exists = resolve_config_path_or_exit(allow_missing=True)

    if raw:
        typer.echo(settings.to_toml())
        return

    db = build_database(settings)

    table = Table(show_header=False)
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    table.add_row("Config file", str(config_path) if config_exists else "defaults")
    table.add_row("Data directory", _describe(db.path))
    table.add_row("Device definitions", _describe(db.devices_path))
    table.add_row("Accessory cache", _describe(db.cache_path))
    table.add_row("Command port", f"udp/{settings.dispatch.port}")

    Console().print(table)
