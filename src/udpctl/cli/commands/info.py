from __future__ import annotations

import typer
from rich.console import Console

from udpctl.cli.common import (
    build_database,
    load_settings_or_exit,
    resolve_config_path_or_exit,
)


def register(app: typer.Typer) -> None:
    @app.command()
    def info() -> None:
        """Show udpctl data directory info and stats."""
        settings = load_settings_or_exit()
        db = build_database(settings)
        try:
            config = db.load_devices()
            cached = db.load_cache()
        except ValueError as exc:
            typer.echo(str(exc), err=True)
            raise typer.Exit(1) from exc

        config_path, config_exists = resolve_config_path_or_exit(allow_missing=True)

        console = Console()

        console.print("[bold]udpctl Info[/bold]\n")
        console.print(f"Data directory: {db.path}")
        console.print(f"Device definitions: {db.devices_path}")
        console.print(f"Accessory cache: {db.cache_path}")
        console.print(f"Config file: {config_path if config_exists else 'defaults'}")

        console.print("\n[bold]Configuration[/bold]")
        console.print(f"Command port: {settings.dispatch.port}")

        console.print("\n[bold]Statistics[/bold]")
        console.print(f"Configured devices: {len(config.devices)}")
        console.print(f"Cached accessories: {len(cached)}")
        console.print(f"Powered on: {sum(1 for record in cached if record.state)}")
