from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from udpctl.cli.common import build_database, load_settings_or_exit
from udpctl.config import (
    DatabaseConfig,
    DispatchConfig,
    Settings,
    resolve_config_path,
    write_settings,
)


def _requested_settings(
    data_dir: Path | None, devices_file: str | None, port: int | None
) -> Settings:
    defaults = Settings()
    database = DatabaseConfig(
        path=str(data_dir) if data_dir is not None else defaults.database.path,
        devices_file=devices_file or defaults.database.devices_file,
    )
    dispatch = DispatchConfig(port=port or defaults.dispatch.port)
    return Settings(database=database, dispatch=dispatch)


def register(app: typer.Typer) -> None:
    @app.command()
    def init(
        data_dir: Annotated[
            Path | None,
            typer.Option("--data-dir", "--path", help="Where devices.toml is kept"),
        ] = None,
        devices_file: Annotated[
            str | None,
            typer.Option("--devices-file", help="File name for device definitions"),
        ] = None,
        port: Annotated[
            int | None,
            typer.Option("--port", min=1, max=65535, help="UDP command port"),
        ] = None,
        force: Annotated[
            bool,
            typer.Option("--force", "-f", help="Overwrite existing config and data"),
        ] = False,
    ) -> None:
        """Write udpctl settings and an empty device definitions file."""
        console = Console()

        config_path, config_exists = resolve_config_path(allow_missing=True)
        if config_exists and not force:
            settings = load_settings_or_exit()
            console.print(f"[dim]Keeping settings from[/dim] {config_path}")
        else:
            settings = _requested_settings(data_dir, devices_file, port)
            write_settings(settings, config_path)
            verb = "Rewrote" if config_exists else "Wrote"
            console.print(f"[green]✓[/green] {verb} settings: {config_path}")

        db = build_database(settings)
        if db.init(force=force):
            console.print(f"[green]✓[/green] Empty device list: {db.devices_path}")
        else:
            count = len(db.configured_devices())
            console.print(f"[dim]{count} device(s) already in[/dim] {db.devices_path}")

        console.print(
            f"Commands go to udp/{settings.dispatch.port}. "
            "Run [bold]udpctl setup[/bold] to add devices."
        )
