from __future__ import annotations

from pathlib import Path

import typer

from udpctl.config import Settings, get_settings, resolve_config_path
from udpctl.services import Platform
from udpctl.storage import Database


def load_settings_or_exit() -> Settings:
    try:
        return get_settings()
    except (FileNotFoundError, ValueError) as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(1) from exc


def resolve_config_path_or_exit(allow_missing: bool = False) -> tuple[Path, bool]:
    try:
        return resolve_config_path(allow_missing=allow_missing)
    except FileNotFoundError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(1) from exc


def build_database(settings: Settings) -> Database:
    return Database(settings.data_dir, settings.database.devices_file)


def launch_platform_or_exit() -> Platform:
    settings = load_settings_or_exit()
    platform = Platform(build_database(settings), settings)
    try:
        platform.launch()
    except ValueError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(1) from exc
    return platform
