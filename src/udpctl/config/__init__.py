"""Settings for where device definitions live and how commands are sent."""

from __future__ import annotations

from .settings import (
    DEFAULT_COMMAND_PORT,
    DEFAULT_DEVICES_FILE,
    DatabaseConfig,
    DispatchConfig,
    Settings,
    get_settings,
    load_settings,
    resolve_config_path,
    write_settings,
)

__all__ = [
    "DEFAULT_COMMAND_PORT",
    "DEFAULT_DEVICES_FILE",
    "DatabaseConfig",
    "DispatchConfig",
    "Settings",
    "get_settings",
    "load_settings",
    "resolve_config_path",
    "write_settings",
]
