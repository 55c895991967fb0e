"""udpctl - control UDP command-code appliances and manage their definitions."""

from __future__ import annotations

from importlib.metadata import version

from .config import DatabaseConfig, DispatchConfig, Settings, get_settings
from .models import DeviceConfig, DeviceDefinition, DeviceRecord
from .services import Platform
from .storage import Database

__all__ = [
    "Database",
    "DatabaseConfig",
    "DeviceConfig",
    "DeviceDefinition",
    "DeviceRecord",
    "DispatchConfig",
    "Platform",
    "Settings",
    "__version__",
    "get_settings",
]

__version__ = version("udpctl")
