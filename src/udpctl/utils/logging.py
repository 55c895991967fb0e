from __future__ import annotations

import logging
import os
from collections.abc import MutableMapping
from typing import Any, Literal

import coloredlogs  # type: ignore[import]

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]

LEVEL_ENV_VARS = ("UDPCTL_LOGLEVEL", "LOGLEVEL")

DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
DEFAULT_DATE_FORMAT = "%H:%M:%S"


def resolve_level(level: LogLevel | None = None, verbose: int = 0) -> str:
    """Pick the log level: explicit level, then -v count, then environment."""
    if level:
        return level.upper()
    if verbose:
        return "DEBUG" if verbose > 1 else "INFO"
    for name in LEVEL_ENV_VARS:
        value = os.environ.get(name)
        if value:
            return value.upper()
    return "WARNING"


def setup_logging(level: LogLevel | None = None, verbose: int = 0) -> str:
    resolved = resolve_level(level, verbose)
    coloredlogs.install(level=resolved, fmt=DEFAULT_FORMAT, datefmt=DEFAULT_DATE_FORMAT)
    return resolved


class DeviceLogAdapter(logging.LoggerAdapter):
    """Prefix messages with the device and the command being sent to it."""

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> tuple[Any, MutableMapping[str, Any]]:
        extra = self.extra or {}
        return f"[{extra['device']}] {extra['action']}: {msg}", kwargs


def device_logger(logger: logging.Logger, device: str, action: str) -> DeviceLogAdapter:
    return DeviceLogAdapter(logger, {"device": device or "?", "action": action})
