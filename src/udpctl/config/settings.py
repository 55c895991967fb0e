"""udpctl settings.

Settings are read from ``$UDPCTL_CONFIG`` or the XDG config directory and
describe where device definitions live and how commands are sent.
"""

from __future__ import annotations

import os
import tomllib
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from udpctl.utils.toml import toml_string

APP_NAME = "udpctl"
CONFIG_FILENAME = "config.toml"
CONFIG_ENV_VAR = "UDPCTL_CONFIG"
DEFAULT_COMMAND_PORT = 54321
DEFAULT_DEVICES_FILE = "devices.toml"


def expand_path(value: str) -> Path:
    return Path(os.path.expandvars(os.path.expanduser(value)))


def default_config_path() -> Path:
    config_home = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(config_home) / APP_NAME / CONFIG_FILENAME


def default_data_dir() -> Path:
    data_home = os.environ.get("XDG_DATA_HOME") or str(
        Path.home() / ".local" / "share"
    )
    return Path(data_home) / APP_NAME


class DatabaseConfig(BaseModel):
    model_config = {"frozen": True, "extra": "forbid"}

    path: str = Field(default_factory=lambda: str(default_data_dir()))
    devices_file: str = Field(default=DEFAULT_DEVICES_FILE, min_length=1)


class DispatchConfig(BaseModel):
    """Where command datagrams are sent on each device."""

    model_config = {"frozen": True, "extra": "forbid"}

    port: int = Field(default=DEFAULT_COMMAND_PORT, ge=1, le=65535)


class Settings(BaseModel):
    model_config = {"frozen": True, "extra": "forbid"}

    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    dispatch: DispatchConfig = Field(default_factory=DispatchConfig)

    @property
    def data_dir(self) -> Path:
        return expand_path(self.database.path)

    @property
    def devices_path(self) -> Path:
        return self.data_dir / self.database.devices_file

    def to_toml(self) -> str:
        return "\n".join(
            [
                "# udpctl configuration",
                "",
                "[database]",
                f"path = {toml_string(self.database.path)}",
                f"devices_file = {toml_string(self.database.devices_file)}",
                "",
                "[dispatch]",
                f"port = {self.dispatch.port}",
                "",
            ]
        )


def resolve_config_path(allow_missing: bool = False) -> tuple[Path, bool]:
    """Return the config file path and whether it exists.

    An explicit ``$UDPCTL_CONFIG`` must exist unless ``allow_missing`` is set.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if not env_path:
        path = default_config_path()
        return path, path.exists()

    path = expand_path(env_path)
    if not path.exists() and not allow_missing:
        raise FileNotFoundError(f"{CONFIG_ENV_VAR} points to missing file: {path}")
    return path, path.exists()


def load_settings(path: Path) -> Settings:
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise ValueError(f"Invalid TOML in config file: {path}\n{exc}") from exc

    try:
        return Settings.model_validate(data)
    except ValidationError as exc:
        raise ValueError(f"Invalid config file: {path}\n{exc}") from exc


@lru_cache
def get_settings() -> Settings:
    path, exists = resolve_config_path()
    return load_settings(path) if exists else Settings()


def write_settings(settings: Settings, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(settings.to_toml(), encoding="utf-8")
