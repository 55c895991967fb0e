from __future__ import annotations

import json
import tomllib
from pathlib import Path

from pydantic import ValidationError

from udpctl.config import DEFAULT_DEVICES_FILE
from udpctl.models import (
    OPTIONAL_FIELDS,
    AccessoryCache,
    DeviceConfig,
    DeviceDefinition,
    DeviceRecord,
)
from udpctl.utils.toml import toml_string

CACHE_DIR = "cache"
ACCESSORY_CACHE_FILE = "accessories.json"


def _render_devices_toml(config: DeviceConfig) -> str:
    lines = [
        "# udpctl device definitions",
        "# Command codes are hex strings sent as single UDP datagrams",
        "",
        f"platform = {toml_string(config.platform)}",
    ]

    for device in config.devices:
        lines.append("")
        lines.append("[[devices]]")
        lines.append(f"name = {toml_string(device.name)}")
        for field in OPTIONAL_FIELDS:
            value = getattr(device, field)
            if value:
                lines.append(f"{field} = {toml_string(value)}")

    lines.append("")
    return "\n".join(lines)


class Database:
    def __init__(
        self, data_dir: Path, devices_file: str = DEFAULT_DEVICES_FILE
    ) -> None:
        self._data_dir = data_dir
        self._cache_dir = data_dir / CACHE_DIR
        self._devices_path = data_dir / devices_file
        self._cache_path = self._cache_dir / ACCESSORY_CACHE_FILE

    @property
    def path(self) -> Path:
        return self._data_dir

    @property
    def devices_path(self) -> Path:
        return self._devices_path

    @property
    def cache_path(self) -> Path:
        return self._cache_path

    def ensure_dirs(self) -> None:
        self._data_dir.mkdir(parents=True, exist_ok=True)
        self._cache_dir.mkdir(parents=True, exist_ok=True)

    def load_devices(self) -> DeviceConfig:
        if not self._devices_path.exists():
            return DeviceConfig()

        try:
            with self._devices_path.open("rb") as handle:
                data = tomllib.load(handle) or {}
        except tomllib.TOMLDecodeError as exc:
            raise ValueError(
                f"Invalid TOML in devices file: {self._devices_path}\n{exc}"
            ) from exc

        try:
            return DeviceConfig.model_validate(data)
        except ValidationError as exc:
            raise ValueError(
                f"Invalid devices file: {self._devices_path}\n{exc}"
            ) from exc

    def save_devices(self, config: DeviceConfig) -> None:
        self.ensure_dirs()
        self._devices_path.write_text(_render_devices_toml(config), encoding="utf-8")

    def configured_devices(self) -> list[DeviceDefinition]:
        return self.load_devices().devices

    def save_cache(self, records: list[DeviceRecord]) -> None:
        self.ensure_dirs()
        cache = AccessoryCache(accessories=records)
        with self._cache_path.open("w") as handle:
            json.dump(cache.model_dump(mode="json"), handle, indent=2)

    def load_cache(self) -> list[DeviceRecord]:
        if not self._cache_path.exists():
            return []

        try:
            with self._cache_path.open("r") as handle:
                data = json.load(handle)
            return AccessoryCache.model_validate(data).accessories
        except (json.JSONDecodeError, ValidationError) as exc:
            raise ValueError(
                f"Invalid accessory cache: {self._cache_path}\n{exc}"
            ) from exc

    def init(self, force: bool = False) -> bool:
        existed = self._devices_path.exists()
        self.ensure_dirs()
        if force or not existed:
            self.save_devices(DeviceConfig())
            if self._cache_path.exists():
                self._cache_path.unlink()
        return force or not existed
