from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

COMMAND_FIELDS = ("start", "stop", "charge", "locate")
METADATA_FIELDS = ("manufacturer", "model", "serial")
OPTIONAL_FIELDS = ("ip", *COMMAND_FIELDS, *METADATA_FIELDS)


class DeviceDefinition(BaseModel):
    model_config = {"extra": "forbid"}

    name: str
    ip: str | None = None
    start: str | None = None
    stop: str | None = None
    charge: str | None = None
    locate: str | None = None
    manufacturer: str | None = None
    model: str | None = None
    serial: str | None = None

    @field_validator(*METADATA_FIELDS, mode="before")
    @classmethod
    def _coerce_metadata(cls, value: Any) -> Any:
        if value is None or isinstance(value, str):
            return value
        return str(value)


class DeviceRecord(DeviceDefinition):
    state: bool = False

    def to_definition(self) -> DeviceDefinition:
        return DeviceDefinition.model_validate(self.model_dump(exclude={"state"}))


class DeviceConfig(BaseModel):
    model_config = {"extra": "forbid"}

    platform: str = "udpctl"
    devices: list[DeviceDefinition] = Field(default_factory=list)


class AccessoryCache(BaseModel):
    model_config = {"extra": "forbid"}

    accessories: list[DeviceRecord] = Field(default_factory=list)
