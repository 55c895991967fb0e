"""Data models for udpctl."""

from udpctl.models.device import (
    COMMAND_FIELDS,
    METADATA_FIELDS,
    OPTIONAL_FIELDS,
    AccessoryCache,
    DeviceConfig,
    DeviceDefinition,
    DeviceRecord,
)
from udpctl.models.screens import (
    InputItem,
    InputScreen,
    InstructionScreen,
    ListScreen,
    Screen,
    WizardRequest,
    WizardResponse,
)

__all__ = [
    "COMMAND_FIELDS",
    "METADATA_FIELDS",
    "OPTIONAL_FIELDS",
    "AccessoryCache",
    "DeviceConfig",
    "DeviceDefinition",
    "DeviceRecord",
    "InputItem",
    "InputScreen",
    "InstructionScreen",
    "ListScreen",
    "Screen",
    "WizardRequest",
    "WizardResponse",
]
