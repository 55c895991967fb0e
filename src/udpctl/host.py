"""Accessory host collaborators.

The host owns the externally visible accessory objects. udpctl only keeps
a name-keyed back-reference and talks to the host through AccessoryHost.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from typing import Protocol

from udpctl.models import DeviceRecord

logger = logging.getLogger(__name__)

ACCESSORY_NAMESPACE = uuid.UUID("6f1b8f3e-5a43-4c5e-9c1e-2f0d7a9b4c11")
SWITCH_CATEGORY = 8


class AccessoryHost(Protocol):
    def register(self, name: str, record: DeviceRecord) -> None: ...

    def unregister(self, name: str) -> None: ...

    def push_accessory_info(
        self, name: str, manufacturer: str, model: str, serial: str
    ) -> None: ...

    def push_power_state(self, name: str, on: bool) -> None: ...

    def set_reachable(self, name: str, reachable: bool) -> None: ...

    def is_reachable(self, name: str) -> bool: ...


@dataclass
class Accessory:
    name: str
    uuid: str
    category: int = SWITCH_CATEGORY
    manufacturer: str = ""
    model: str = ""
    serial: str = ""
    on: bool = False
    reachable: bool = False


def accessory_uuid(name: str) -> str:
    return str(uuid.uuid5(ACCESSORY_NAMESPACE, name))


class LocalAccessoryHost:
    """In-process accessory host backing the CLI."""

    def __init__(self) -> None:
        self._accessories: dict[str, Accessory] = {}

    def register(self, name: str, record: DeviceRecord) -> None:
        # New accessories are always reachable.
        self._accessories[name] = Accessory(
            name=name, uuid=accessory_uuid(name), on=record.state, reachable=True
        )
        logger.debug("Registered accessory '%s'", name)

    def restore(self, name: str) -> None:
        """Re-attach a cached accessory; it stays unreachable until refreshed."""
        self._accessories[name] = Accessory(name=name, uuid=accessory_uuid(name))

    def unregister(self, name: str) -> None:
        self._accessories.pop(name, None)
        logger.debug("Unregistered accessory '%s'", name)

    def push_accessory_info(
        self, name: str, manufacturer: str, model: str, serial: str
    ) -> None:
        accessory = self._accessories.get(name)
        if accessory is None:
            return
        accessory.manufacturer = manufacturer
        accessory.model = model
        accessory.serial = serial

    def push_power_state(self, name: str, on: bool) -> None:
        accessory = self._accessories.get(name)
        if accessory is not None:
            accessory.on = on

    def set_reachable(self, name: str, reachable: bool) -> None:
        accessory = self._accessories.get(name)
        if accessory is not None:
            accessory.reachable = reachable

    def is_reachable(self, name: str) -> bool:
        accessory = self._accessories.get(name)
        return accessory is not None and accessory.reachable

    def get(self, name: str) -> Accessory | None:
        return self._accessories.get(name)

    def names(self) -> list[str]:
        return list(self._accessories)
