from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from typing import Any

from udpctl.host import AccessoryHost
from udpctl.models import OPTIONAL_FIELDS, DeviceDefinition, DeviceRecord

logger = logging.getLogger(__name__)

DEFAULT_MANUFACTURER = "Default-Manufacturer"
DEFAULT_MODEL = "Default-Model"
DEFAULT_SERIAL = "Default-SerialNumber"


class DeviceStore:
    """Name-keyed registry of device records.

    Creating a record registers its accessory with the host and removing one
    unregisters it. Updates merge field by field: a non-empty incoming value
    replaces the stored one, an empty or missing value keeps it.
    """

    def __init__(self, host: AccessoryHost) -> None:
        self._host = host
        self._records: dict[str, DeviceRecord] = {}
        self._lock = threading.Lock()

    @property
    def host(self) -> AccessoryHost:
        return self._host

    def upsert(self, data: DeviceDefinition | Mapping[str, Any]) -> DeviceRecord:
        if not isinstance(data, DeviceDefinition):
            data = DeviceDefinition.model_validate(data)

        with self._lock:
            logger.info("Initializing device '%s'...", data.name)
            record = self._records.get(data.name)
            if record is None:
                record = DeviceRecord(name=data.name, state=False)
                _merge(record, data)
                self._host.register(record.name, record)
                self._records[record.name] = record
            else:
                _merge(record, data)
            return record

    def restore(self, record: DeviceRecord) -> None:
        """Put a record from the accessory cache back without registering it."""
        with self._lock:
            self._records[record.name] = record

    def remove(self, name: str) -> bool:
        with self._lock:
            if self._records.pop(name, None) is None:
                logger.debug("Device '%s' is not registered, nothing to remove", name)
                return False
            self._host.unregister(name)
        logger.info("%s is removed.", name)
        return True

    def lookup(self, name: str) -> DeviceRecord | None:
        return self._records.get(name)

    def list_all(self) -> list[DeviceRecord]:
        return list(self._records.values())

    def names(self) -> list[str]:
        return list(self._records)

    def refresh(self, name: str) -> None:
        """Push accessory information and power state, then mark it reachable."""
        record = self._records.get(name)
        if record is None:
            return
        self._host.push_accessory_info(
            name,
            record.manufacturer or DEFAULT_MANUFACTURER,
            record.model or DEFAULT_MODEL,
            record.serial or DEFAULT_SERIAL,
        )
        self._host.push_power_state(name, record.state)
        self._host.set_reachable(name, True)

    def __contains__(self, name: object) -> bool:
        return name in self._records

    def __len__(self) -> int:
        return len(self._records)


def _merge(record: DeviceRecord, data: DeviceDefinition) -> None:
    for field in OPTIONAL_FIELDS:
        value = getattr(data, field)
        if value:
            setattr(record, field, value)
