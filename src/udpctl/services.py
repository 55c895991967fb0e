"""Application services wiring storage, host, store and dispatcher."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from udpctl.config import Settings
from udpctl.core import (
    CommandDispatcher,
    ConfigurationWizard,
    DeviceStore,
    ReconcileReport,
    SendResult,
    reconcile,
)
from udpctl.core.dispatcher import Sender, send_datagram
from udpctl.host import LocalAccessoryHost
from udpctl.models import DeviceConfig, DeviceRecord
from udpctl.storage import Database

logger = logging.getLogger(__name__)


@dataclass
class Platform:
    """One udpctl instance bound to a data directory.

    Usage:
        platform = Platform(Database(path), settings)
        platform.launch()
        platform.set_power("Vac1", True)
    """

    database: Database
    settings: Settings = field(default_factory=Settings)
    sender: Sender | None = None
    host: LocalAccessoryHost = field(default_factory=LocalAccessoryHost)

    def __post_init__(self) -> None:
        self.store = DeviceStore(self.host)
        self.dispatcher = CommandDispatcher(
            port=self.settings.dispatch.port, sender=self.sender or send_datagram
        )

    def launch(self) -> ReconcileReport:
        """Restore cached accessories and reconcile them with the configuration."""
        for record in self.database.load_cache():
            self.host.restore(record.name)
            self.store.restore(record)

        report = reconcile(self.store, self.database.configured_devices())
        self.save_cache()
        return report

    def save_cache(self) -> None:
        self.database.save_cache(self.store.list_all())

    def _lookup(self, name: str) -> DeviceRecord | None:
        record = self.store.lookup(name)
        if record is None:
            logger.info("Ignoring request for unknown device '%s'", name)
        return record

    def set_power(self, name: str, on: bool) -> SendResult | None:
        record = self._lookup(name)
        if record is None:
            return None
        result = self.dispatcher.set_power_state(record, on)
        if result:
            self.host.push_power_state(name, on)
            self.save_cache()
        return result

    def power_state(self, name: str) -> bool | None:
        record = self._lookup(name)
        if record is None:
            return None
        return self.dispatcher.get_power_state(record)

    def identify(self, name: str) -> SendResult | None:
        record = self._lookup(name)
        if record is None:
            return None
        return self.dispatcher.identify(record)

    def dock(self, name: str) -> SendResult | None:
        record = self._lookup(name)
        if record is None:
            return None
        return self.dispatcher.dock(record)

    def persist(self, config: DeviceConfig) -> None:
        self.database.save_devices(config)
        self.save_cache()

    def wizard(self) -> ConfigurationWizard:
        return ConfigurationWizard(
            self.store, self.database.load_devices(), self.persist
        )
