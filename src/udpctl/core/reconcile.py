from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from udpctl.core.store import DeviceStore
from udpctl.models import DeviceDefinition

logger = logging.getLogger(__name__)


@dataclass
class ReconcileReport:
    added: list[str] = field(default_factory=list)
    updated: list[str] = field(default_factory=list)
    removed: list[str] = field(default_factory=list)


def reconcile(
    store: DeviceStore, definitions: Iterable[DeviceDefinition]
) -> ReconcileReport:
    """Sync the store with the configured definitions.

    Every configured device is upserted and refreshed first. Only then are
    records whose accessory is still unreachable pruned, so a name present
    in both the cache and the configuration is never unregistered.
    """
    report = ReconcileReport()

    for definition in definitions:
        existed = definition.name in store
        store.upsert(definition)
        store.refresh(definition.name)
        (report.updated if existed else report.added).append(definition.name)

    for name in store.names():
        if not store.host.is_reachable(name):
            store.remove(name)
            report.removed.append(name)

    logger.info(
        "Reconciled devices: %d added, %d updated, %d removed",
        len(report.added),
        len(report.updated),
        len(report.removed),
    )
    return report
