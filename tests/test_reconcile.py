from __future__ import annotations

from udpctl.core import reconcile
from udpctl.models import DeviceDefinition, DeviceRecord


def test_configured_devices_are_added_and_reachable(store, host):
    report = reconcile(
        store,
        [
            DeviceDefinition(name="Vac1", ip="192.168.1.10"),
            DeviceDefinition(name="Vac2", ip="192.168.1.11"),
        ],
    )

    assert report.added == ["Vac1", "Vac2"]
    assert report.removed == []
    assert host.is_reachable("Vac1")
    assert host.is_reachable("Vac2")


def test_cached_device_missing_from_config_is_pruned(store, host):
    for name in ("Vac1", "Old"):
        host.restore(name)
        store.restore(DeviceRecord(name=name, ip="10.0.0.1", state=True))

    report = reconcile(store, [DeviceDefinition(name="Vac1", model="S6")])

    assert report.updated == ["Vac1"]
    assert report.removed == ["Old"]
    assert store.names() == ["Vac1"]
    assert host.names() == ["Vac1"]
    assert host.unregistered == ["Old"]


def test_persisting_device_is_never_unregistered(store, host):
    host.restore("Vac1")
    store.restore(DeviceRecord(name="Vac1", ip="10.0.0.1", state=True))

    reconcile(store, [DeviceDefinition(name="Vac1")])

    assert host.registered == []
    assert host.unregistered == []
    record = store.lookup("Vac1")
    assert record is not None
    assert record.ip == "10.0.0.1"
    assert record.state is True
    accessory = host.get("Vac1")
    assert accessory is not None
    assert accessory.on is True


def test_reconcile_is_idempotent(store, host):
    definitions = [DeviceDefinition(name="Vac1", ip="10.0.0.1")]

    reconcile(store, definitions)
    second = reconcile(store, definitions)

    assert second.updated == ["Vac1"]
    assert second.removed == []
    assert host.registered == ["Vac1"]
