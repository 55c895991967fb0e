from __future__ import annotations

import pytest

from udpctl.core import ConfigurationWizard, Operation, Step, WizardSession
from udpctl.models import (
    DeviceConfig,
    DeviceDefinition,
    InputScreen,
    InstructionScreen,
    ListScreen,
    WizardRequest,
)


@pytest.fixture
def persisted() -> list[DeviceConfig]:
    return []


@pytest.fixture
def wizard(store, persisted) -> ConfigurationWizard:
    return ConfigurationWizard(store, DeviceConfig(), persisted.append)


def _at_menu(wizard: ConfigurationWizard) -> WizardSession:
    session, _ = wizard.advance(WizardSession())
    session, _ = wizard.advance(session, WizardRequest())
    return session


def test_fresh_session_shows_instructions(wizard):
    session, output = wizard.advance(WizardSession())

    assert isinstance(output.screen, InstructionScreen)
    assert output.screen.title == "Before You Start..."
    assert session.step == Step.MENU


def test_menu_offers_three_operations(wizard):
    session, output = wizard.advance(WizardSession(step=Step.MENU), WizardRequest())

    assert isinstance(output.screen, ListScreen)
    assert output.screen.items == [
        "Add New Device",
        "Modify Existing Device",
        "Remove Existing Device",
    ]
    assert session.step == Step.MENU_CHOICE


@pytest.mark.parametrize("choice", [1, 2])
def test_modify_or_remove_without_devices_is_unavailable(wizard, choice):
    session = _at_menu(wizard)

    session, output = wizard.advance(session, WizardRequest.select(choice))

    assert isinstance(output.screen, InstructionScreen)
    assert output.screen.title == "Unavailable"
    assert session.step == Step.MENU
    assert session.name_list is None


def test_add_flow_persists_new_device_alongside_existing(wizard, store, persisted):
    store.upsert({"name": "Vac1", "ip": "192.168.1.10", "start": "AA", "stop": "BB"})
    session = _at_menu(wizard)

    session, output = wizard.advance(session, WizardRequest.select(0))
    assert isinstance(output.screen, InputScreen)
    assert session.operation == Operation.ADD

    session, output = wizard.advance(session, WizardRequest.submit(name="Vac2"))
    assert isinstance(output.screen, InputScreen)
    assert output.screen.title == "Vac2"
    assert output.screen.items[0].placeholder == "192.168.1.2"
    assert session.step == Step.SUBMIT_FIELDS
    assert session.operation is None
    assert session.name_list is None

    session, output = wizard.advance(
        session, WizardRequest.submit(ip="192.168.1.20", start="A1", stop="B1")
    )
    assert isinstance(output.screen, InstructionScreen)
    assert output.screen.title == "Success"

    session, output = wizard.advance(session, WizardRequest())

    assert output.finished
    assert output.screen is None
    assert session == WizardSession()
    (config,) = persisted
    assert config is output.config
    assert config.devices == [
        DeviceDefinition(name="Vac1", ip="192.168.1.10", start="AA", stop="BB"),
        DeviceDefinition(name="Vac2", ip="192.168.1.20", start="A1", stop="B1"),
    ]


def test_add_with_empty_name_returns_to_menu(wizard, store):
    session = _at_menu(wizard)
    session, _ = wizard.advance(session, WizardRequest.select(0))

    session, output = wizard.advance(session, WizardRequest.submit(name="  "))

    assert isinstance(output.screen, InstructionScreen)
    assert output.screen.title == "Error"
    assert session.step == Step.MENU
    assert session.operation is None
    assert len(store) == 0


def test_modify_without_ip_keeps_stored_ip(wizard, store, persisted):
    store.upsert({"name": "Vac1", "ip": "192.168.1.10", "start": "AA", "model": "S5"})
    session = _at_menu(wizard)

    session, output = wizard.advance(session, WizardRequest.select(1))
    assert isinstance(output.screen, ListScreen)
    assert output.screen.items == ["Vac1"]
    assert session.name_list == ("Vac1",)

    session, output = wizard.advance(session, WizardRequest.select(0))
    assert isinstance(output.screen, InputScreen)
    assert {item.placeholder for item in output.screen.items} == {
        "Leave blank if unchanged"
    }
    assert session.name_list is None
    assert session.target_name == "Vac1"

    session, _ = wizard.advance(session, WizardRequest.submit(ip="", start="AB"))
    wizard.advance(session, WizardRequest())

    record = store.lookup("Vac1")
    assert record is not None
    assert record.ip == "192.168.1.10"
    assert record.start == "AB"
    assert record.model == "S5"
    assert persisted[0].devices[0].ip == "192.168.1.10"


def test_modify_does_not_touch_live_record_before_submission(wizard, store):
    live = store.upsert({"name": "Vac1", "ip": "192.168.1.10"})
    session = _at_menu(wizard)
    session, _ = wizard.advance(session, WizardRequest.select(1))
    session, _ = wizard.advance(session, WizardRequest.select(0))

    session, _ = wizard.advance(session, WizardRequest.terminate())

    assert live.ip == "192.168.1.10"
    assert session == WizardSession()


def test_remove_flow(wizard, store, host, persisted):
    store.upsert({"name": "Vac1"})
    store.upsert({"name": "Vac2"})
    session = _at_menu(wizard)

    session, output = wizard.advance(session, WizardRequest.select(2))
    assert isinstance(output.screen, ListScreen)
    assert session.step == Step.REMOVE_TARGET

    session, output = wizard.advance(session, WizardRequest.select(1))
    assert isinstance(output.screen, InstructionScreen)
    assert output.screen.detail == "The device is now removed."
    assert session.name_list is None

    wizard.advance(session, WizardRequest())

    assert host.unregistered == ["Vac2"]
    assert [device.name for device in persisted[0].devices] == ["Vac1"]


def test_out_of_range_selection_returns_to_menu(wizard, store):
    store.upsert({"name": "Vac1"})
    session = _at_menu(wizard)
    session, _ = wizard.advance(session, WizardRequest.select(2))

    session, output = wizard.advance(session, WizardRequest.select(5))

    assert isinstance(output.screen, InstructionScreen)
    assert output.screen.title == "Error"
    assert session.step == Step.MENU
    assert store.names() == ["Vac1"]


def test_terminate_ends_session_without_persisting(wizard, persisted):
    session = _at_menu(wizard)

    session, output = wizard.advance(session, WizardRequest.terminate())

    assert output.finished
    assert output.config is None
    assert session == WizardSession()
    assert persisted == []


def test_add_with_existing_name_edits_that_device(wizard, store, host, persisted):
    store.upsert({"name": "Vac1", "ip": "192.168.1.10", "start": "AA", "model": "S5"})
    session = _at_menu(wizard)
    session, _ = wizard.advance(session, WizardRequest.select(0))
    session, _ = wizard.advance(session, WizardRequest.submit(name="Vac1"))

    session, output = wizard.advance(session, WizardRequest.submit(start="CC"))
    assert isinstance(output.screen, InstructionScreen)
    assert output.screen.title == "Success"
    wizard.advance(session, WizardRequest())

    assert store.names() == ["Vac1"]
    record = store.lookup("Vac1")
    assert record is not None
    assert record.ip == "192.168.1.10"
    assert record.model == "S5"
    assert record.start == "CC"
    assert host.registered == ["Vac1"]
    assert persisted[0].devices == [
        DeviceDefinition(name="Vac1", ip="192.168.1.10", start="CC", model="S5")
    ]
