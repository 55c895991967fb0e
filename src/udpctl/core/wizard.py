"""Server-driven configuration wizard.

Each call to ``ConfigurationWizard.advance`` consumes the operator's answer
to the previous screen and returns the next session state together with
exactly one new screen, or no screen once the flow has finished.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, replace
from enum import IntEnum

from udpctl.core.store import DeviceStore
from udpctl.errors import WizardInputError
from udpctl.models import (
    OPTIONAL_FIELDS,
    DeviceConfig,
    DeviceDefinition,
    InputItem,
    InputScreen,
    InstructionScreen,
    ListScreen,
    Screen,
    WizardRequest,
    WizardResponse,
)

logger = logging.getLogger(__name__)


class Step(IntEnum):
    MENU = 1
    MENU_CHOICE = 2
    RESOLVE_TARGET = 3
    SUBMIT_FIELDS = 4
    REMOVE_TARGET = 5
    PERSIST = 6


class Operation(IntEnum):
    ADD = 0
    MODIFY = 1


class MenuChoice(IntEnum):
    ADD = 0
    MODIFY = 1
    REMOVE = 2


MENU_ITEMS = [
    "Add New Device",
    "Modify Existing Device",
    "Remove Existing Device",
]

UNCHANGED_PLACEHOLDER = "Leave blank if unchanged"

# (id, title, placeholder when adding)
DEVICE_FIELDS = [
    ("ip", "Ip Address", "192.168.1.2"),
    ("start", "HEX Value for Start", "HEX Data"),
    ("stop", "HEX Value for Stop", "HEX Data"),
    ("charge", "HEX Value for Charge", "HEX Data"),
    ("locate", "HEX Value for Locate", "HEX Data"),
    ("manufacturer", "Manufacturer", "Default-Manufacturer"),
    ("model", "Model", "Default-Model"),
    ("serial", "Serial", "Default-SerialNumber"),
]


@dataclass(frozen=True)
class WizardSession:
    step: Step | None = None
    operation: Operation | None = None
    name_list: tuple[str, ...] | None = None
    target_name: str | None = None


@dataclass(frozen=True)
class WizardOutput:
    screen: Screen | None = None
    config: DeviceConfig | None = None
    finished: bool = False


Persist = Callable[[DeviceConfig], None]


class ConfigurationWizard:
    def __init__(
        self, store: DeviceStore, config: DeviceConfig, persist: Persist
    ) -> None:
        self._store = store
        self._config = config
        self._persist = persist

    def advance(
        self, session: WizardSession, request: WizardRequest | None = None
    ) -> tuple[WizardSession, WizardOutput]:
        if request is not None and request.is_terminate:
            logger.debug("Wizard terminated at step %s", session.step)
            return WizardSession(), WizardOutput(finished=True)

        if session.step is None:
            return _instructions(session)

        handler = self._handlers.get(session.step)
        if handler is None:
            return _instructions(WizardSession())

        try:
            return handler(self, session, _response(request))
        except WizardInputError as exc:
            logger.info("Wizard input rejected: %s", exc.detail)
            return _back_to_menu(session, "Error", exc.detail)

    def _menu(
        self, session: WizardSession, _response: WizardResponse
    ) -> tuple[WizardSession, WizardOutput]:
        screen = ListScreen(title="What do you want to do?", items=list(MENU_ITEMS))
        return replace(session, step=Step.MENU_CHOICE), WizardOutput(screen=screen)

    def _menu_choice(
        self, session: WizardSession, response: WizardResponse
    ) -> tuple[WizardSession, WizardOutput]:
        choice = _selection(response, len(MENU_ITEMS))

        if choice == MenuChoice.ADD:
            screen = InputScreen(
                title="New Device",
                items=[
                    InputItem(
                        id="name", title="Name (Required)", placeholder="Robot Vacuum"
                    )
                ],
            )
            session = replace(
                session, step=Step.RESOLVE_TARGET, operation=Operation.ADD
            )
            return session, WizardOutput(screen=screen)

        names = tuple(self._store.names())
        if not names:
            return _back_to_menu(session, "Unavailable", "No Device is configured.")

        if choice == MenuChoice.MODIFY:
            title = "Which Device do you want to modify?"
            session = replace(
                session, step=Step.RESOLVE_TARGET, operation=Operation.MODIFY
            )
        else:
            title = "Which Device do you want to remove?"
            session = replace(session, step=Step.REMOVE_TARGET, operation=None)

        screen = ListScreen(title=title, items=list(names))
        return replace(session, name_list=names), WizardOutput(screen=screen)

    def _resolve_target(
        self, session: WizardSession, response: WizardResponse
    ) -> tuple[WizardSession, WizardOutput]:
        operation = session.operation
        snapshot = session.name_list
        # The selection snapshot is single-use whatever the outcome.
        session = replace(session, name_list=None, operation=None)

        name: str | None = None
        if operation == Operation.ADD:
            name = response.inputs.get("name", "").strip() or None
        elif operation == Operation.MODIFY:
            selected = _pick_name(response, snapshot)
            record = self._store.lookup(selected)
            name = record.name if record is not None else None

        if not name:
            return _back_to_menu(session, "Error", "Name of the device is missing.")

        modifying = operation == Operation.MODIFY
        screen = InputScreen(
            title=name,
            items=[
                InputItem(
                    id=field_id,
                    title=title,
                    placeholder=UNCHANGED_PLACEHOLDER if modifying else example,
                )
                for field_id, title, example in DEVICE_FIELDS
            ],
        )
        session = replace(session, step=Step.SUBMIT_FIELDS, target_name=name)
        return session, WizardOutput(screen=screen)

    def _submit_fields(
        self, session: WizardSession, response: WizardResponse
    ) -> tuple[WizardSession, WizardOutput]:
        name = session.target_name
        if not name:
            raise WizardInputError("Name of the device is missing.")

        existing = self._store.lookup(name)
        if existing is not None:
            draft = existing.to_definition().model_copy(deep=True)
        else:
            draft = DeviceDefinition(name=name)

        for field in OPTIONAL_FIELDS:
            value = response.inputs.get(field, "").strip()
            if value:
                setattr(draft, field, value)

        self._store.upsert(draft)
        self._store.refresh(name)

        screen = InstructionScreen(
            title="Success", detail="The new device is now updated."
        )
        return replace(session, step=Step.PERSIST), WizardOutput(screen=screen)

    def _remove_target(
        self, session: WizardSession, response: WizardResponse
    ) -> tuple[WizardSession, WizardOutput]:
        name = _pick_name(response, session.name_list)
        session = replace(session, name_list=None)
        self._store.remove(name)

        screen = InstructionScreen(title="Success", detail="The device is now removed.")
        return replace(session, step=Step.PERSIST), WizardOutput(screen=screen)

    def _persist_devices(
        self, session: WizardSession, _response: WizardResponse
    ) -> tuple[WizardSession, WizardOutput]:
        devices = [record.to_definition() for record in self._store.list_all()]
        self._config = self._config.model_copy(update={"devices": devices})
        self._persist(self._config)
        logger.info("Persisted %d device definition(s)", len(devices))
        return WizardSession(), WizardOutput(config=self._config, finished=True)

    _handlers = {
        Step.MENU: _menu,
        Step.MENU_CHOICE: _menu_choice,
        Step.RESOLVE_TARGET: _resolve_target,
        Step.SUBMIT_FIELDS: _submit_fields,
        Step.REMOVE_TARGET: _remove_target,
        Step.PERSIST: _persist_devices,
    }


def _instructions(session: WizardSession) -> tuple[WizardSession, WizardOutput]:
    screen = InstructionScreen(
        title="Before You Start...",
        detail="Make sure the devices are reachable on the local network.",
    )
    return replace(session, step=Step.MENU), WizardOutput(screen=screen)


def _back_to_menu(
    session: WizardSession, title: str, detail: str
) -> tuple[WizardSession, WizardOutput]:
    screen = InstructionScreen(title=title, detail=detail)
    session = replace(
        session, step=Step.MENU, operation=None, name_list=None, target_name=None
    )
    return session, WizardOutput(screen=screen)


def _response(request: WizardRequest | None) -> WizardResponse:
    if request is None or request.response is None:
        return WizardResponse()
    return request.response


def _selection(response: WizardResponse, count: int) -> int:
    if not response.selections:
        raise WizardInputError("No selection was made.")
    index = response.selections[0]
    if not 0 <= index < count:
        raise WizardInputError(f"Selection {index} is out of range.")
    return index


def _pick_name(response: WizardResponse, snapshot: tuple[str, ...] | None) -> str:
    if not snapshot:
        raise WizardInputError("The device list is no longer available.")
    return snapshot[_selection(response, len(snapshot))]
