from __future__ import annotations

import pytest

from udpctl.config import get_settings
from udpctl.core import DeviceStore
from udpctl.host import LocalAccessoryHost


@pytest.fixture(autouse=True)
def _isolate_settings_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("UDPCTL_CONFIG", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class RecordingHost(LocalAccessoryHost):
    def __init__(self) -> None:
        super().__init__()
        self.registered: list[str] = []
        self.unregistered: list[str] = []

    def register(self, name, record) -> None:
        self.registered.append(name)
        super().register(name, record)

    def unregister(self, name) -> None:
        self.unregistered.append(name)
        super().unregister(name)


class RecordingSender:
    def __init__(self, error: OSError | None = None) -> None:
        self.sent: list[tuple[str, bytes, int]] = []
        self.error = error

    def __call__(self, ip: str, payload: bytes, port: int) -> None:
        if self.error is not None:
            raise self.error
        self.sent.append((ip, payload, port))


@pytest.fixture
def host() -> RecordingHost:
    return RecordingHost()


@pytest.fixture
def store(host: RecordingHost) -> DeviceStore:
    return DeviceStore(host)


@pytest.fixture
def sender() -> RecordingSender:
    return RecordingSender()
