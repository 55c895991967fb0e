from __future__ import annotations

import logging
import socket
import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from udpctl.config import DEFAULT_COMMAND_PORT
from udpctl.errors import TransportError
from udpctl.models import DeviceRecord
from udpctl.utils.logging import device_logger

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SendResult:
    ok: bool
    error: TransportError | None = None

    def __bool__(self) -> bool:
        return self.ok


Sender = Callable[[str, bytes, int], None]


def send_datagram(ip: str, payload: bytes, port: int) -> None:
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
        sock.sendto(payload, (ip, port))


def send_command(
    ip: str | None,
    payload_hex: str | None,
    port: int = DEFAULT_COMMAND_PORT,
    *,
    device: str = "",
    action: str = "send command to",
    sender: Sender = send_datagram,
) -> SendResult:
    """Hex-decode a command code and send it as one UDP datagram."""
    log = device_logger(logger, device, action)
    if not ip:
        return _failure(log, device, action, "no ip address configured")
    if not payload_hex:
        return _failure(log, device, action, "no command code configured")

    try:
        payload = bytes.fromhex(payload_hex)
    except ValueError as exc:
        reason = f"invalid hex command {payload_hex!r}: {exc}"
        return _failure(log, device, action, reason)

    try:
        sender(ip, payload, port)
    except OSError as exc:
        return _failure(log, device, action, str(exc))

    log.debug("sent %d byte(s) to %s:%d", len(payload), ip, port)
    return SendResult(ok=True)


def _failure(
    log: logging.LoggerAdapter, device: str, action: str, reason: str
) -> SendResult:
    log.warning("failed: %s", reason)
    return SendResult(ok=False, error=TransportError(device, action, reason))


class _DeviceLock:
    __slots__ = ("lock", "users")

    def __init__(self) -> None:
        self.lock = threading.Lock()
        self.users = 0


class CommandDispatcher:
    """Sends start/stop/locate/charge command codes to devices.

    Commands for the same device are serialized. Lock entries only live while
    a command for that device is in flight.
    """

    def __init__(
        self, port: int = DEFAULT_COMMAND_PORT, sender: Sender = send_datagram
    ) -> None:
        self._port = port
        self._sender = sender
        self._guard = threading.Lock()
        self._locks: dict[str, _DeviceLock] = {}

    @contextmanager
    def _device_lock(self, name: str) -> Iterator[None]:
        with self._guard:
            entry = self._locks.setdefault(name, _DeviceLock())
            entry.users += 1
        try:
            with entry.lock:
                yield
        finally:
            with self._guard:
                entry.users -= 1
                if entry.users == 0:
                    del self._locks[name]

    def _send(
        self, record: DeviceRecord, payload: str | None, action: str
    ) -> SendResult:
        return send_command(
            record.ip,
            payload,
            self._port,
            device=record.name,
            action=action,
            sender=self._sender,
        )

    def set_power_state(self, record: DeviceRecord, on: bool) -> SendResult:
        action = "turn on" if on else "turn off"
        with self._device_lock(record.name):
            result = self._send(record, record.start if on else record.stop, action)
            if result:
                record.state = on
                device_logger(logger, record.name, action).info("done")
        return result

    def get_power_state(self, record: DeviceRecord) -> bool:
        return record.state

    def identify(self, record: DeviceRecord) -> SendResult:
        with self._device_lock(record.name):
            result = self._send(record, record.locate, "identify")
        if result:
            device_logger(logger, record.name, "identify").info("requested")
        return result

    def dock(self, record: DeviceRecord) -> SendResult:
        with self._device_lock(record.name):
            result = self._send(record, record.charge, "dock")
        if result:
            device_logger(logger, record.name, "dock").info("returning to its dock")
        return result
