"""Error types raised or reported by udpctl."""

from __future__ import annotations


class UdpCtlError(Exception):
    """Base class for udpctl errors."""


class TransportError(UdpCtlError):
    """A command datagram could not be sent."""

    def __init__(self, device: str, action: str, reason: str) -> None:
        super().__init__(f"Failed to {action} {device}: {reason}")
        self.device = device
        self.action = action
        self.reason = reason


class WizardInputError(UdpCtlError):
    """Operator input at a wizard step is missing or out of range."""

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail
