from __future__ import annotations

from .dispatcher import CommandDispatcher, SendResult, send_command
from .reconcile import ReconcileReport, reconcile
from .store import DeviceStore
from .wizard import ConfigurationWizard, Operation, Step, WizardOutput, WizardSession

__all__ = [
    "CommandDispatcher",
    "ConfigurationWizard",
    "DeviceStore",
    "Operation",
    "ReconcileReport",
    "SendResult",
    "Step",
    "WizardOutput",
    "WizardSession",
    "reconcile",
    "send_command",
]
