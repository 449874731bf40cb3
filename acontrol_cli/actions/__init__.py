"""Dispatchable actions.

Each variant is a frozen dataclass carrying its own ``name`` and
``description`` plus behaviour; none inherit from a shared base. They all
satisfy the ``Action`` protocol.
"""

from acontrol_cli.actions.base import Action, UnsupportedAction
from acontrol_cli.actions.context import ContextAction, FingerContextAction, HelpAction
from acontrol_cli.actions.nfc import NfcAuthorizeAction, NfcListAction, NfcRestoreAction

__all__ = [
    "Action",
    "ContextAction",
    "FingerContextAction",
    "HelpAction",
    "NfcAuthorizeAction",
    "NfcListAction",
    "NfcRestoreAction",
    "UnsupportedAction",
]
