"""Routing tables: built once at import, never changed.

Adding a command means appending one (token, action) pair to the table of
the context it belongs to.
"""

from acontrol_cli import config
from acontrol_cli.actions import (
    ContextAction,
    FingerContextAction,
    HelpAction,
    NfcAuthorizeAction,
    NfcListAction,
    NfcRestoreAction,
    UnsupportedAction,
)
from acontrol_cli.options import OptionTable, build_table

NFC_COMMANDS: OptionTable = build_table(
    [
        (
            "authorize",
            NfcAuthorizeAction(
                name="Authorize",
                description="Authorize a new card to access this device",
            ),
        ),
        (
            "restore",
            NfcRestoreAction(
                name="Restore",
                description="Restore a formatted card to factory state",
            ),
        ),
        (
            "list",
            NfcListAction(
                name="List",
                description="List all registered cards",
            ),
        ),
        (
            "delete",
            UnsupportedAction(
                name="Delete",
                description="Unauthorize a card to access this device",
                usage_text=f"Usage: {config.PROG} nfc delete <options>",
            ),
        ),
    ]
)


def _contexts() -> OptionTable:
    return CONTEXTS


CONTEXTS: OptionTable = build_table(
    [
        (
            "nfc",
            ContextAction(
                name="NFC",
                description="NFC card reader: authorize, list and restore cards",
                token="nfc",
                commands=NFC_COMMANDS,
            ),
        ),
        (
            "finger",
            FingerContextAction(
                name="Fingerprint",
                description="Fingerprint reader",
            ),
        ),
        (
            "help",
            HelpAction(
                name="Help",
                description="Show every context with its commands and usage",
                contexts=_contexts,
            ),
        ),
    ]
)
