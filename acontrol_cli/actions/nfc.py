"""NFC card reader commands backed by the card registry."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from acontrol_cli import config
from acontrol_cli.command_line import CommandLine
from acontrol_cli.exceptions import CliError
from acontrol_cli.formatters import format_cards_table, format_reply, mutation_response, output
from acontrol_cli.models import NfcCard
from acontrol_cli.registry import RegistryClient

ClientFactory = Callable[[], RegistryClient]


@dataclass(frozen=True)
class NfcAuthorizeAction:
    """Authorize a card by name (``--name``, optional ``--uuid`` / ``--id``)."""

    name: str
    description: str
    client_factory: ClientFactory = RegistryClient

    def usage(self) -> str:
        return f"Usage: {config.PROG} nfc authorize --name <name> [--uuid <uuid>] [--id <id>]"

    def run(self, argv: Sequence[str]) -> bool:
        cmd_line = CommandLine(argv)
        name = cmd_line.get_string_parameter("name")
        if not name:
            print(
                f"nfc authorize: missing --name. Type {config.PROG} help to show usage options.",
                file=sys.stderr,
            )
            return False
        try:
            card = NfcCard.from_parameters(
                name,
                uuid=cmd_line.get_string_parameter("uuid"),
                card_id=cmd_line.get_string_parameter("id"),
            )
        except CliError as e:
            print(str(e), file=sys.stderr)
            return False

        if not config.RUNTIME_QUIET and config.RUNTIME_FORMAT == "table":
            print(f"Authorizing {name}...")
        self.client_factory().authorize_card(card)
        mutation_response("Authorized", card, fmt=config.RUNTIME_FORMAT)
        return True


@dataclass(frozen=True)
class NfcListAction:
    """List every card registered on the appliance."""

    name: str
    description: str
    client_factory: ClientFactory = RegistryClient

    def usage(self) -> str:
        return f"Usage: {config.PROG} nfc list"

    def run(self, argv: Sequence[str]) -> bool:
        cards = self.client_factory().list_cards()
        output(
            {"cards": [card.to_payload() for card in cards]},
            format_cards_table,
            fmt=config.RUNTIME_FORMAT,
        )
        return True


@dataclass(frozen=True)
class NfcRestoreAction:
    """Put the reader in restore mode; the next card presented is reset."""

    name: str
    description: str
    client_factory: ClientFactory = RegistryClient

    def usage(self) -> str:
        return f"Usage: {config.PROG} nfc restore"

    def run(self, argv: Sequence[str]) -> bool:
        reply = self.client_factory().restore_card()
        output(reply.to_dict(), format_reply, fmt=config.RUNTIME_FORMAT)
        return reply.ok
