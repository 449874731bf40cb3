"""
RegistryClient: typed access to the appliance's NFC card registry.

Single entry point for programmatic use, the CLI actions and the MCP server.
Responses are decoded leniently: missing or mistyped fields fall back to
defaults and missing collections become empty, never errors.
"""

from __future__ import annotations

from dataclasses import dataclass

from acontrol_cli import config
from acontrol_cli._utils import tolerant_field, tolerant_object
from acontrol_cli.api import _decode_json, _http_request, _log_http_event
from acontrol_cli.exceptions import CliError, HTTPError
from acontrol_cli.models import NfcCard, RegistryReply

CARDS_PATH = "nfc/card"
AUTHORIZE_PATH = "nfc/card/authorize"
RESTORE_PATH = "nfc/card/restore"


@dataclass(frozen=True)
class RegistryConfig:
    """Where the card registry lives. ``api_key`` is carried but never sent."""

    host: str = config.DEFAULT_HOST
    port: int = config.DEFAULT_PORT
    protocol: str = config.DEFAULT_PROTOCOL
    api_key: str = ""

    @classmethod
    def from_env(cls) -> RegistryConfig:
        protocol = config.REGISTRY_PROTOCOL.lower()
        if protocol not in config.VALID_PROTOCOLS:
            raise CliError(
                f"[ERROR] Invalid ACONTROL_PROTOCOL '{config.REGISTRY_PROTOCOL}'. "
                f"Use: {', '.join(sorted(config.VALID_PROTOCOLS))}"
            )
        if not 0 < config.REGISTRY_PORT < 65536:
            raise CliError(f"[ERROR] Invalid ACONTROL_PORT '{config.REGISTRY_PORT}'.")
        return cls(
            host=config.REGISTRY_HOST,
            port=config.REGISTRY_PORT,
            protocol=protocol,
            api_key=config.REGISTRY_API_KEY,
        )

    def uri(self, path: str) -> str:
        return f"{self.protocol}://{self.host}:{self.port}/{path}"


class RegistryClient:
    """HTTP/JSON client for the card registry. One request per call, no retries."""

    def __init__(self, registry_config: RegistryConfig | None = None):
        self.config = registry_config or RegistryConfig.from_env()

    def _request(self, path, data=None, method="GET"):
        """Perform a request and return the decoded body (None if not JSON).

        Non-2xx bodies are decoded the same way as 2xx ones.
        """
        try:
            raw = _http_request(self.config.uri(path), data=data, method=method)
        except HTTPError as e:
            raw = e.body
        return _decode_json(raw)

    # -------------------------------------------------------------------
    # Card operations
    # -------------------------------------------------------------------

    def list_cards(self) -> list[NfcCard]:
        """List all registered cards.

        A body without a ``cards`` array yields an empty list. Elements that
        are not objects are skipped.
        """
        body = tolerant_object(self._request(CARDS_PATH))
        cards, present = tolerant_field(body, "cards", list, [])
        if not present:
            return []
        return [NfcCard.from_payload(item) for item in cards if isinstance(item, dict)]

    def authorize_card(self, card: NfcCard) -> None:
        """Ask the registry to authorize *card*.

        The response's ``status`` is decoded but not acted on: this returns
        without error whatever the status, HTTP code or body shape.
        """
        body = self._request(AUTHORIZE_PATH, data=card.to_payload(), method="POST")
        status, present = tolerant_field(body, "status", bool, False)
        _log_http_event(phase="decode", path=AUTHORIZE_PATH, status_field=status, present=present)
        return None

    def restore_card(self) -> RegistryReply:
        """Switch the reader into restore mode for the next presented card."""
        return RegistryReply.from_payload(self._request(RESTORE_PATH))
