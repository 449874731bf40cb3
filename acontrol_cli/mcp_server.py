"""MCP server exposing RegistryClient operations as tools.

Run: python -m acontrol_cli.mcp_server
Requires: pip install .[mcp]
"""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from acontrol_cli.exceptions import CliError
from acontrol_cli.models import NfcCard
from acontrol_cli.registry import RegistryClient

mcp = FastMCP(
    "acontrol",
    instructions=(
        "Access control appliance NFC card registry. "
        "Card ids are integers; 0 lets the appliance assign one. "
        "authorize_card reports ok even when the appliance declines, "
        "so confirm with list_cards."
    ),
)

_client: RegistryClient | None = None


def _get_client() -> RegistryClient:
    """Return a cached RegistryClient, creating one on first use."""
    global _client
    if _client is None:
        _client = RegistryClient()
    return _client


def _contract_error(message: str, error_type: str = "error") -> dict:
    return {"ok": False, "error": {"type": error_type, "message": message}}


@mcp.tool()
def list_cards() -> dict:
    """List all cards registered on the appliance.

    Returns:
        Dict with ok and cards (list of {id, uuid, name}).
    """
    try:
        cards = _get_client().list_cards()
    except CliError as e:
        return _contract_error(str(e))
    return {"ok": True, "cards": [card.to_payload() for card in cards]}


@mcp.tool()
def authorize_card(name: str, uuid: str = "", card_id: int = 0) -> dict:
    """Authorize a card to access the device.

    Args:
        name: Card holder name (required).
        uuid: Card UUID, if already known.
        card_id: Registry id, 0 when unknown.
    """
    if not name.strip():
        return _contract_error("[ERROR] Card name cannot be empty.")
    card = NfcCard(id=card_id, uuid=uuid, name=name)
    try:
        _get_client().authorize_card(card)
    except CliError as e:
        return _contract_error(str(e))
    return {"ok": True, "card": card.to_payload()}


@mcp.tool()
def restore_card() -> dict:
    """Put the reader in restore mode; the next card presented is reset."""
    try:
        reply = _get_client().restore_card()
    except CliError as e:
        return _contract_error(str(e))
    return reply.to_dict()


def main():
    """Run the MCP server (stdio transport)."""
    mcp.run()


if __name__ == "__main__":
    main()
