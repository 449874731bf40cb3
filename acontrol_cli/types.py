"""Typed wire definitions for the card registry HTTP/JSON contract.

These TypedDicts document the shape of request and response bodies.
They are optional: decoding is lenient and never validates against them.
"""

from __future__ import annotations

from typing import TypedDict


class NfcCardPayload(TypedDict):
    """One card as sent to and received from the registry."""

    id: int
    uuid: str
    name: str


class CardListPayload(TypedDict, total=False):
    """Body of GET /nfc/card."""

    ret: bool
    msg: str
    cards: list[NfcCardPayload]


class AuthorizeResponse(TypedDict, total=False):
    """Body of POST /nfc/card/authorize."""

    status: bool


class RegistryReplyPayload(TypedDict, total=False):
    """Default appliance reply (e.g. GET /nfc/card/restore)."""

    ret: bool
    msg: str
