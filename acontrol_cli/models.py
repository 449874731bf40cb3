"""
Typed models for card registry payloads.
"""

import math
from dataclasses import dataclass

from acontrol_cli._utils import tolerant_field
from acontrol_cli.exceptions import CliError
from acontrol_cli.types import NfcCardPayload


@dataclass(frozen=True)
class NfcCard:
    """A card known to the registry. Replace, never mutate."""

    id: int = 0
    uuid: str = ""
    name: str = ""

    @classmethod
    def from_payload(cls, obj):
        """Build a card from a decoded JSON object, defaulting each field alone."""
        card_id, _ = tolerant_field(obj, "id", (int, float), 0)
        if isinstance(card_id, float) and not math.isfinite(card_id):
            card_id = 0
        uuid, _ = tolerant_field(obj, "uuid", str, "")
        name, _ = tolerant_field(obj, "name", str, "")
        return cls(id=int(card_id), uuid=uuid, name=name)

    @classmethod
    def from_parameters(cls, name, uuid="", card_id=""):
        """Build a card from command-line parameter strings."""
        if card_id:
            try:
                parsed = int(card_id)
            except ValueError as e:
                raise CliError(f"[ERROR] Card id must be an integer, got '{card_id}'.") from e
        else:
            parsed = 0
        return cls(id=parsed, uuid=uuid, name=name)

    def to_payload(self) -> NfcCardPayload:
        return {"id": self.id, "uuid": self.uuid, "name": self.name}


@dataclass(frozen=True)
class RegistryReply:
    """Generic {"ret": bool, "msg": str} reply from the appliance."""

    ok: bool = False
    message: str = ""

    @classmethod
    def from_payload(cls, obj):
        ok, _ = tolerant_field(obj, "ret", bool, False)
        message, _ = tolerant_field(obj, "msg", str, "")
        return cls(ok=ok, message=message)

    def to_dict(self):
        return {"ok": self.ok, "message": self.message}
