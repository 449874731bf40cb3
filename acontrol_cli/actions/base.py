"""The Action contract and the error-reporting fallback variant."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@runtime_checkable
class Action(Protocol):
    """Anything an option table can route to.

    ``run`` receives the full argument list and returns True when handled
    successfully, False when handled but unsuccessful or incomplete.
    ``usage`` must never raise: help enumerates every action.
    """

    name: str
    description: str

    def usage(self) -> str: ...

    def run(self, argv: Sequence[str]) -> bool: ...


@dataclass(frozen=True)
class UnsupportedAction:
    """Placeholder for commands with no backing operation; always fails."""

    name: str
    description: str
    usage_text: str = ""

    def usage(self) -> str:
        return self.usage_text

    def run(self, argv: Sequence[str]) -> bool:
        print(f"[ERROR] {self.name}: not supported by this device.", file=sys.stderr)
        return False
