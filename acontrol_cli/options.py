"""Option tables: token to Action routing for one dispatch level.

Imports project code only for type checking. A table is a plain tuple
of Option, built once at startup and never changed.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from acontrol_cli.actions.base import Action


@dataclass(frozen=True)
class Option:
    """One routable token and the action bound to it."""

    token: str
    action: Action


OptionTable = tuple[Option, ...]


def build_table(pairs: Iterable[tuple[str, Action]]) -> OptionTable:
    """Build a table from (token, action) pairs, preserving order."""
    return tuple(Option(token=token, action=action) for token, action in pairs)


def resolve(table: OptionTable, token: str) -> Option | None:
    """Return the first Option whose token equals *token*, or None."""
    for option in table:
        if option.token == token:
            return option
    return None


def duplicate_tokens(table: OptionTable) -> tuple[str, ...]:
    """Return tokens that appear more than once, in first-seen order."""
    seen: set[str] = set()
    dupes: list[str] = []
    for option in table:
        if option.token in seen and option.token not in dupes:
            dupes.append(option.token)
        seen.add(option.token)
    return tuple(dupes)


def tokens(table: OptionTable) -> tuple[str, ...]:
    """Return all tokens in registration order."""
    return tuple(option.token for option in table)
