"""Output dispatchers, table rendering and error emission (stdlib only)."""

import json
import re
import sys

_CONTROL_RE = re.compile(r"\x1b\[[0-9;]*[A-Za-z]|[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")

# ---------------------------------------------------------------------------
# Table helpers
# ---------------------------------------------------------------------------


def _trunc(s, maxlen):
    """Truncate string with ellipsis indicator."""
    if not s:
        return ""
    return s[: maxlen - 1] + "…" if len(s) > maxlen else s


def _sanitize_str(s):
    """Strip ANSI escape sequences and control chars from table output."""
    if not s:
        return s
    return _CONTROL_RE.sub("", str(s))


def _table(columns, rows, footer=None):
    """Build a formatted table string.
    columns: list of (name, width) tuples. Last column has no width (fills).
    rows: list of tuples matching columns."""
    parts = []
    for i, (name, width) in enumerate(columns):
        if i == len(columns) - 1:
            parts.append(name)
        else:
            parts.append(f"{name:<{width}}")
    header = " ".join(parts)
    lines = [header, "-" * max(len(header), 60)]
    for row in rows:
        parts = []
        for i, val in enumerate(row):
            safe = _sanitize_str(val) if isinstance(val, str) else str(val)
            if i == len(columns) - 1:
                parts.append(safe)
            else:
                parts.append(f"{safe:<{columns[i][1]}}")
        lines.append(" ".join(parts))
    if footer:
        lines.append(f"\n{footer}")
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Output dispatchers
# ---------------------------------------------------------------------------


def output(data, formatter=None, fmt="table"):
    """Output data in requested format."""
    if fmt == "table" and formatter:
        print(formatter(data))
    else:
        print(json.dumps(data, indent=2, ensure_ascii=False))


def mutation_response(action, card, fmt="table"):
    """Print a confirmation for a card mutation."""
    if fmt == "json":
        payload = {"ok": True, "mutation": {"action": action, "card": card.to_payload()}}
        print(json.dumps(payload, ensure_ascii=False))
        return
    print(f"OK: {action}: card '{card.name}'")


def _error_type_from_message(message):
    if message.startswith("[ERROR]"):
        return "error"
    return "cli_error"


def emit_cli_error(err, fmt="table"):
    msg = str(err)
    if fmt == "json":
        payload = {
            "ok": False,
            "error": {
                "type": _error_type_from_message(msg),
                "message": msg,
                "exit_code": getattr(err, "exit_code", 1),
            },
        }
        print(json.dumps(payload, ensure_ascii=False), file=sys.stderr)
        return
    print(msg, file=sys.stderr)


# ---------------------------------------------------------------------------
# Registry formatters
# ---------------------------------------------------------------------------


def format_cards_table(result):
    """Format {"cards": [payload dicts]} as a readable table."""
    cards = result.get("cards", [])
    if not cards:
        return "No cards registered."
    cols = [("ID", 8), ("UUID", 24), ("Name", 0)]
    rows = [
        (str(card.get("id", 0)), _trunc(card.get("uuid", ""), 24), card.get("name", ""))
        for card in cards
    ]
    return _table(cols, rows, footer=f"Total: {len(cards)}")


def format_reply(result):
    """Format a {"ok", "message"} registry reply."""
    state = "OK" if result.get("ok") else "FAILED"
    message = result.get("message") or "-"
    return f"{state}: {message}"
