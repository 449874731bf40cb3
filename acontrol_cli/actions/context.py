"""Top-level context actions: nested dispatch, fingerprint, help."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from acontrol_cli import config
from acontrol_cli.dispatcher import select
from acontrol_cli.exceptions import CommandError
from acontrol_cli.options import OptionTable


def _indent(text, prefix="    "):
    return "\n".join(prefix + line if line else line for line in text.splitlines())


@dataclass(frozen=True)
class ContextAction:
    """A context that routes argv[depth] through its own command table."""

    name: str
    description: str
    token: str
    commands: OptionTable
    depth: int = 2

    def usage(self) -> str:
        lines = [f"  Usage: {config.PROG} {self.token} <command> <options>", ""]
        if not self.commands:
            lines.append("  No commands available.")
            return "\n".join(lines)
        lines.append("  Commands:")
        for option in self.commands:
            action = option.action
            lines.append(f"    {option.token:<12} {action.name} - {action.description}")
            text = action.usage()
            if text:
                lines.append(_indent(text, "      "))
        return "\n".join(lines)

    def run(self, argv: Sequence[str]) -> bool:
        action = select(
            self.commands,
            argv,
            self.depth,
            error_cls=CommandError,
            scope=f"{self.name} command",
        )
        return action.run(argv)


@dataclass(frozen=True)
class FingerContextAction:
    """Fingerprint reader context. The reader exposes no commands yet."""

    name: str
    description: str

    def usage(self) -> str:
        return f"  Usage: {config.PROG} finger <command> <options>"

    def run(self, argv: Sequence[str]) -> bool:
        print("Fingerprint command action: no commands available.")
        return False


@dataclass(frozen=True)
class HelpAction:
    """Lists every top-level context with its description and usage."""

    name: str
    description: str
    contexts: Callable[[], OptionTable]

    def usage(self) -> str:
        return f"  Usage: {config.PROG} help"

    def render(self) -> str:
        lines = [f"Usage: {config.PROG} [global flags] <context> [<command>] [options]", ""]
        lines.append("Global flags:")
        lines.append("  --format table|json   Output format (default: table)")
        lines.append("  --quiet, -q           Suppress the banner and progress messages")
        lines.append("  --verbose, -v         Log HTTP requests to stderr")
        lines.append("  --version             Show version number")
        lines.append("")
        lines.append("Contexts:")
        for option in self.contexts():
            action = option.action
            lines.append(f"{option.token} - {action.name}: {action.description}")
            lines.append(action.usage())
            lines.append("")
        return "\n".join(lines).rstrip() + "\n"

    def run(self, argv: Sequence[str]) -> bool:
        print(self.render())
        return True
