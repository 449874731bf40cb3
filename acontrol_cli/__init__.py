"""acontrol-cli: command-line front end for the access control appliance."""

from acontrol_cli.config import VERSION
from acontrol_cli.exceptions import CliError, CommandError, HTTPError, UsageError
from acontrol_cli.models import NfcCard, RegistryReply
from acontrol_cli.registry import RegistryClient, RegistryConfig

__all__ = [
    "VERSION",
    "CliError",
    "CommandError",
    "HTTPError",
    "NfcCard",
    "RegistryClient",
    "RegistryConfig",
    "RegistryReply",
    "UsageError",
]
