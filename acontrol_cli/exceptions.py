"""
acontrol-cli exception hierarchy.

All custom exceptions live here to avoid circular imports.
"""


class CliError(Exception):
    """Exit code 1: network, oversized response, bad configuration."""

    exit_code = 1


class UsageError(CliError):
    """Exit code 1: missing or unknown context token."""

    exit_code = 1


class CommandError(UsageError):
    """Exit code 2: missing or unknown command inside a resolved context."""

    exit_code = 2


class HTTPError(Exception):
    """Raised by _http_request for non-2xx responses; carries the raw body."""

    def __init__(self, code, reason, body, headers=None):
        super().__init__(f"HTTP {code}: {reason}")
        self.code = code
        self.reason = reason
        self.body = body
        self.headers = headers or {}
