"""
HTTP request layer and lenient JSON decoding for acontrol-cli.
"""

import json
import sys
import time
import urllib.error
import urllib.request

from acontrol_cli import config
from acontrol_cli.exceptions import CliError, HTTPError

# ---------------------------------------------------------------------------
# Decoding helpers
# ---------------------------------------------------------------------------


def _decode_json(raw):
    """Decode a JSON body, returning None instead of raising on bad input."""
    if raw is None:
        return None
    if isinstance(raw, bytes):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError:
            return None
    try:
        return json.loads(raw)
    except (ValueError, RecursionError):
        return None


def _error_envelope(message):
    """Build a consistent CLI-safe HTTP error message."""
    return f"[ERROR] {message}"


# ---------------------------------------------------------------------------
# HTTP request layer
# ---------------------------------------------------------------------------


def _log_http_event(**fields):
    """Emit structured HTTP logs to stderr when enabled."""
    if not config.HTTP_LOG_ENABLED:
        return
    print("[HTTP] " + json.dumps(fields, ensure_ascii=False, sort_keys=True), file=sys.stderr)


def _read_limited(stream):
    raw = stream.read(config.HTTP_MAX_RESPONSE_BYTES + 1)
    if len(raw) > config.HTTP_MAX_RESPONSE_BYTES:
        raise CliError(
            "[ERROR] Response too large from card registry "
            f"(>{config.HTTP_MAX_RESPONSE_BYTES} bytes)."
        )
    return raw


def _http_request(url, data=None, headers=None, method="GET"):
    """Make one HTTP request (no retries).

    Returns the raw response body (bytes) on 2xx.
    Raises HTTPError for non-2xx responses, carrying the body.
    Raises CliError on network/timeout errors or oversized bodies.
    """
    body = json.dumps(data).encode("utf-8") if data is not None else None
    all_headers = {"Accept": "application/json"}
    if body is not None:
        all_headers["Content-Type"] = "application/json"
    all_headers.update(headers or {})
    req = urllib.request.Request(url, data=body, headers=all_headers, method=method)
    kwargs = {}
    if config.HTTP_TIMEOUT_SECONDS > 0:
        kwargs["timeout"] = config.HTTP_TIMEOUT_SECONDS

    start = time.perf_counter()
    _log_http_event(phase="request", method=method, url=url)
    try:
        with urllib.request.urlopen(req, **kwargs) as resp:
            raw = _read_limited(resp)
            _log_http_event(
                phase="response",
                method=method,
                url=url,
                status=getattr(resp, "status", 200),
                bytes=len(raw),
                latency_ms=round((time.perf_counter() - start) * 1000, 2),
            )
            return raw
    except urllib.error.HTTPError as e:
        try:
            error_body = _read_limited(e) if e.fp else b""
        finally:
            e.close()
        _log_http_event(
            phase="response",
            method=method,
            url=url,
            status=e.code,
            bytes=len(error_body),
            latency_ms=round((time.perf_counter() - start) * 1000, 2),
        )
        raise HTTPError(e.code, e.reason, error_body, headers=e.headers) from e
    except TimeoutError as e:
        _log_http_event(phase="network_error", method=method, url=url, error="timeout")
        raise CliError(
            _error_envelope(
                f"Request timed out after {config.HTTP_TIMEOUT_SECONDS} seconds. "
                "Is the card registry reachable?"
            )
        ) from e
    except urllib.error.URLError as e:
        _log_http_event(
            phase="network_error", method=method, url=url, error=f"url_error: {e.reason}"
        )
        raise CliError(_error_envelope(f"Connection failed: {e.reason}")) from e
