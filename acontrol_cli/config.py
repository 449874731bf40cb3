"""
acontrol-cli shared configuration, constants, and module-level state.
Standalone module: no imports from other project files.
"""

import os

# ---------------------------------------------------------------------------
# .env path and helpers
# ---------------------------------------------------------------------------

_PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))
_PROJECT_ROOT = os.path.dirname(_PACKAGE_DIR)

ENV_PATH = os.path.join(_PROJECT_ROOT, ".env")

# Keys honoured from os.environ when the .env file does not set them.
ENV_KEYS = (
    "ACONTROL_HOST",
    "ACONTROL_PORT",
    "ACONTROL_PROTOCOL",
    "ACONTROL_API_KEY",
    "ACONTROL_HTTP_TIMEOUT_SECONDS",
    "ACONTROL_HTTP_MAX_RESPONSE_BYTES",
    "ACONTROL_HTTP_LOG",
)


def load_env():
    env = {}
    if os.path.exists(ENV_PATH):
        with open(ENV_PATH) as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith("#") and "=" in line:
                    key, val = line.split("=", 1)
                    env[key.strip()] = val.strip()
    for key in ENV_KEYS:
        if key not in env and key in os.environ:
            env[key] = os.environ[key]
    return env


def _env_bool(key, default=False):
    """Parse common boolean env formats."""
    raw = env.get(key)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(key, default):
    """Parse integer env values with fallback."""
    raw = env.get(key)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

VERSION = "0.1.0"
PROG = "acontrol-cli"

BANNER = "acontrol - Access Control System\nOtavio Ribeiro <otavio.ribeiro@gmail.com>\n"

DEFAULT_HOST = "localhost"
DEFAULT_PORT = 8088
DEFAULT_PROTOCOL = "http"

VALID_FORMATS = {"table", "json"}
VALID_PROTOCOLS = {"http", "https"}

# ---------------------------------------------------------------------------
# Module-level state (loaded from .env)
# ---------------------------------------------------------------------------

env = load_env()

REGISTRY_HOST = env.get("ACONTROL_HOST", DEFAULT_HOST) or DEFAULT_HOST
REGISTRY_PORT = _env_int("ACONTROL_PORT", DEFAULT_PORT)
REGISTRY_PROTOCOL = env.get("ACONTROL_PROTOCOL", DEFAULT_PROTOCOL) or DEFAULT_PROTOCOL
# Loaded and carried with the registry config; never sent.
REGISTRY_API_KEY = env.get("ACONTROL_API_KEY", "")

# 0 leaves the transport default (no explicit timeout).
HTTP_TIMEOUT_SECONDS = _env_int("ACONTROL_HTTP_TIMEOUT_SECONDS", 0)
HTTP_MAX_RESPONSE_BYTES = _env_int("ACONTROL_HTTP_MAX_RESPONSE_BYTES", 5_000_000)
HTTP_LOG_ENABLED = _env_bool("ACONTROL_HTTP_LOG", False)

# ---------------------------------------------------------------------------
# Runtime flags (set by cli.main from global flags)
# ---------------------------------------------------------------------------

RUNTIME_QUIET = False
RUNTIME_FORMAT = "table"
