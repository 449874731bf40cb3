"""
acontrol-cli: command-line front end for the access control appliance
"""

import sys

from acontrol_cli import config
from acontrol_cli.dispatcher import dispatch
from acontrol_cli.exceptions import CliError
from acontrol_cli.formatters import emit_cli_error
from acontrol_cli.routes import CONTEXTS

# ---------------------------------------------------------------------------
# Global flag extraction (before dispatch, so flags work in any position)
# ---------------------------------------------------------------------------


def _extract_global_flags(argv):
    """Extract global flags from argv regardless of position.

    Returns (format_str, quiet, verbose, remaining_argv).
    Handles --version directly.
    """
    fmt = "table"
    quiet = False
    verbose = False
    remaining = []
    i = 0
    while i < len(argv):
        if argv[i] == "--version":
            print(f"{config.PROG} {config.VERSION}")
            sys.exit(0)
        elif argv[i] in ("--quiet", "-q"):
            quiet = True
            i += 1
            continue
        elif argv[i] in ("--verbose", "-v"):
            verbose = True
            i += 1
            continue
        elif argv[i] == "--format" and i + 1 < len(argv):
            fmt = argv[i + 1]
            if fmt not in config.VALID_FORMATS:
                raise CliError(f"[ERROR] Invalid format '{fmt}'. Use: json, table")
            i += 2
            continue
        else:
            remaining.append(argv[i])
        i += 1
    if quiet and verbose:
        raise CliError("[ERROR] --quiet and --verbose are mutually exclusive.")
    return fmt, quiet, verbose, remaining


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------


def run(argv):
    """Run one invocation for a full argv (program name first); return exit status."""
    program = argv[0] if argv else config.PROG
    try:
        fmt, quiet, verbose, remaining = _extract_global_flags(list(argv[1:]))
    except CliError as e:
        emit_cli_error(e)
        return e.exit_code
    config.RUNTIME_FORMAT = fmt
    config.RUNTIME_QUIET = quiet
    if verbose:
        config.HTTP_LOG_ENABLED = True

    if not quiet and fmt == "table":
        print(config.BANNER)

    return dispatch([program, *remaining], CONTEXTS)


def main():
    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8", errors="replace")
    sys.exit(run(sys.argv))


if __name__ == "__main__":
    main()
