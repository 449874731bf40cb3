"""
Argument-stream dispatch over nested option tables.

The context token is argv[1]; a context action resolves argv[2] against its
own table with select(), and so on for however many levels nest.
"""

from acontrol_cli import config
from acontrol_cli.exceptions import CliError, UsageError
from acontrol_cli.formatters import emit_cli_error
from acontrol_cli.options import resolve

USAGE_HINT = f"Type {config.PROG} help to show usage options."


def select(table, argv, position, error_cls=UsageError, scope="Context"):
    """Resolve argv[position] in *table* and return the bound action.

    Raises *error_cls* when the token is missing, empty or unknown. Never
    runs anything.
    """
    if len(argv) <= position:
        raise error_cls(f"[ERROR] {scope}: missing argument. {USAGE_HINT}")
    token = argv[position]
    if not token:
        raise error_cls(f"[ERROR] {scope} not informed. {USAGE_HINT}")
    option = resolve(table, token)
    if option is None:
        raise error_cls(f"[ERROR] {scope} '{token}' not found. {USAGE_HINT}")
    return option.action


def dispatch(argv, contexts):
    """Resolve the context in argv[1], run it, and return the exit status.

    0 when the resolved action ran (whatever it returned), otherwise the
    exit_code of the CliError raised by routing or by the action.
    """
    try:
        if len(argv) < 2:
            raise UsageError(f"[ERROR] Missing arguments. {USAGE_HINT}")
        action = select(contexts, argv, 1)
        action.run(argv)
    except CliError as e:
        emit_cli_error(e, config.RUNTIME_FORMAT)
        return e.exit_code
    return 0
