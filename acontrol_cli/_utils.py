"""
Shared pure-utility functions for acontrol-cli.

These helpers have no business logic and no side effects.
They are used across models.py, registry.py and formatters.py.
"""


def _matches_kind(value, kinds):
    # JSON booleans decode to bool, which is an int subclass.
    if isinstance(value, bool):
        return bool in kinds
    return isinstance(value, kinds)


def tolerant_field(obj, key, kinds, default):
    """Look up *key* in a decoded JSON object without raising.

    Returns (value, present). When *obj* is not a dict, the key is missing,
    or the value is not an instance of *kinds*, returns (default, False).
    """
    if not isinstance(kinds, tuple):
        kinds = (kinds,)
    if not isinstance(obj, dict) or key not in obj:
        return default, False
    value = obj[key]
    if not _matches_kind(value, kinds):
        return default, False
    return value, True


def tolerant_object(value):
    """Return *value* if it is a JSON object, else an empty dict."""
    return value if isinstance(value, dict) else {}
