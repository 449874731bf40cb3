"""
Named parameter lookup over the whole argument list.

Parameters are found wherever they appear, independent of how far the
dispatcher has walked into the context/command tokens.
"""


class CommandLine:
    """Scanner for ``--name value`` and ``-name=value`` parameters."""

    def __init__(self, argv):
        self.argv = list(argv)

    def find_token(self, name):
        """Return (position, value) of the first match for *name*.

        Position is 0 when the parameter is absent. Value is "" when absent,
        when ``--name`` is the last argument, or when it is followed by
        another flag-like argument.
        """
        prefix = f"-{name}="
        flag = f"--{name}"
        for index, arg in enumerate(self.argv):
            if arg.startswith(prefix):
                return index, arg.split("=", 1)[1]
            if arg == flag:
                if index + 1 < len(self.argv):
                    following = self.argv[index + 1]
                    if not following.startswith("-"):
                        return index, following
                return index, ""
        return 0, ""

    def get_string_parameter(self, name):
        _, value = self.find_token(name)
        return value

    def has_parameter(self, name):
        position, _ = self.find_token(name)
        return position > 0
