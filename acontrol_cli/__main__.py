"""Allow ``python -m acontrol_cli``."""

from acontrol_cli.cli import main

if __name__ == "__main__":
    main()
