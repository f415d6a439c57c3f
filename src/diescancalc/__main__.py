"""Allow ``python -m diescancalc``."""

from .cli.commands import main

if __name__ == '__main__':
    main(prog_name="die-scan-calc")
