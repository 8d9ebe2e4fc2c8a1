"""Runs the sexpr interpreter in command-line mode, inside the error handling context manager. Called from the sexpr
console script.
"""

import argparse
import sys

from sexpr.lang.error import ErrorHandler
from sexpr.lang.session import Session
from sexpr.lang.shell import Shell


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="sexpr", description="Interactive s-expression interpreter.")
    parser.add_argument("--fatal", action="store_true", help="exit on the first error instead of continuing")
    parser.add_argument("--no-color", dest="color", action="store_false", help="print diagnostics without color")
    parser.add_argument("-q", "--quiet", action="store_true", help="do not print the banner")
    return parser.parse_args(argv)


def main(argv=None):
    """Runs sexpr interpreter. Called from sexpr executable script."""
    assert sys.version_info >= (3, 7), "sexpr cannot be run with python < 3.7"

    args = parse_args(argv)

    with ErrorHandler(fatal=args.fatal, color=args.color) as error_handler:
        shell = Shell(Session(error_handler))
        if args.quiet:
            shell.intro = None
        shell.cmdloop()


if __name__ == "__main__":
    main()
