"""Runs the loxite interpreter on a script or in command-line mode. Also uses the error handling context manager to
map failures to exit codes. Called from the loxite console script.

Exit codes follow sysexits: 64 for usage problems, 65 for lex/parse errors, 70 for runtime errors.
"""

import argparse
import logging
import sys

from loxite.lang.error import ErrorHandler, EX_USAGE
from loxite.lang.session import Session
from loxite.lang.shell import Shell


def build_parser():
    parser = argparse.ArgumentParser(prog="loxite", description="Lox expression interpreter")
    parser.add_argument("script", help="file to interpret and run (if empty, goes to command-line mode)", nargs="?")

    output = parser.add_mutually_exclusive_group()
    output.add_argument("--tokens", action="store_const", dest="mode", const=Session.TOKENS,
                        help="print the scanned tokens instead of evaluating")
    output.add_argument("--ast", action="store_const", dest="mode", const=Session.AST,
                        help="print the parenthesized syntax tree instead of evaluating")
    parser.set_defaults(mode=Session.EVALUATE)

    parser.add_argument("--no-color", action="store_true", help="never highlight diagnostics")
    parser.add_argument("-v", "--verbose", action="store_true", help="log pipeline internals to stderr")
    return parser


def main(argv=None):
    """Runs loxite interpreter. Called from loxite console script."""
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as exc:
        # argparse exits with 2 on bad usage
        sys.exit(EX_USAGE if exc.code else exc.code)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(name)s: %(levelname)s: %(message)s")

    with ErrorHandler(color=not args.no_color) as error_handler:
        if args.script is not None:
            sess = Session(error_handler, args.script, cmd_line=False, mode=args.mode)
            sess.run()

            for result in sess.results:
                print(result)

        else:
            Shell(Session(error_handler, Session.SH_FILE, cmd_line=True, mode=args.mode)).cmdloop()

    sys.exit(error_handler.exit_code if error_handler.fatal else 0)


if __name__ == "__main__":
    main()
