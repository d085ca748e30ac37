"""Runs letlang on a source file, or in command-line mode if no file is given. Called from the letlang executable
script.
"""

import argparse
import sys

from letlang.lang.error import ErrorHandler
from letlang.lang.session import Session
from letlang.lang.shell import Shell


def build_parser():
    parser = argparse.ArgumentParser(prog="letlang")
    parser.add_argument("file", help="file to parse (if empty, goes to command-line mode)", nargs="?")
    parser.add_argument("--tokens", action="store_true", help="print the file's tokens instead of its syntax tree")
    parser.add_argument("--no-color", action="store_true", help="don't color error messages")
    return parser


def main(argv=None):
    """Runs letlang. Returns the process exit status: 1 if file had parse errors, else 0."""
    args = build_parser().parse_args(argv)

    with ErrorHandler(color=not args.no_color) as error_handler:
        if args.file is None:
            Shell(Session(error_handler, Session.SH_FILE, cmd_line=True)).cmdloop()
            return 0

        sess = Session(error_handler, args.file, cmd_line=False)
        if args.tokens:
            for token in sess.tokens():
                print(repr(token))
            return 0

        program = sess.parse()
        print(program.display())
        return 0 if program.ok else 1


if __name__ == "__main__":
    sys.exit(main())
