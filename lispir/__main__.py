"""Runs the lispir interpreter on a file, or interactively when no file is given."""

import argparse
import logging
import sys

from termcolor import colored

from lispir import config
from lispir.errors import LispirError
from lispir.interpreter import Interpreter
from lispir.printer import format_value
from lispir.repl import Repl, format_error


def run_file(interp: Interpreter, path: str) -> int:
    with open(path, encoding="utf-8") as f:
        try:
            for _, value in interp.eval_lines(f):
                text = format_value(value)
                if text is not None:
                    print(text)
        except LispirError as e:
            print(colored(f"{path}: ", attrs=["bold"]) + format_error(e), file=sys.stderr)
            return 1
    return 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="lispir")
    parser.add_argument("file", help="file to run line by line (if empty, starts interactive mode)", nargs="?")
    parser.add_argument("--max-depth", type=int, default=None, help="maximum evaluation depth")
    parser.add_argument("--scoping", choices=config.SCOPING_MODES, default=None,
                        help="environment a function call extends")
    args = parser.parse_args(argv)

    logging.basicConfig(level=config.get_log_level(), format="%(message)s", stream=sys.stderr)

    try:
        interp = Interpreter(max_depth=args.max_depth, scoping=args.scoping)
    except LispirError as e:
        print(format_error(e), file=sys.stderr)
        return 2

    if args.file is not None:
        return run_file(interp, args.file)

    Repl(interp).cmdloop()
    return 0


if __name__ == "__main__":
    sys.exit(main())
