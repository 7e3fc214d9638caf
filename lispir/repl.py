"""Interactive mode for the lispir interpreter. Uses cmd as backend."""

from __future__ import annotations

import cmd
import logging

from termcolor import colored

from lispir import config
from lispir.errors import LispirError
from lispir.interpreter import Interpreter
from lispir.printer import format_value

logger = logging.getLogger(__name__)


def format_error(error: LispirError) -> str:
    return colored("error: ", "red", attrs=["bold"]) + str(error)


class Repl(cmd.Cmd):
    """Read one line, evaluate it in the session, print the result."""
    intro = None
    farewell = "Bye!"

    def __init__(self, interp: Interpreter | None = None, prompt: str | None = None, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.interp = interp if interp is not None else Interpreter()
        self.prompt = prompt if prompt is not None else config.get_prompt()

    def default(self, line):
        """Evaluates a line of lispir code."""
        try:
            value = self.interp.eval(line)
        except LispirError as e:
            # a failed line must not end the loop
            logger.debug("evaluation failed: %r", e)
            print(format_error(e), file=self.stdout)
            return False

        text = format_value(value)
        if text is not None:
            print(text, file=self.stdout)
        return False

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return False

    def do_EOF(self, arg):
        """Exits interpreter."""
        print(file=self.stdout)
        return self.do_exit(arg)

    def do_exit(self, arg):
        """Exits interpreter."""
        print(self.farewell, file=self.stdout)
        return True
