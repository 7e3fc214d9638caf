from __future__ import annotations

from lispir import LispValue
from lispir.builtins import register
from lispir.evaluation.evaluator import evaluate_source
from lispir.runtime_context import RuntimeContext
from lispir.types.environment import Environment


class Interpreter:
    """
    One interpreter session.
    Keeps a root Environment alive across calls so definitions persist.
    """

    def __init__(
        self,
        *,
        max_depth: int | None = None,
        scoping: str | None = None,
        builtins: bool = True,
    ):
        # Validate eagerly so a bad setting fails at construction
        RuntimeContext.from_config(max_depth, scoping)
        self.max_depth = max_depth
        self.scoping = scoping
        self.env: Environment = Environment()
        if builtins:
            register(self.env)

    def context(self) -> RuntimeContext:
        return RuntimeContext.from_config(self.max_depth, self.scoping)

    def eval(self, code: str) -> LispValue:
        """Evaluate one line of code against the session environment.

        Raises a LispirError subclass on failure; the session stays usable.
        """
        return evaluate_source(code, self.env, self.context())

    def eval_lines(self, lines):
        """Evaluate each non-blank line in order, yielding (line, value)."""
        for line in lines:
            if not line.strip():
                continue
            yield line, self.eval(line)
