"""Lambda value representation for lispir."""

from __future__ import annotations

from io import StringIO

from lispir import SExpression
from lispir.types.environment import Environment
from lispir.types.symbol import Symbol


class Lambda:
    """A lambda value: parameter names, an unevaluated body, and the
    environment that was active when the lambda form was evaluated."""

    __slots__ = ("formals", "body", "env")

    def __init__(
        self, formals: list[Symbol], body: list[SExpression], env: Environment | None = None
    ):
        self.formals: list[Symbol] = formals
        self.body: list[SExpression] = body
        # Only consulted under lexical scoping
        self.env: Environment | None = env

    def __eq__(self, other: object) -> bool:
        # The defining environment is not part of a lambda's identity as a value
        return (
            isinstance(other, Lambda)
            and self.formals == other.formals
            and self.body == other.body
        )

    __hash__ = None  # mutable body list

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(lambda (")
            buffer.write(" ".join(str(f) for f in self.formals))
            buffer.write(") ")
            buffer.write(_to_source(self.body))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"Lambda({self.formals!r}, {self.body!r})"


def _to_source(expr: SExpression) -> str:
    if isinstance(expr, list):
        return "(" + " ".join(_to_source(e) for e in expr) + ")"
    if isinstance(expr, bool):
        return "true" if expr else "false"
    return str(expr)
