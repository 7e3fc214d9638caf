"""Runtime environment for lispir.

The Environment stores bindings of Symbols to evaluated values and supports
nested scopes via an `outer` link. Writes only ever touch the local frame;
an inner `define` shadows an outer binding instead of replacing it.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from lispir import LispValue
from lispir.errors import LispirUnboundSymbol
from lispir.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    @classmethod
    def extend(cls, parent: Environment) -> Environment:
        """Return an empty child scope of `parent`."""
        return cls(outer=parent)

    def find(self, name: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def get(self, name: Symbol | str) -> Optional[LispValue]:
        """Value bound to `name` in this frame or the nearest ancestor, else None."""
        if not isinstance(name, Symbol):
            name = Symbol(name)
        env = self.find(name)
        if env is None:
            return None
        return env.vars[name]

    def lookup(self, name: Symbol) -> LispValue:
        """Like `get`, but raises LispirUnboundSymbol on a miss."""
        env = self.find(name)
        if env is None:
            raise LispirUnboundSymbol(f"Undefined symbol: {name}")
        return env.vars[name]

    def set(self, name: Symbol | str, value: LispValue) -> None:
        """Bind `name` in this frame, never in an ancestor."""
        if not isinstance(name, Symbol):
            name = Symbol(name)
        self.vars[name] = value

    def depth(self) -> int:
        """Number of ancestors above this frame."""
        n = 0
        env = self.outer
        while env is not None:
            n += 1
            env = env.outer
        return n

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v!r}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")  # indicate parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            env: Optional[Environment] = self
            chain = []
            while env is not None:
                with StringIO() as env_buf:
                    env._write_vars(env_buf)
                    chain.append(env_buf.getvalue())
                env = env.outer
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
