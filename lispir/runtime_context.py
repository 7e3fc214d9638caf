from __future__ import annotations
from dataclasses import dataclass

from lispir import config
from lispir.config import Scoping
from lispir.errors import LispirRecursionError


@dataclass
class RuntimeContext:
    """Per-evaluation settings and the current nesting depth.

    One context is threaded through a single top-level evaluation, the way
    the environment is. It is not shared between threads.
    """
    max_depth: int
    scoping: Scoping
    depth: int = 0

    @classmethod
    def from_config(cls, max_depth: int | None = None, scoping: str | None = None) -> RuntimeContext:
        return cls(
            max_depth=config.check_max_depth(max_depth) if max_depth is not None else config.get_max_depth(),
            scoping=config.check_scoping(scoping) if scoping is not None else config.get_scoping(),
        )

    def enter(self) -> None:
        if self.depth >= self.max_depth:
            raise LispirRecursionError(
                f'Maximum evaluation depth of {self.max_depth} exceeded'
            )
        self.depth += 1

    def leave(self) -> None:
        self.depth -= 1
