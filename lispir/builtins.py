"""Bindings installed in every interpreter session's root environment.

The reader has no boolean literal, so `true` and `false` are plain symbols
bound to the two Bool values.
"""
from __future__ import annotations

from lispir import LispValue
from lispir.types.environment import Environment
from lispir.types.symbol import Symbol


BUILTINS: dict[Symbol, LispValue] = {
    Symbol("true"): True,
    Symbol("false"): False,
}


def register(env: Environment) -> None:
    for name, value in BUILTINS.items():
        env.set(name, value)
