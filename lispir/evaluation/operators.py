"""Binary integer operators for the lispir evaluator.

Every operator takes exactly two integer operands. Results are checked
against the signed 64-bit range; division truncates toward zero and the
remainder takes the sign of the dividend.
"""
from __future__ import annotations
import operator
from typing import Callable

from lispir import EvaluatorFn
from lispir import SExpression, LispValue
from lispir.errors import (
    LispirArityError,
    LispirDivisionByZero,
    LispirOverflowError,
    LispirTypeError,
)
from lispir.reader.lexer import INT64_MAX, INT64_MIN
from lispir.runtime_context import RuntimeContext
from lispir.types.environment import Environment
from lispir.types.symbol import Symbol


def truncating_div(a: int, b: int) -> int:
    if b == 0:
        raise LispirDivisionByZero(f"Division by zero: (/ {a} {b})")
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def truncating_rem(a: int, b: int) -> int:
    if b == 0:
        raise LispirDivisionByZero(f"Division by zero: (% {a} {b})")
    return a - b * truncating_div(a, b)


def check_int64(op: Symbol, value: int) -> int:
    if not INT64_MIN <= value <= INT64_MAX:
        raise LispirOverflowError(f"Integer overflow in {op}: {value}")
    return value


# -------------------------------
# Arithmetic
# -------------------------------
ARITHMETIC: dict[Symbol, Callable[[int, int], int]] = {
    Symbol("+"): operator.add,
    Symbol("-"): operator.sub,
    Symbol("*"): operator.mul,
    Symbol("/"): truncating_div,
    Symbol("%"): truncating_rem,
}

# -------------------------------
# Comparison
# -------------------------------
COMPARISON: dict[Symbol, Callable[[int, int], bool]] = {
    Symbol("="): operator.eq,
    Symbol("!="): operator.ne,
    Symbol("<"): operator.lt,
    Symbol(">"): operator.gt,
}

OPERATORS = frozenset(ARITHMETIC) | frozenset(COMPARISON)


def is_integer(value: LispValue) -> bool:
    # bool is a subclass of int but is not an Integer here
    return isinstance(value, int) and not isinstance(value, bool)


def binary_operation(
    op: Symbol,
    tail: list[SExpression],
    env: Environment,
    ctx: RuntimeContext,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(op left right) for op in + - * / % = != < >"""
    if len(tail) != 2:
        raise LispirArityError(
            f"{op} requires exactly 2 arguments, got {len(tail)}"
        )

    left = evaluate_fn(tail[0], env, ctx)
    right = evaluate_fn(tail[1], env, ctx)
    if not is_integer(left):
        raise LispirTypeError(f"Invalid left operand for {op}: {left!r}")
    if not is_integer(right):
        raise LispirTypeError(f"Invalid right operand for {op}: {right!r}")

    if op in COMPARISON:
        return COMPARISON[op](left, right)
    return check_int64(op, ARITHMETIC[op](left, right))
