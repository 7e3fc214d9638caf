"""Core evaluator for the lispir interpreter.

Dispatches on the kind of the expression: atoms evaluate to themselves,
symbols are looked up, and lists are either operator applications, special
forms, function calls, or (when the head is not a symbol) a sequence whose
non-void results are collected into a new list.
"""

from __future__ import annotations

from lispir import SExpression, LispValue
from lispir.errors import LispirRecursionError, LispirTypeError
from lispir.evaluation.apply import call_function
from lispir.evaluation.operators import OPERATORS, binary_operation
from lispir.evaluation.special_forms import SPECIAL_FORMS
from lispir.reader.lexer import tokenize
from lispir.reader.parser import parse_program
from lispir.runtime_context import RuntimeContext
from lispir.types.environment import Environment
from lispir.types.lambda_fn import Lambda
from lispir.types.symbol import Symbol
from lispir.types.void import Void, VoidType


def evaluate_source(
    program: str, env: Environment, ctx: RuntimeContext | None = None
) -> LispValue:
    """Tokenize, parse and evaluate `program` against `env`."""
    if ctx is None:
        ctx = RuntimeContext.from_config()

    try:
        expr = parse_program(tokenize(program))
        return evaluate(expr, env, ctx)
    except RecursionError:
        ctx.depth = 0
        raise LispirRecursionError(
            "Maximum recursion depth exceeded while evaluating"
        ) from None


def evaluate(
    expr: SExpression, env: Environment, ctx: RuntimeContext | None = None
) -> LispValue:
    """Evaluate one syntax object, tracking nesting depth in `ctx`."""
    if ctx is None:
        ctx = RuntimeContext.from_config()

    ctx.enter()
    try:
        return evaluate0(expr, env, ctx)
    finally:
        ctx.leave()


def evaluate0(expr: SExpression, env: Environment, ctx: RuntimeContext) -> LispValue:
    match expr:
        case VoidType() | bool() | int():
            return expr
        case Lambda():
            # Lambdas come from the lambda form; a lambda met as syntax yields nothing
            return Void
        case Symbol():
            return env.lookup(expr)
        case [Symbol() as head, *tail]:
            if head in OPERATORS:
                return binary_operation(head, tail, env, ctx, evaluate)
            if head in SPECIAL_FORMS:
                return SPECIAL_FORMS[head](tail, env, ctx, evaluate)
            return call_function(head, tail, env, ctx, evaluate)
        case list():
            return evaluate_sequence(expr, env, ctx)

    raise LispirTypeError(f"Cannot evaluate {expr!r}")


def evaluate_sequence(
    exprs: list[SExpression], env: Environment, ctx: RuntimeContext
) -> list[LispValue]:
    """Evaluate each expression in order and keep the non-void results."""
    results = []
    for expr in exprs:
        value = evaluate(expr, env, ctx)
        if value is not Void:
            results.append(value)
    return results
