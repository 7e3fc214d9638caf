"""Function application for lispir.

A call `(name arg...)` looks `name` up, checks that it is a Lambda of the
right arity, evaluates the arguments in the caller's environment and
evaluates the body in a fresh child environment. Which environment the child
extends depends on the scoping mode:

- dynamic: the caller's environment. A lambda only sees the names visible
  where it is called.
- lexical: the environment captured when the lambda was created.
"""

import logging

from lispir import LispValue, EvaluatorFn, SExpression
from lispir.errors import LispirArityError, LispirNotAFunction
from lispir.runtime_context import RuntimeContext
from lispir.types.environment import Environment
from lispir.types.lambda_fn import Lambda
from lispir.types.symbol import Symbol

logger = logging.getLogger(__name__)


def apply_lambda(
    fn: Lambda,
    args: list[LispValue],
    caller_env: Environment,
    ctx: RuntimeContext,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Bind already-evaluated `args` to the formals of `fn` and evaluate its body."""
    if len(args) != len(fn.formals):
        raise LispirArityError(
            f"Expected {len(fn.formals)} arguments, got {len(args)}"
        )

    if ctx.scoping == "lexical" and fn.env is not None:
        parent = fn.env
    else:
        parent = caller_env

    new_env = Environment.extend(parent)
    for param, value in zip(fn.formals, args):
        new_env.set(param, value)
    return evaluate_fn(fn.body, new_env, ctx)


def call_function(
    name: Symbol,
    arg_exprs: list[SExpression],
    env: Environment,
    ctx: RuntimeContext,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Evaluate `(name arg...)` where `name` is not an operator or special form."""
    fn = env.lookup(name)
    if not isinstance(fn, Lambda):
        raise LispirNotAFunction(f"Not a function: {name}")
    if len(arg_exprs) != len(fn.formals):
        raise LispirArityError(
            f"{name} expects {len(fn.formals)} arguments, got {len(arg_exprs)}"
        )

    args = [evaluate_fn(arg, env, ctx) for arg in arg_exprs]
    logger.debug("call %s%r at depth %d", name, args, ctx.depth)
    return apply_lambda(fn, args, env, ctx, evaluate_fn)
