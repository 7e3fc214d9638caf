from lispir.errors import LispirArityError, LispirTypeError
from lispir.types.lambda_fn import Lambda

from lispir import EvaluatorFn
from lispir import SExpression, LispValue
from lispir.types.environment import Environment
from lispir.types.symbol import Symbol
from lispir.runtime_context import RuntimeContext


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    ctx: RuntimeContext,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (lambda (params...) (body)): the body is a single list, kept unevaluated.
    # The current env is recorded for lexical scoping; dynamic scoping ignores it.
    if len(tail) != 2:
        raise LispirArityError(
            f"lambda requires a parameter list and a body, got {len(tail)} arguments"
        )

    params, body = tail
    if not isinstance(params, list):
        raise LispirTypeError(f"Invalid parameter: {params!r}")
    for param in params:
        if not isinstance(param, Symbol):
            raise LispirTypeError(f"Invalid parameter: {param!r}")
    if not isinstance(body, list):
        raise LispirTypeError(f"Invalid parameter: {body!r}")

    return Lambda(list(params), body, env)
