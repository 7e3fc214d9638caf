from lispir import EvaluatorFn
from lispir import SExpression, LispValue
from lispir.errors import LispirArityError, LispirTypeError
from lispir.types.environment import Environment
from lispir.runtime_context import RuntimeContext


def if_form(
    tail: list[SExpression],
    env: Environment,
    ctx: RuntimeContext,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(if condition then else)

    Only the selected branch is evaluated.
    """
    if len(tail) != 3:
        raise LispirArityError(
            f"Invalid number of arguments for if: {len(tail) + 1}"
        )

    cond = evaluate_fn(tail[0], env, ctx)
    if not isinstance(cond, bool):
        raise LispirTypeError(f"Invalid condition: {cond!r}")

    if cond:
        return evaluate_fn(tail[1], env, ctx)
    return evaluate_fn(tail[2], env, ctx)
