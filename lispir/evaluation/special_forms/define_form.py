import logging

from lispir import EvaluatorFn
from lispir import SExpression, LispValue
from lispir.errors import LispirArityError, LispirTypeError
from lispir.types.environment import Environment
from lispir.types.symbol import Symbol
from lispir.types.void import Void
from lispir.runtime_context import RuntimeContext

logger = logging.getLogger(__name__)


def define_form(
    tail: list[SExpression],
    env: Environment,
    ctx: RuntimeContext,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name value)
    Binds in the current frame only; an outer binding of the same name is shadowed, not changed.
    """
    if len(tail) != 2:
        raise LispirArityError("define: wrong number of arguments")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise LispirTypeError("define: expected symbol as first argument")

    value = evaluate_fn(val_expr, env, ctx)
    logger.debug("define %s at depth %d", name, env.depth())
    env.set(name, value)
    return Void
