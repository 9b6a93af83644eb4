import logging

from lang1 import EvaluatorFn
from lang1 import SExpression, LispValue
from lang1.errors import ArityError
from lang1.printer import format_value
from lang1.types.closure import Closure
from lang1.types.environment import Environment
from lang1.types.symbol import Symbol

logger = logging.getLogger(__name__)


def defn_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (defn name (params...) body...)
    Binds a Closure under `name` in the frame that evaluates the form and
    returns it. The body is kept unevaluated.
    """
    if len(tail) < 3:
        raise ArityError(
            "defn requires a name, a parameter list and at least one body expression"
        )

    name, params, *body = tail
    if not isinstance(name, Symbol):
        raise ArityError(f"defn name must be a symbol, got {format_value(name)}")
    if not isinstance(params, list):
        raise ArityError(f"defn parameters must be a list, got {format_value(params)}")
    for p in params:
        if not isinstance(p, Symbol):
            raise ArityError(f"defn parameter must be a symbol, got {format_value(p)}")

    fn = Closure(list(params), body, env, name)
    env.define(name, fn)
    logger.debug("Defined %s with %d parameter(s) at depth %d", name, len(params), env.depth())
    return fn
