"""Application engine for lang1.

Function application lives here so the evaluator and special forms share one
set of rules:
- primitive operators, named by an exact Symbol (+ - * /);
- closures, run in a new frame under their captured environment;
- anything else yields an UnknownOperator Error value instead of raising.
"""

import logging

from lang1 import LispValue, EvaluatorFn, SExpression
from lang1.builtin.primitives import PRIMITIVES, is_primitive
from lang1.errors import ArityError, UnknownOperator
from lang1.printer import format_value
from lang1.types.closure import Closure
from lang1.types.environment import Environment
from lang1.types.error_value import Error

logger = logging.getLogger(__name__)


def eval_sequence(
    body: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    """Evaluate each expression in order and return the value of the last one."""
    if not body:
        raise ArityError("Cannot evaluate an empty body")
    result: LispValue = None
    for expr in body:
        result = evaluate_fn(expr, env)
    return result


def apply_closure(
    fn: Closure, args: list[LispValue], evaluate_fn: EvaluatorFn
) -> LispValue:
    """Run `fn` with already-evaluated arguments.

    Raises ArityError if the argument count differs from the parameter count.
    """
    frame = fn.extend_env(args)
    return eval_sequence(fn.body, frame, evaluate_fn)


def apply(
    operator: LispValue, args: list[LispValue], evaluate_fn: EvaluatorFn
) -> LispValue:
    """Apply a primitive operator or a Closure to evaluated arguments."""
    if is_primitive(operator):
        logger.debug("Primitive %s on %d argument(s)", operator, len(args))
        return PRIMITIVES[operator](args)
    if isinstance(operator, Closure):
        return apply_closure(operator, args, evaluate_fn)

    logger.debug("Cannot apply %r", operator)
    return Error(UnknownOperator(f"Unknown apply method: {format_value(operator)}"))
