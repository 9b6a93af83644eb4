"""Core evaluator for the lang1 interpreter.

Walks a parsed tree against an Environment: special forms get their arguments
unevaluated, other lists are calls (operator first, then arguments left to
right), symbols resolve through the scope chain.
"""

from __future__ import annotations

from lang1 import SExpression, LispValue
from lang1.evaluation.apply import apply
from lang1.evaluation.special_forms import SPECIAL_FORMS
from lang1.types.environment import Environment
from lang1.types.symbol import Symbol
from lang1.types.unbound import Unbound


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    match expr:
        case [Symbol() as head, *tail] if head in SPECIAL_FORMS:
            return SPECIAL_FORMS[head](tail, env, evaluate)

        case [head, *tail]:
            operator = evaluate(head, env)
            args = [evaluate(arg, env) for arg in tail]
            return apply(operator, args, evaluate)

        case Symbol():
            # An unbound name is not an error: it evaluates to itself.
            value = env.lookup(expr)
            if value is Unbound:
                return expr
            return value

    # --- Atoms, the empty list, closures and errors return as-is ---
    return expr
