# Core type aliases for lang1's data model.
# Plain Python types carry both parsed forms and runtime values:
# int, float, list, str (concatenation results), plus the small classes in
# lang1.types (Symbol, QuotedString, Closure, Error).
#
# Naming guidance:
# - SExpression: parsed source trees handed to the evaluator.
# - LispValue:  values produced by evaluation.
# Both resolve to `Any`; a parsed tree is also a value (unknown symbols
# evaluate to themselves).

from typing import Any, Callable

# Runtime value alias
LispValue = Any
# Parsed forms alias
SExpression = LispValue

# Evaluator function type, passed to special forms
EvaluatorFn = Callable[..., LispValue]
