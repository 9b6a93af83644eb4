"""Primitive operators for the lang1 runtime.

Each operator folds its arguments into a float, starting from a fixed seed
rather than the first argument:

    (+ a b ...)  0.0 + a + b ...
    (- a b ...)  0.0 - a - b ...
    (* a b ...)  1.0 * a * b ...
    (/ a b ...)  1.0 / a / b ...

`+` with more than one argument and a string first concatenates instead.
"""
from __future__ import annotations

import math
import operator
from typing import Callable

from lang1 import LispValue
from lang1.errors import TypeMismatch
from lang1.printer import format_value
from lang1.types.symbol import Symbol


def _as_float(op: str, x: LispValue) -> float:
    if isinstance(x, (int, float)) and not isinstance(x, bool):
        return float(x)
    raise TypeMismatch(f"All arguments to {op} must be numbers, got {format_value(x)}")


def _fold(op: str, seed: float, fn: Callable[[float, float], float], args: list[LispValue]) -> float:
    result = seed
    for x in args:
        result = fn(result, _as_float(op, x))
    return result


def _divide(x: float, y: float) -> float:
    """IEEE-754 division: x/0 is a signed infinity, 0/0 is nan."""
    if y == 0.0:
        if x == 0.0 or math.isnan(x):
            return math.nan
        return math.copysign(math.inf, x) * math.copysign(1.0, y)
    return x / y


def concat(args: list[LispValue]) -> str:
    """Join string arguments with no separator; the result prints unquoted."""
    for x in args:
        if not isinstance(x, str):
            raise TypeMismatch(f"All arguments to + must be strings, got {format_value(x)}")
    return "".join(args)


# -------------------------------
# Arithmetic
# -------------------------------
def add(args: list[LispValue]) -> LispValue:
    """Concatenate strings, or sum numbers from 0.0."""
    if len(args) > 1 and isinstance(args[0], str):
        return concat(args)
    return _fold("+", 0.0, operator.add, args)


def sub(args: list[LispValue]) -> float:
    """Subtract every argument from 0.0, so (- 5) is -5.0 and (- 10 3) is -13.0."""
    return _fold("-", 0.0, operator.sub, args)


def mul(args: list[LispValue]) -> float:
    return _fold("*", 1.0, operator.mul, args)


def div(args: list[LispValue]) -> float:
    """Divide 1.0 by every argument in turn, so (/ 2 4) is 0.125."""
    return _fold("/", 1.0, _divide, args)


PRIMITIVES: dict[Symbol, Callable[[list[LispValue]], LispValue]] = {
    Symbol("+"): add,
    Symbol("-"): sub,
    Symbol("*"): mul,
    Symbol("/"): div,
}


def is_primitive(value: LispValue) -> bool:
    """True only for a Symbol spelled exactly like one of the operators."""
    return isinstance(value, Symbol) and value in PRIMITIVES
