"""Output formatting for lang1 values.

format_value renders a value the way the shell prints results:

    int/float      Python numeric formatting      24.0  -5.0  inf
    str            bare text (concatenation)      abc
    QuotedString   quoted, control chars escaped  "a\\tb"
    Symbol         its name                       foo
    list           (elem elem ...)                (1 2.5 x)  ()
    Closure        (λ name (params) body...)
    Error          Kind: message

dump renders a tree one node per line with its type, for debug logging.
"""

from __future__ import annotations

from io import StringIO

from lang1 import LispValue, SExpression
from lang1.types.closure import Closure
from lang1.types.error_value import Error
from lang1.types.quoted_string import QuotedString
from lang1.types.symbol import Symbol


def format_value(value: LispValue) -> str:
    match value:
        case QuotedString():
            return value.quoted()
        case str():
            return value
        case Symbol():
            return str(value)
        case int() | float():
            return repr(value)
        case list():
            return "(" + " ".join(format_value(v) for v in value) + ")"
        case Closure() | Error():
            return str(value)
    return repr(value)


def _dump(expr: SExpression, level: int, buffer: StringIO) -> None:
    pad = " " * (level * 3)
    if isinstance(expr, list):
        buffer.write(f"{pad}list: {len(expr)} elements\n")
        for e in expr:
            _dump(e, level + 1, buffer)
    else:
        buffer.write(f"{pad}{type(expr).__name__}: {format_value(expr)}\n")


def dump(expr: SExpression, level: int = 0) -> str:
    with StringIO() as buffer:
        _dump(expr, level, buffer)
        return buffer.getvalue()
