"""Closure representation for lang1 functions created by defn."""

from __future__ import annotations

from io import StringIO

from lang1 import SExpression, LispValue
from lang1.types.environment import Environment
from lang1.types.symbol import Symbol


class Closure:
    """A function value: parameters, an unevaluated body, and the defining env.

    The environment is held by reference. Bindings added to it after the
    closure is created are visible when the closure runs.
    """

    __slots__ = ("params", "body", "env", "name")

    def __init__(
        self,
        params: list[Symbol],
        body: list[SExpression],
        env: Environment,
        name: Symbol | None = None,
    ):
        self.params: list[Symbol] = params
        self.body: list[SExpression] = body
        self.env: Environment = env
        self.name: Symbol | None = name

    def extend_env(self, args: list[LispValue]) -> Environment:
        """Bind the argument values to the parameters in a fresh frame under the captured env."""
        return Environment.extend(self.env, self.params, args)

    def __str__(self) -> str:
        from lang1.printer import format_value

        with StringIO() as buffer:
            buffer.write("(λ ")
            if self.name is not None:
                buffer.write(f"{self.name} ")
            buffer.write("(")
            buffer.write(" ".join(str(p) for p in self.params))
            buffer.write(")")
            for expr in self.body:
                buffer.write(" ")
                buffer.write(format_value(expr))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)
