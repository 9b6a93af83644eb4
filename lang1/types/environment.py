"""Runtime environment for lang1.

An Environment stores bindings of Symbols to evaluated values and supports
nested scopes via an `outer` link. Frames form a tree rooted at the global
environment; a call creates one child frame, which stays reachable only while
a Closure created during the call holds on to it.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional, Sequence

from lang1 import LispValue
from lang1.errors import ArityError
from lang1.types.symbol import Symbol
from lang1.types.unbound import Unbound


class Environment:
    """Hierarchical mapping from Symbols to values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    @classmethod
    def extend(
        cls,
        parent: Environment,
        params: Sequence[Symbol],
        args: Sequence[LispValue],
    ) -> Environment:
        """Create a child frame of `parent` binding each param to the arg at the same position.

        Raises ArityError when the counts differ.
        """
        if len(params) != len(args):
            raise ArityError(
                f"Expected {len(params)} argument(s), got {len(args)}"
            )
        env = cls(outer=parent)
        for name, value in zip(params, args):
            env.vars[name] = value
        return env

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame only; outer frames are never touched."""
        self.vars[name] = value

    def find(self, name: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`, innermost frame first.

        Returns the Unbound sentinel when no frame binds the name.
        """
        env = self.find(name)
        if env is None:
            return Unbound
        return env.vars[name]

    def depth(self) -> int:
        """Number of frames between this one and the root."""
        n = 0
        env = self.outer
        while env is not None:
            n += 1
            env = env.outer
        return n

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Chain representation for debugging purposes."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as env_buf:
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
            env = env.outer
        return "<Environment chain: " + " -> ".join(chain) + ">"
