from __future__ import annotations


class UnboundType:
    """Result of looking up a name no frame binds.

    A soft signal rather than an error: the evaluator falls back to treating
    the symbol as a self-evaluating atom.
    """

    __slots__ = ()

    def __repr__(self): return "#<unbound>"
    def __bool__(self): return False


Unbound = UnboundType()
