from __future__ import annotations

from lang1.errors import Lang1Error


class Error:
    """A failure carried as ordinary data (e.g. applying a non-function)."""

    __slots__ = ("exception",)

    def __init__(self, exception: Lang1Error):
        self.exception = exception

    @property
    def kind(self) -> str:
        return self.exception.kind

    @property
    def message(self) -> str:
        return str(self.exception)

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, Error)
            and self.kind == other.kind
            and self.message == other.message
        )

    def __hash__(self) -> int:
        return hash((self.kind, self.message))

    def __repr__(self) -> str:
        return f"Error({self.kind}: {self.message})"

    def __str__(self) -> str:
        return f"{self.kind}: {self.message}"
