from __future__ import annotations
import json


class QuotedString(str):
    """Literal text read between two double quotes.

    A str subclass so it concatenates and compares like text, while the printer
    can still tell a literal (printed quoted) from a concatenation result
    (a plain str, printed bare).
    """

    __slots__ = ()

    def __repr__(self):
        return f"QuotedString({str.__repr__(self)})"

    def quoted(self) -> str:
        # Double quotes with control characters escaped
        return json.dumps(str(self), ensure_ascii=False)
