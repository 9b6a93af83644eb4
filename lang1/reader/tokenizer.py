"""
  lang1 tokenizer

- Works on a text slice and hands back (token, remainder) pairs, so callers
  always know exactly what is left unparsed.
- Tokens are (token_type, value) tuples:

    - "lparen" / "rparen" -> "(" / ")"
    - "string" -> QuotedString, text between two '"' (no escape character)
    - "int"    -> int, base-10 integer literal that fits in 64 bits
    - "float"  -> float, base-10 decimal literal
    - "symbol" -> Symbol, any other run of characters up to whitespace,
                  a parenthesis, or '"'
"""

from __future__ import annotations

import re
from typing import Optional

from lang1 import LispValue
from lang1.errors import UnterminatedString
from lang1.types.quoted_string import QuotedString
from lang1.types.symbol import Symbol

Token = tuple[str, LispValue]

ATOM_RE = re.compile(r'[^\s()"]+')
INT_RE = re.compile(r"[+-]?[0-9]+")
FLOAT_RE = re.compile(
    r"[+-]?"
    r"(?:[0-9]+\.[0-9]*|\.[0-9]+|[0-9]+)"  # mantissa
    r"(?:[eE][+-]?[0-9]+)?"  # exponent
)

INT_MIN = -(2**63)
INT_MAX = 2**63 - 1


def classify_atom(text: str) -> Token:
    """Integer first, then float, else symbol."""
    if INT_RE.fullmatch(text):
        value = int(text)
        if INT_MIN <= value <= INT_MAX:
            return "int", value
    if FLOAT_RE.fullmatch(text):
        value = float(text)
        # Literals beyond float64 range stay symbols
        if value not in (float("inf"), float("-inf")):
            return "float", value
    return "symbol", Symbol(text)


def next_token(text: str) -> tuple[Optional[Token], str]:
    """Read one token from the front of `text`.

    Returns (None, "") when only whitespace is left. An unterminated quoted
    string raises UnterminatedString without consuming anything.
    """
    s = text.lstrip()
    if not s:
        return None, ""

    c = s[0]
    if c == "(":
        return ("lparen", "("), s[1:]
    if c == ")":
        return ("rparen", ")"), s[1:]
    if c == '"':
        end = s.find('"', 1)
        if end < 0:
            raise UnterminatedString("Unmatched '\"'", remainder=s)
        return ("string", QuotedString(s[1:end])), s[end + 1:]

    m = ATOM_RE.match(s)
    return classify_atom(m.group(0)), s[m.end():]

