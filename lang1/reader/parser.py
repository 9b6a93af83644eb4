"""
  lang1 parser

Grammar:

    Expr := Atom | '(' Expr* ')'

A line of input holds exactly one Expr. Lists become Python lists, atoms are
the token values (int, float, Symbol, QuotedString).
"""

from __future__ import annotations

import logging
from typing import Optional

from lang1 import SExpression
from lang1.errors import (
    EmptyInput,
    TrailingInput,
    UnmatchedCloseParen,
    UnmatchedOpenParen,
)
from lang1.reader.tokenizer import Token, next_token

logger = logging.getLogger(__name__)


class TokenStream:
    def __init__(self, source: str):
        self.rest = source
        # (token, text starting at that token), at most one pending
        self.buffer: list[tuple[Token, str]] = []

    def peek(self) -> tuple[Optional[str], Optional[SExpression]]:
        if not self.buffer:
            before = self.rest
            tok, self.rest = next_token(before)
            if tok is None:
                return None, None
            self.buffer.append((tok, before))
        return self.buffer[0][0]

    def advance(self) -> tuple[Optional[str], Optional[SExpression]]:
        tok = self.peek()
        if self.buffer:
            self.buffer.pop(0)
        return tok

    @property
    def remainder(self) -> str:
        """Text not consumed yet, including a peeked token."""
        if self.buffer:
            return self.buffer[0][1]
        return self.rest

    def parse_expr(self) -> SExpression:
        """Parse one Expr; None when the input is exhausted."""
        tok_type, tok_val = self.peek()
        if tok_type is None:
            return None

        if tok_type == "rparen":
            raise UnmatchedCloseParen("Unmatched ')'")

        self.advance()
        if tok_type == "lparen":
            items = []
            while True:
                next_type, _ = self.peek()
                if next_type is None:
                    raise UnmatchedOpenParen("Unmatched '('")
                if next_type == "rparen":
                    self.advance()
                    return items
                items.append(self.parse_expr())

        return tok_val


def parse(source: str) -> SExpression:
    """Parse exactly one expression from `source`.

    Raises EmptyInput for blank input and TrailingInput if anything but
    whitespace follows the expression.
    """
    stream = TokenStream(source)
    expr = stream.parse_expr()
    if expr is None:
        raise EmptyInput("Blank input string")
    left = stream.remainder
    if left.strip():
        raise TrailingInput(f"Left over text: {left.strip()}", remainder=left)
    logger.debug("Parsed %r", expr)
    return expr
