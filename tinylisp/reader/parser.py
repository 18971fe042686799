"""
  Lisp Reader, Lexer and Parser

- The lexer pads every paren with spaces and splits on whitespace.
- The parser is recursive descent and emits Python primitives:

    - symbols -> Symbol
    - numbers -> float
    - lists   -> Python list

Numeric vs symbolic classification happens here, not in the lexer.
"""

from __future__ import annotations

import logging
from typing import Iterator, Optional, Sequence

from tinylisp import Expression
from tinylisp.types.errors import TinyLispSyntaxError
from tinylisp.types.symbol import Symbol

logger = logging.getLogger(__name__)

LPAREN = "("
RPAREN = ")"


def lex(source: str) -> list[str]:
    """Split `source` into token strings; never fails."""
    return source.replace(LPAREN, " ( ").replace(RPAREN, " ) ").split()


def parse_atom(token: str) -> Expression:
    """Number if the host float parser accepts the token, otherwise Symbol."""
    # float() tolerates digit-group underscores ("1_000"); keep those symbolic
    if "_" not in token:
        try:
            return float(token)
        except ValueError:
            pass
    return Symbol(token)


class TokenStream:
    """Cursor over a token sequence."""

    def __init__(self, tokens: Sequence[str]):
        self.tokens = list(tokens)
        self.pos = 0

    def peek(self) -> Optional[str]:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def advance(self) -> Optional[str]:
        tok = self.peek()
        if tok is not None:
            self.pos += 1
        return tok

    def remaining(self) -> list[str]:
        return self.tokens[self.pos:]

    def at_end(self) -> bool:
        return self.pos >= len(self.tokens)

    def parse_expr(self) -> Expression:
        """Parse exactly one expression, raising TinyLispSyntaxError on failure."""
        tok = self.advance()
        if tok is None:
            raise TinyLispSyntaxError("unexpected end of input")
        if tok == RPAREN:
            raise TinyLispSyntaxError("unexpected close paren")
        if tok != LPAREN:
            return parse_atom(tok)

        items = []
        while True:
            nxt = self.peek()
            if nxt is None:
                raise TinyLispSyntaxError("unexpected end of input")
            if nxt == RPAREN:
                self.advance()
                return items
            items.append(self.parse_expr())

    def parse_all(self) -> Iterator[Expression]:
        while not self.at_end():
            yield self.parse_expr()


def parse(tokens: Sequence[str]) -> tuple[Expression, list[str]]:
    """Parse one expression from `tokens`; return it with the unconsumed tail."""
    stream = TokenStream(tokens)
    expr = stream.parse_expr()
    rest = stream.remaining()
    logger.debug("parsed %r, %d trailing token(s)", expr, len(rest))
    return expr, rest
