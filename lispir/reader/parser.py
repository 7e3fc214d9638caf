"""
  Parser

Builds nested Python lists from the lexer's tokens:

    - lists    -> Python list
    - integers -> int
    - symbols  -> Symbol

Every parse starts with a list; a line made of a bare atom is a syntax error.
Nesting is tracked on an explicit stack, so deep input does not recurse.
"""

from __future__ import annotations

from typing import Iterable, Optional

from lispir import SExpression
from lispir.errors import LispirExpectedOpenParen, LispirUnexpectedEof
from lispir.reader.lexer import Token
from lispir.types.symbol import Symbol


def _leaf(token: Token) -> SExpression:
    tok_type, tok_val = token
    if tok_type == "integer":
        return tok_val
    return Symbol(tok_val)


def _describe(token: Token) -> str:
    tok_type, tok_val = token
    if tok_type == "integer":
        return f"Integer({tok_val})"
    if tok_type == "symbol":
        return f"Symbol({tok_val!r})"
    return str(tok_val)


class TokenStream:
    """Forward cursor over an immutable token sequence."""

    def __init__(self, tokens: Iterable[Token]):
        self.tokens: tuple[Token, ...] = tuple(tokens)
        self.pos = 0

    def peek(self) -> Optional[Token]:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def advance(self) -> Optional[Token]:
        token = self.peek()
        if token is not None:
            self.pos += 1
        return token

    def at_end(self) -> bool:
        return self.pos >= len(self.tokens)

    def parse_list(self) -> list[SExpression]:
        token = self.advance()
        if token is None:
            raise LispirUnexpectedEof("Expected (, found EOF")
        if token[0] != "lparen":
            raise LispirExpectedOpenParen(f"Expected (, found {_describe(token)}")

        # open lists, innermost last
        stack: list[list[SExpression]] = [[]]
        while True:
            token = self.advance()
            if token is None:
                raise LispirUnexpectedEof("Insufficient tokens")
            tok_type = token[0]
            if tok_type == "lparen":
                stack.append([])
            elif tok_type == "rparen":
                items = stack.pop()
                if not stack:
                    return items
                stack[-1].append(items)
            else:
                stack[-1].append(_leaf(token))

    def parse_all(self) -> list[SExpression]:
        """Parse top-level forms until the tokens run out.

        The first form must be a list; later forms may also be bare atoms.
        """
        forms = [self.parse_list()]
        while True:
            token = self.peek()
            if token is None:
                return forms
            if token[0] in ("integer", "symbol"):
                self.advance()
                forms.append(_leaf(token))
            else:
                forms.append(self.parse_list())


def parse(tokens: Iterable[Token]) -> list[SExpression]:
    """Parse exactly one list from the front of `tokens`."""
    return TokenStream(tokens).parse_list()


def parse_program(tokens: Iterable[Token]) -> list[SExpression]:
    """Parse a top-level list, optionally followed by more lists or atoms.

    A single list is returned unchanged. Several forms are wrapped in an outer
    list so they evaluate as one sequence, e.g. `(define y 1) (y 2)` reads as
    `((define y 1) (y 2))` and `(define x 5) x` as `((define x 5) x)`.
    """
    forms = TokenStream(tokens).parse_all()
    if len(forms) == 1:
        return forms[0]
    return forms
