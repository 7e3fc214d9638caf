"""
  Lexer

Turns one line of program text into a flat list of (token_type, token_value)
tuples:

    - "("          -> ("lparen", "(")
    - ")"          -> ("rparen", ")")
    - signed ints  -> ("integer", int)
    - anything else between whitespace -> ("symbol", str)

There are no comments, strings or escapes: any other character is part of
the surrounding symbol. Tokenizing never fails.
"""

from __future__ import annotations

import re
from typing import Union

Token = tuple[str, Union[str, int]]

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

# int() also accepts underscores and non-ASCII digits, neither of which is a numeral here
INTEGER_RE = re.compile(r"[+-]?[0-9]+", re.ASCII)

LPAREN: Token = ("lparen", "(")
RPAREN: Token = ("rparen", ")")


def classify(word: str) -> Token:
    if word == "(":
        return LPAREN
    if word == ")":
        return RPAREN
    if INTEGER_RE.fullmatch(word):
        value = int(word)
        # Out-of-range numerals stay symbols
        if INT64_MIN <= value <= INT64_MAX:
            return "integer", value
    return "symbol", word


def tokenize(program: str) -> list[Token]:
    """Return the tokens of `program` in source order."""
    program = program.replace("(", " ( ").replace(")", " ) ")
    return [classify(word) for word in program.split()]
