"""Lexical-grammar constants shared with the query lexer."""

from typing import FrozenSet

# Characters the query lexer treats as line terminators. Carriage return is not
# one of them: the lexer folds CR LF pairs itself.
NEWLINE_CHARACTERS: FrozenSet[str] = frozenset({"\n", "\u0085", "\u2028", "\u2029"})


def is_newline(c: str) -> bool:
    return c in NEWLINE_CHARACTERS
