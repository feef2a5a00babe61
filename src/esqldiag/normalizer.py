"""Rewrite query text into a display-safe, single-terminator form."""

import unicodedata

from esqldiag.lexer import is_newline


def _normalize_char(c: str) -> str:
    if is_newline(c):
        return "\n"
    if c != "\r" and (unicodedata.category(c) == "Cc" or c.isspace()):
        return " "
    return c


def normalize(text: str) -> str:
    """Map line terminators to LF and other control/whitespace characters to a space.

    Every character maps to exactly one character, so offsets into the input
    stay valid for the result. Trailing line feeds are trimmed; a carriage
    return is left in place (including a trailing one).
    """
    return "".join(_normalize_char(c) for c in text).rstrip("\n")
