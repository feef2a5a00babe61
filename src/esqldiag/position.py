"""Offset -> (line, column) resolution over normalized query text."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Position:
    """A 1-based line/column pair."""
    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


def resolve(text: str, offset: int, text_length: Optional[int] = None) -> Position:
    """Resolve a 0-based offset into ``text`` to a 1-based Position.

    ``text`` must already be normalized (LF is the only line terminator).
    ``text_length`` is the length the offset was measured against; it defaults
    to ``len(text)`` and should be the original length when trailing line feeds
    were trimmed. Offsets outside ``[0, text_length]`` raise ValueError.
    """
    limit = len(text) if text_length is None else text_length
    if offset < 0:
        raise ValueError(f"Offset {offset} is negative")
    if offset > limit:
        raise ValueError(f"Offset {offset} is past the end of the text (length {limit})")

    lines = text.split("\n")
    index = 0
    column = offset
    # Each skipped line also consumes its terminator.
    while index < len(lines) and column > len(lines[index]):
        column -= len(lines[index]) + 1
        index += 1
    return Position(index + 1, column + 1)


def to_offset(text: str, position: Position) -> int:
    """Inverse of resolve for positions that fall inside ``text``."""
    lines = text.split("\n")
    return sum(len(line) + 1 for line in lines[: position.line - 1]) + position.column - 1
