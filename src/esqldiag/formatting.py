"""Context-phrase and message formatting for query diagnostics."""

from dataclasses import dataclass
from typing import Optional

from esqldiag.normalizer import normalize
from esqldiag.position import Position, resolve
from esqldiag.resources import Label, ResourceLabel, StringTable, get_strings, resolve_label


@dataclass(frozen=True)
class Phrases:
    """Locale-dependent words used when composing messages."""
    near: str = "near"
    line: str = "line"
    column: str = "column"

    @classmethod
    def from_strings(cls, strings: StringTable) -> "Phrases":
        return cls(
            near=strings.require("LocalizedNear"),
            line=strings.require("LocalizedLine"),
            column=strings.require("LocalizedColumn"),
        )


def _phrases(phrases: Optional[Phrases]) -> Phrases:
    return phrases or Phrases.from_strings(get_strings())


def format_context(
    label: Optional[str],
    position: Optional[Position],
    phrases: Optional[Phrases] = None,
) -> str:
    """Render "[label, ]line L, column C"; '' when there is neither label nor position."""
    parts = []
    if label:
        parts.append(f"{label}, ")
    if position is not None:
        words = _phrases(phrases)
        parts.append(f"{words.line} {position.line}, {words.column} {position.column}")
    return "".join(parts)


def format_message(description: str, context: str, phrases: Optional[Phrases] = None) -> str:
    """Message format: "description[ near context]."."""
    if not context:
        return f"{description}."
    return f"{description} {_phrases(phrases).near} {context}."


def format_error_context(
    command_text: str,
    position: int,
    label: Optional[Label] = None,
    strings: Optional[StringTable] = None,
) -> tuple[str, int, int]:
    """Locate ``position`` in ``command_text`` and render its context phrase.

    Returns (context, line, column). A negative position means no position is
    known: the phrase carries only the label and line/column are 0.
    """
    if position > len(command_text):
        raise ValueError(
            f"Error position {position} is past the end of the query text (length {len(command_text)})"
        )
    if strings is None:
        strings = get_strings()
    phrases = Phrases.from_strings(strings)
    label_text = resolve_label(label, strings)

    if position < 0:
        return format_context(label_text, None, phrases), 0, 0

    resolved = resolve(normalize(command_text), position, text_length=len(command_text))
    return format_context(label_text, resolved, phrases), resolved.line, resolved.column


def generic_error_message(
    command_text: str, position: int, strings: Optional[StringTable] = None
) -> str:
    """Context phrase labelled with the generic syntax-error text."""
    context, _, _ = format_error_context(
        command_text, position, ResourceLabel("GenericSyntaxError"), strings
    )
    return context
