"""Locate query compilation errors and format their messages."""

from esqldiag.diagnostics import EntitySqlError, ErrorContext
from esqldiag.errors import EntityError, ResourceError
from esqldiag.formatting import (
    Phrases,
    format_context,
    format_error_context,
    format_message,
    generic_error_message,
)
from esqldiag.normalizer import normalize
from esqldiag.position import Position, resolve
from esqldiag.resources import ResourceLabel, StringTable, TextLabel, get_strings, load_strings
from esqldiag.state import DiagnosticSnapshot, DiagnosticState

__version__ = "0.1.0"

__all__ = [
    "DiagnosticSnapshot",
    "DiagnosticState",
    "EntityError",
    "EntitySqlError",
    "ErrorContext",
    "Phrases",
    "Position",
    "ResourceError",
    "ResourceLabel",
    "StringTable",
    "TextLabel",
    "format_context",
    "format_error_context",
    "format_message",
    "generic_error_message",
    "get_strings",
    "load_strings",
    "normalize",
    "resolve",
]
