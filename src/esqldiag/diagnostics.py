"""Query compilation errors that carry their location in the query text.

An EntitySqlError is raised for syntax errors (the query does not match the
grammar) and semantic errors (unknown names, type mismatches, scoping
violations). Errors built from an ErrorContext resolve the error offset to a
line and column and embed them in the message:

    The query syntax is not valid near FROM clause, line 2, column 6.

The same values stay available as ``description``, ``context``, ``line`` and
``column`` so callers do not need to parse the message.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional

from esqldiag.errors import EntityError
from esqldiag.formatting import Phrases, format_error_context, format_message
from esqldiag.resources import Label, ResourceLabel, StringTable, TextLabel, get_strings
from esqldiag.state import DiagnosticSnapshot, DiagnosticState

logger = logging.getLogger(__name__)


@dataclass
class ErrorContext:
    """What the parser knows about an error: the query, the offset and a label.

    ``context_info`` is either display text or, when
    ``context_info_is_resource_key`` is set, a key into the string table.
    """
    command_text: str
    input_position: int
    context_info: str = ""
    context_info_is_resource_key: bool = False

    @property
    def label(self) -> Optional[Label]:
        if not self.context_info:
            return None
        if self.context_info_is_resource_key:
            return ResourceLabel(self.context_info)
        return TextLabel(self.context_info)


class EntitySqlError(EntityError):
    """A query was rejected by the compiler."""

    # HRESULT reported for invalid queries.
    hresult = -2146232006

    def __init__(
        self,
        message: Optional[str] = None,
        cause: Optional[BaseException] = None,
        *,
        state: Optional[DiagnosticState] = None,
    ):
        if message is None:
            message = get_strings().require("GeneralQueryError")
        super().__init__(message)
        self.message = message
        self._state = state or DiagnosticState()
        if cause is not None:
            self.__cause__ = cause

    @classmethod
    def from_context(
        cls,
        ctx: ErrorContext,
        description: str,
        cause: Optional[BaseException] = None,
        strings: Optional[StringTable] = None,
    ) -> "EntitySqlError":
        """Build an error locating ``description`` at ``ctx.input_position``."""
        if strings is None:
            strings = get_strings()
        context, line, column = format_error_context(
            ctx.command_text, ctx.input_position, ctx.label, strings
        )
        message = format_message(description, context, Phrases.from_strings(strings))
        logger.debug("Query error at line %d, column %d: %s", line, column, description)
        return cls(message, cause, state=DiagnosticState(description, context, line, column))

    @classmethod
    def from_text(
        cls,
        command_text: str,
        description: str,
        position: int,
        context_info: str = "",
        context_info_is_resource_key: bool = False,
        cause: Optional[BaseException] = None,
        strings: Optional[StringTable] = None,
    ) -> "EntitySqlError":
        ctx = ErrorContext(command_text, position, context_info, context_info_is_resource_key)
        return cls.from_context(ctx, description, cause, strings)

    @property
    def state(self) -> DiagnosticState:
        return self._state

    @property
    def description(self) -> str:
        """Why the query was rejected, or '' when unknown."""
        return self._state.description or ""

    @property
    def context(self) -> str:
        """Approximate location of the error, or ''."""
        return self._state.context or ""

    @property
    def line(self) -> int:
        """1-based line of the error; 0 when unknown."""
        return self._state.line

    @property
    def column(self) -> int:
        """1-based column of the error; 0 when unknown."""
        return self._state.column

    def __str__(self) -> str:
        return self.message

    def snapshot(self) -> DiagnosticSnapshot:
        return DiagnosticSnapshot.capture(self.message, self._state)

    @classmethod
    def from_snapshot(cls, snapshot: DiagnosticSnapshot) -> "EntitySqlError":
        return cls(snapshot.message, state=snapshot.state)

    def __reduce__(self) -> tuple[Any, ...]:
        # The cause is not part of the snapshot and does not survive pickling.
        return _restore, (self.snapshot().to_dict(),)


def _restore(data: dict[str, Any]) -> EntitySqlError:
    return EntitySqlError.from_snapshot(DiagnosticSnapshot.from_dict(data))
