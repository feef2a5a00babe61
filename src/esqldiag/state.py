"""Diagnostic state attached to query errors, and its serializable snapshot."""

from dataclasses import asdict, dataclass
from typing import Any

SNAPSHOT_VERSION = 1
_FIELDS = ("message", "description", "context", "line", "column")


@dataclass(frozen=True)
class DiagnosticState:
    """Where and why a query was rejected.

    ``line`` and ``column`` are 1-based; 0 means no position is known.
    """
    description: str = ""
    context: str = ""
    line: int = 0
    column: int = 0


@dataclass(frozen=True)
class DiagnosticSnapshot:
    """Plain-data form of a raised query error.

    Fields: version, message, description, context, line, column. Restoring
    from a snapshot assigns the fields directly; nothing is re-resolved.
    """
    message: str
    description: str = ""
    context: str = ""
    line: int = 0
    column: int = 0
    version: int = SNAPSHOT_VERSION

    @classmethod
    def capture(cls, message: str, state: DiagnosticState) -> "DiagnosticSnapshot":
        return cls(
            message=message,
            description=state.description,
            context=state.context,
            line=state.line,
            column=state.column,
        )

    @property
    def state(self) -> DiagnosticState:
        return DiagnosticState(self.description, self.context, self.line, self.column)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DiagnosticSnapshot":
        version = data.get("version")
        if version != SNAPSHOT_VERSION:
            raise ValueError(f"Unsupported diagnostic snapshot version: {version!r}")
        missing = [name for name in _FIELDS if name not in data]
        if missing:
            raise ValueError(f"Diagnostic snapshot is missing fields: {', '.join(missing)}")
        return cls(
            message=str(data["message"]),
            description=str(data.get("description") or ""),
            context=str(data.get("context") or ""),
            line=int(data.get("line") or 0),
            column=int(data.get("column") or 0),
            version=version,
        )
