"""Display-string table for diagnostics, loaded from the packaged YAML file."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import yaml

from esqldiag.errors import ResourceError

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en"
LOCALE_ENV_VAR = "ESQLDIAG_LOCALE"
STRINGS_PATH = Path(__file__).resolve().parent / "data" / "strings.yaml"


class StringTable:
    """Read-only mapping of resource keys to display strings for one locale."""

    def __init__(self, strings: dict[str, str], locale: str = DEFAULT_LOCALE):
        self._strings = dict(strings)
        self.locale = locale

    def get(self, key: str) -> Optional[str]:
        """Look up ``key``; an empty value is reported as missing."""
        value = self._strings.get(key)
        return value or None

    def require(self, key: str) -> str:
        value = self.get(key)
        if value is None:
            raise ResourceError(f"Missing resource string {key!r} for locale {self.locale!r}")
        return value

    def __contains__(self, key: str) -> bool:
        return self.get(key) is not None

    def __len__(self) -> int:
        return len(self._strings)

    def __repr__(self) -> str:
        return f"StringTable(locale={self.locale!r}, {len(self)} strings)"


def load_strings(locale: Optional[str] = None, path: Optional[Path] = None) -> StringTable:
    """Load the string table for ``locale`` from ``path`` (packaged file by default)."""
    locale = locale or os.environ.get(LOCALE_ENV_VAR) or DEFAULT_LOCALE
    path = path or STRINGS_PATH
    if not path.exists():
        raise ResourceError(f"Resource file not found: {path}")
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    section = data.get(locale) if isinstance(data, dict) else None
    if not isinstance(section, dict):
        raise ResourceError(f"No strings for locale {locale!r} in {path}")
    strings = {str(k): str(v) for k, v in section.items() if v is not None}
    logger.debug("Loaded %d resource strings for locale %s from %s", len(strings), locale, path)
    return StringTable(strings, locale)


_STRINGS: Optional[StringTable] = None


def get_strings() -> StringTable:
    global _STRINGS
    if _STRINGS is None:
        _STRINGS = load_strings()
    return _STRINGS


def set_strings(table: Optional[StringTable]) -> None:
    """Replace the active string table; ``None`` reloads it on next use."""
    global _STRINGS
    _STRINGS = table


# --- Context labels ---

@dataclass(frozen=True)
class TextLabel:
    """A label displayed as written."""
    text: str


@dataclass(frozen=True)
class ResourceLabel:
    """A label naming a key in the string table."""
    key: str


Label = Union[TextLabel, ResourceLabel]


def resolve_label(label: Optional[Label], strings: Optional[StringTable] = None) -> str:
    """Turn a label into display text; absent or unresolvable labels become ''."""
    if label is None:
        return ""
    if isinstance(label, TextLabel):
        return label.text or ""
    if not label.key:
        return ""
    table = strings if strings is not None else get_strings()
    text = table.get(label.key)
    if text is None:
        logger.debug("Resource label %r has no string in locale %s", label.key, table.locale)
        return ""
    return text
