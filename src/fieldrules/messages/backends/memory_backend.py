"""In-memory locale backend for tests and embedding."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


class MemoryLocaleBackend:
    """Dict-backed locale backend."""

    def __init__(self, tables: Mapping[str, Mapping[str, Any]] | None = None) -> None:
        self._tables = {locale: dict(table) for locale, table in (tables or {}).items()}

    def load(self, locale: str) -> dict[str, Any]:
        if locale not in self._tables:
            raise KeyError(f"Locale {locale!r} not found")
        return dict(self._tables[locale])
