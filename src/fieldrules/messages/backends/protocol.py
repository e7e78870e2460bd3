"""Protocol for pluggable locale-table backends."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ILocaleBackend(Protocol):
    """Interface for message-table storage backends.

    Implementations must be synchronous; tables are loaded inline when a
    catalog is constructed or switched to another locale.
    """

    def load(self, locale: str) -> Mapping[str, Any]:
        """Return the raw key -> template table for ``locale``.

        Raises:
            KeyError: If no table exists for the locale.
            ValueError: If a table exists but cannot be parsed.
        """
        ...
