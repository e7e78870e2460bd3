"""Message catalog: key -> template lookup for one active locale.

Usage::

    # Bundled tables (zh_CN is the base locale):
    catalog = MessageCatalog("en_US")
    catalog.get("required")            # "Please fill in {label}"

    # Switching locale builds a new catalog; the old one is untouched:
    zh = catalog.with_locale("zh_CN")

    # Tables on disk, bundled tables as fallback:
    catalog = MessageCatalog(
        "fr_FR",
        backend=FileLocaleBackend("/etc/myapp/messages"),
        fallback_backend=PackageLocaleBackend(),
    )

Lookup order for ``get(key)``: the locale's table, then its ``default``
entry, then the raw key.  A locale whose table is missing or malformed
degrades to the base locale; a missing base table leaves an empty table,
so every lookup returns the raw key.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from fieldrules.config import DEFAULT_LOCALE, LOCALE_PATTERN
from fieldrules.exceptions import ConfigurationError
from fieldrules.messages.backends.file_backend import FileLocaleBackend
from fieldrules.messages.backends.package_backend import PackageLocaleBackend
from fieldrules.messages.backends.protocol import ILocaleBackend

if TYPE_CHECKING:
    from fieldrules.config import FieldRulesSettings

log = logging.getLogger(__name__)

DEFAULT_KEY = "default"


def validate_locale(locale: str) -> str:
    """Return ``locale`` unchanged or raise ``ConfigurationError``."""
    if not isinstance(locale, str) or not LOCALE_PATTERN.match(locale):
        raise ConfigurationError(f"Invalid language code format: {locale}. Expected format: en_US")
    return locale


class MessageCatalog:
    """Immutable view of one locale's message table.

    Tables are loaded when the catalog is built (and lazily for
    ``get(key, locale=...)`` lookups in other locales) and are read-only
    afterwards.
    """

    def __init__(
        self,
        locale: str = DEFAULT_LOCALE,
        *,
        backend: ILocaleBackend | None = None,
        fallback_backend: ILocaleBackend | None = None,
        base_locale: str = DEFAULT_LOCALE,
    ) -> None:
        self._locale = validate_locale(locale)
        self._base_locale = validate_locale(base_locale)
        self._backend: ILocaleBackend = backend if backend is not None else PackageLocaleBackend()
        self._fallback_backend = fallback_backend
        self._tables: dict[str, Mapping[str, str]] = {}
        self._messages = self._table_for(self._locale)

    @property
    def locale(self) -> str:
        return self._locale

    @property
    def base_locale(self) -> str:
        return self._base_locale

    @property
    def messages(self) -> Mapping[str, str]:
        """The active locale's table (read-only)."""
        return self._messages

    def with_locale(self, locale: str) -> MessageCatalog:
        """Return a catalog for ``locale`` sharing this catalog's backends."""
        return MessageCatalog(
            locale,
            backend=self._backend,
            fallback_backend=self._fallback_backend,
            base_locale=self._base_locale,
        )

    def get(self, key: str, locale: str | None = None) -> str:
        """Look up the template for ``key``.

        Args:
            key: Message key (e.g. ``"required"``).
            locale: Optional locale to read instead of the active one.

        Returns:
            The template, the locale's ``default`` template, or ``key``.
        """
        if locale is None or locale == self._locale:
            table = self._messages
        else:
            table = self._table_for(validate_locale(locale))

        if key in table:
            return table[key]
        if DEFAULT_KEY in table:
            return table[DEFAULT_KEY]
        return key

    def __contains__(self, key: object) -> bool:
        return key in self._messages

    def __repr__(self) -> str:
        return f"MessageCatalog(locale={self._locale!r}, base_locale={self._base_locale!r})"

    # ── Internal ────────────────────────────────────────────────────

    def _table_for(self, locale: str) -> Mapping[str, str]:
        if locale not in self._tables:
            self._tables[locale] = self._load(locale)
        return self._tables[locale]

    def _load(self, locale: str) -> Mapping[str, str]:
        table = self._fetch(locale)
        if table is None and locale != self._base_locale:
            log.warning("No usable message table for %s, falling back to %s", locale, self._base_locale)
            table = self._fetch(self._base_locale)
        if table is None:
            log.warning("No message table for base locale %s; messages will render as raw keys", self._base_locale)
            table = {}
        return MappingProxyType(table)

    def _fetch(self, locale: str) -> dict[str, str] | None:
        """Try the primary then the fallback backend; ``None`` when neither has a valid table."""
        for backend in (self._backend, self._fallback_backend):
            if backend is None:
                continue
            try:
                raw = backend.load(locale)
            except KeyError:
                log.debug("%s has no table for %s", type(backend).__name__, locale)
                continue
            except ValueError as exc:
                log.warning("Ignoring malformed %s table from %s: %s", locale, type(backend).__name__, exc)
                continue

            table = _coerce_table(raw)
            if table is None:
                log.warning("Ignoring malformed %s table from %s", locale, type(backend).__name__)
                continue
            return table
        return None


def _coerce_table(raw: Any) -> dict[str, str] | None:
    """Copy a raw table, rejecting anything that is not ``str`` -> ``str``."""
    if not isinstance(raw, Mapping):
        return None
    table: dict[str, str] = {}
    for key, value in raw.items():
        if not isinstance(key, str) or not isinstance(value, str):
            return None
        table[key] = value
    return table


def create_catalog(settings: FieldRulesSettings) -> MessageCatalog:
    """Build the catalog described by ``settings``.

    With ``locale_dir`` set, files in that directory are the primary source
    and the bundled tables the fallback.
    """
    if settings.locale_dir is not None:
        return MessageCatalog(
            settings.locale,
            backend=FileLocaleBackend(settings.locale_dir),
            fallback_backend=PackageLocaleBackend(),
            base_locale=settings.base_locale,
        )
    return MessageCatalog(settings.locale, base_locale=settings.base_locale)
