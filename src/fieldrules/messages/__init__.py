"""Localized validation messages: catalog, formatter, locale backends."""

from __future__ import annotations

from fieldrules.messages.backends import (
    FileLocaleBackend,
    ILocaleBackend,
    MemoryLocaleBackend,
    PackageLocaleBackend,
)
from fieldrules.messages.catalog import MessageCatalog, create_catalog, validate_locale
from fieldrules.messages.errors import ErrorKind, FieldError
from fieldrules.messages.formatter import MessageFormatter

__all__ = [
    "ErrorKind",
    "FieldError",
    "FileLocaleBackend",
    "ILocaleBackend",
    "MemoryLocaleBackend",
    "MessageCatalog",
    "MessageFormatter",
    "PackageLocaleBackend",
    "create_catalog",
    "validate_locale",
]
