"""Locale-table backends: bundled package modules, files on disk, memory."""

from __future__ import annotations

from fieldrules.messages.backends.file_backend import FileLocaleBackend
from fieldrules.messages.backends.memory_backend import MemoryLocaleBackend
from fieldrules.messages.backends.package_backend import PackageLocaleBackend
from fieldrules.messages.backends.protocol import ILocaleBackend

__all__ = [
    "FileLocaleBackend",
    "ILocaleBackend",
    "MemoryLocaleBackend",
    "PackageLocaleBackend",
]
