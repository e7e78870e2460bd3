"""Locale backend reading the tables bundled with fieldrules.

Each locale module stores its templates in a ``_MESSAGE_DATA`` dict.
"""

from __future__ import annotations

import importlib
from typing import Any

_PACKAGE = "fieldrules.messages.locales"


class PackageLocaleBackend:
    """Loads tables from Python modules via importlib.

    Module path convention: ``{package}.{locale}`` (default package
    ``fieldrules.messages.locales``).
    """

    def __init__(self, package: str = _PACKAGE) -> None:
        self._package = package
        self._modules: dict[str, Any] = {}

    def load(self, locale: str) -> dict[str, Any]:
        if locale not in self._modules:
            module_path = f"{self._package}.{locale}"
            try:
                self._modules[locale] = importlib.import_module(module_path)
            except ModuleNotFoundError as exc:
                raise KeyError(f"Locale module not found: {module_path}") from exc

        data = getattr(self._modules[locale], "_MESSAGE_DATA", None)
        if data is None:
            raise KeyError(f"Locale module {self._package}.{locale} has no _MESSAGE_DATA")
        if not isinstance(data, dict):
            raise ValueError(f"_MESSAGE_DATA in {self._package}.{locale} is not a dict")
        return data
