"""File-backed locale backend: one YAML or JSON table per locale on disk."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

log = logging.getLogger(__name__)

_SUFFIXES = (".yaml", ".yml", ".json")


class FileLocaleBackend:
    """Reads ``{directory}/{locale}.yaml`` (or ``.yml`` / ``.json``).

    Files are parsed on every ``load``; the catalog caches the resulting
    table for its lifetime.
    """

    def __init__(self, directory: Path | str) -> None:
        self._directory = Path(directory)

    @property
    def directory(self) -> Path:
        return self._directory

    def load(self, locale: str) -> dict[str, Any]:
        path = self._find(locale)
        if path is None:
            raise KeyError(f"No locale file for {locale!r} in {self._directory}")

        raw_text = path.read_text(encoding="utf-8")
        try:
            if path.suffix in (".yaml", ".yml"):
                data = yaml.safe_load(raw_text)
            else:
                data = json.loads(raw_text)
        except (yaml.YAMLError, json.JSONDecodeError) as exc:
            raise ValueError(f"Malformed locale file {path}: {exc}") from exc

        if not isinstance(data, dict):
            raise ValueError(f"Locale file {path} must contain a mapping, got {type(data).__name__}")

        log.debug("Loaded %d messages from %s", len(data), path)
        return data

    def _find(self, locale: str) -> Path | None:
        for suffix in _SUFFIXES:
            candidate = self._directory / f"{locale}{suffix}"
            if candidate.is_file():
                return candidate
        return None
