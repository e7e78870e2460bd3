"""File-backed rule sets: YAML or JSON documents on disk.

Document shape::

    version: 2
    rules:
      username:
        label: Username
        rules:
          - required: true
          - min_length: 3
            max_length: 20
    scenes:
      login: [username, password]
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from fieldrules.exceptions import ConfigurationError, RuleFileError
from fieldrules.validation.models import RuleSet, coerce_rule_set

log = logging.getLogger(__name__)


class FileRuleSetBackend:
    """Loads a rule set from a YAML or JSON file.

    The file is lazy-loaded on first access and cached for the life of the
    backend.
    """

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)
        self._rules: RuleSet | None = None
        self._scenes: dict[str, list[str]] = {}
        self._version: int = 1

    @property
    def path(self) -> Path:
        return self._path

    def get_rules(self) -> RuleSet:
        self._ensure_loaded()
        assert self._rules is not None
        return {name: spec.copy_rules() for name, spec in self._rules.items()}

    def get_scenes(self) -> dict[str, list[str]]:
        self._ensure_loaded()
        return {name: list(fields) for name, fields in self._scenes.items()}

    def get_version(self) -> int:
        self._ensure_loaded()
        return self._version

    def _ensure_loaded(self) -> None:
        """Lazy-load the rules file on first access."""
        if self._rules is not None:
            return

        if not self._path.exists():
            raise FileNotFoundError(f"Rules file not found: {self._path}")

        raw_text = self._path.read_text(encoding="utf-8")
        try:
            if self._path.suffix in (".yaml", ".yml"):
                data = yaml.safe_load(raw_text)
            else:
                data = json.loads(raw_text)
        except (yaml.YAMLError, json.JSONDecodeError) as exc:
            raise RuleFileError(f"Cannot parse rules file {self._path}: {exc}") from exc

        self._parse(data)

    def _parse(self, data: Any) -> None:
        if not isinstance(data, dict):
            raise RuleFileError(f"Rules file {self._path} must contain a mapping at the top level")

        version = data.get("version", 1)
        if not isinstance(version, int) or isinstance(version, bool):
            raise RuleFileError(f"'version' in {self._path} must be an integer, got {version!r}")

        scenes = data.get("scenes") or {}
        if not isinstance(scenes, dict) or not all(isinstance(f, list) for f in scenes.values()):
            raise RuleFileError(f"'scenes' in {self._path} must map scene names to field lists")

        try:
            rules = coerce_rule_set(data.get("rules") or {})
        except ConfigurationError as exc:
            raise RuleFileError(f"Invalid rules in {self._path}: {exc}") from exc

        self._version = version
        self._scenes = {str(name): [str(f) for f in fields] for name, fields in scenes.items()}
        self._rules = rules
        log.info("Loaded %d field rule sets from %s (version %d)", len(rules), self._path, version)
