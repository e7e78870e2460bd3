"""In-memory rule-set backend for testing."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from fieldrules.validation.models import FieldSpec, RuleSet, coerce_rule_set


class MemoryRuleSetBackend:
    """Dict-backed rule-set backend for unit tests."""

    def __init__(
        self,
        rules: Mapping[str, FieldSpec | Mapping[str, Any]] | None = None,
        scenes: Mapping[str, Iterable[str]] | None = None,
        *,
        version: int = 1,
    ) -> None:
        self._rules = coerce_rule_set(rules)
        self._scenes = {name: list(fields) for name, fields in (scenes or {}).items()}
        self._version = version

    def get_rules(self) -> RuleSet:
        return {name: spec.copy_rules() for name, spec in self._rules.items()}

    def get_scenes(self) -> dict[str, list[str]]:
        return {name: list(fields) for name, fields in self._scenes.items()}

    def get_version(self) -> int:
        return self._version
