"""Rule-set backend protocol."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from fieldrules.validation.models import RuleSet


@runtime_checkable
class IRuleSetBackend(Protocol):
    """Protocol for rule-set storage backends (file, memory)."""

    def get_rules(self) -> RuleSet:
        """Return the field -> ``FieldSpec`` rule set."""
        ...

    def get_scenes(self) -> dict[str, list[str]]:
        """Return the declarative scene table."""
        ...

    def get_version(self) -> int:
        """Return the rule-set version number."""
        ...
