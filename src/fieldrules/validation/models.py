"""Validation data models: field specs, rule sets, and results."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from fieldrules.exceptions import ConfigurationError
from fieldrules.messages.errors import ErrorKind, FieldError

# One validation directive, e.g. ``{"required": True}`` or ``{"min": 18, "max": 100}``
RuleItem = dict[str, Any]


class FieldSpec(BaseModel):
    """Label plus the ordered rule list for one field."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    label: Optional[str] = None
    rules: list[RuleItem] = Field(default_factory=list)

    def display_label(self, field_name: str) -> str:
        """``label`` if set, else ``[field_name]``."""
        return self.label if self.label is not None else f"[{field_name}]"

    def copy_rules(self) -> FieldSpec:
        """Copy with fresh rule-item dicts, safe to edit in place."""
        return FieldSpec(label=self.label, rules=[dict(item) for item in self.rules])


RuleSet = dict[str, FieldSpec]


def coerce_field_spec(name: str, spec: FieldSpec | Mapping[str, Any]) -> FieldSpec:
    """Accept a ``FieldSpec`` or a plain ``{"label": ..., "rules": [...]}`` mapping."""
    if isinstance(spec, FieldSpec):
        return spec.copy_rules()
    if not isinstance(spec, Mapping):
        raise ConfigurationError(f"Rules for field {name!r} must be a mapping, got {type(spec).__name__}")
    rules = spec.get("rules") or []
    if not isinstance(rules, (list, tuple)):
        raise ConfigurationError(f"'rules' for field {name!r} must be a list")
    for item in rules:
        if not isinstance(item, Mapping):
            raise ConfigurationError(f"Rule items for field {name!r} must be mappings, got {item!r}")
    label = spec.get("label")
    return FieldSpec(
        label=None if label is None else str(label),
        rules=[dict(item) for item in rules],
    )


def coerce_rule_set(rules: Mapping[str, FieldSpec | Mapping[str, Any]] | None) -> RuleSet:
    """Normalize caller-supplied rules into an independent ``RuleSet`` copy."""
    if rules is None:
        return {}
    if not isinstance(rules, Mapping):
        raise ConfigurationError(f"Rules must be a mapping of field name -> spec, got {type(rules).__name__}")
    return {str(name): coerce_field_spec(str(name), spec) for name, spec in rules.items()}


@dataclass
class ValidationResult:
    """Outcome of validating one record.

    ``error`` is a single message in fail-fast mode (with ``failed_field``
    naming the field) and a field -> message mapping in batch mode.
    """

    passed: bool
    error: str | dict[str, str] = field(default_factory=dict)
    failed_field: str | None = None

    def __bool__(self) -> bool:
        return self.passed

    def errors(self) -> dict[str, str]:
        """Errors keyed by field, whichever mode produced them."""
        if isinstance(self.error, dict):
            return dict(self.error)
        if self.failed_field is not None and self.error:
            return {self.failed_field: self.error}
        return {}

    def kinds(self) -> dict[str, ErrorKind]:
        """Field -> ``ErrorKind`` for every error that carries one."""
        return {name: msg.kind for name, msg in self.errors().items() if isinstance(msg, FieldError)}


__all__ = [
    "ErrorKind",
    "FieldError",
    "FieldSpec",
    "RuleItem",
    "RuleSet",
    "ValidationResult",
    "coerce_field_spec",
    "coerce_rule_set",
]
