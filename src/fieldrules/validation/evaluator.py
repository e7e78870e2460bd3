"""Rule and field evaluation.

``RuleEvaluator`` dispatches a single rule-item to the first matching
directive check.  ``FieldEvaluator`` applies the empty-skip policy and
walks a field's rule list, stopping at the first failure.  Evaluation is
pure computation over ``(rule, value, record)``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from fieldrules.classifier import TypeClassifier, is_empty
from fieldrules.validation.checks.presence import required_flag
from fieldrules.validation.registry import DirectiveRegistry, FunctionRegistry, normalize_rule

if TYPE_CHECKING:
    from fieldrules.messages.errors import FieldError
    from fieldrules.messages.formatter import MessageFormatter
    from fieldrules.validation.models import FieldSpec

log = logging.getLogger(__name__)


@dataclass
class EvaluationContext:
    """Collaborators a directive check may consult."""

    formatter: MessageFormatter
    classifier: TypeClassifier
    functions: FunctionRegistry


class RuleEvaluator:
    """Runs one rule-item against a value."""

    def __init__(self, directives: DirectiveRegistry, ctx: EvaluationContext) -> None:
        self._directives = directives
        self._ctx = ctx

    @property
    def context(self) -> EvaluationContext:
        return self._ctx

    def evaluate(self, rule: Mapping[str, Any], value: Any, record: Mapping[str, Any]) -> FieldError | None:
        """Return ``None`` on pass, the rendered error on failure.

        A rule-item matching no directive passes.
        """
        normalized = normalize_rule(rule)
        directive = self._directives.select(normalized)
        if directive is None:
            return None
        return directive.check(normalized, value, record, self._ctx)


class FieldEvaluator:
    """Applies a field's ordered rule list with the required/empty-skip policy."""

    def __init__(self, rule_evaluator: RuleEvaluator) -> None:
        self._rules = rule_evaluator

    def is_required(self, spec: FieldSpec, value: Any, record: Mapping[str, Any]) -> bool:
        """Only the first rule-item carrying a ``required`` key is consulted."""
        for rule in spec.rules:
            if "required" in rule:
                return required_flag(rule["required"], value, record, self._rules.context.functions)
        return False

    def evaluate(self, name: str, spec: FieldSpec, record: Mapping[str, Any]) -> FieldError | None:
        if not spec.rules:
            return None

        value = record.get(name)
        if not self.is_required(spec, value, record) and is_empty(value):
            log.debug("Field %r is empty and optional; skipped", name)
            return None

        label = spec.display_label(name)
        for rule in spec.rules:
            error = self._rules.evaluate({**rule, "label": label}, value, record)
            if error is not None:
                return error
        return None
