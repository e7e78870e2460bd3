"""Rule evaluation: models, directive registry, evaluators, scenes, backends."""

from __future__ import annotations

from fieldrules.validation.backends import FileRuleSetBackend, IRuleSetBackend, MemoryRuleSetBackend
from fieldrules.validation.evaluator import EvaluationContext, FieldEvaluator, RuleEvaluator
from fieldrules.validation.models import FieldSpec, RuleItem, RuleSet, ValidationResult
from fieldrules.validation.registry import (
    Directive,
    DirectiveRegistry,
    FunctionRegistry,
    default_directives,
    normalize_rule,
)
from fieldrules.validation.scenes import SceneResolver

__all__ = [
    "Directive",
    "DirectiveRegistry",
    "EvaluationContext",
    "FieldEvaluator",
    "FieldSpec",
    "FileRuleSetBackend",
    "FunctionRegistry",
    "IRuleSetBackend",
    "MemoryRuleSetBackend",
    "RuleEvaluator",
    "RuleItem",
    "RuleSet",
    "SceneResolver",
    "ValidationResult",
    "default_directives",
    "normalize_rule",
]
