"""``required`` directive and the required-like test used for empty-skip."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from fieldrules.classifier import is_empty
from fieldrules.messages.errors import ErrorKind, FieldError

if TYPE_CHECKING:
    from fieldrules.validation.evaluator import EvaluationContext
    from fieldrules.validation.registry import FunctionRegistry


def required_flag(directive: Any, value: Any, record: Mapping[str, Any], functions: FunctionRegistry) -> bool:
    """Evaluate a ``required`` directive value to a boolean.

    A callable, or a string naming a registered predicate, is called as
    ``(value, record)``; anything else (an unregistered string included) is
    taken for its truthiness.
    """
    if callable(directive) or (isinstance(directive, str) and functions.has(directive)):
        predicate = functions.resolve(directive)
        return bool(predicate(value, record))
    return bool(directive)


def check_required(
    rule: Mapping[str, Any], value: Any, record: Mapping[str, Any], ctx: EvaluationContext
) -> FieldError | None:
    if required_flag(rule["required"], value, record, ctx.functions) and is_empty(value):
        return ctx.formatter.render("required", rule, ErrorKind.REQUIRED_MISSING)
    return None
