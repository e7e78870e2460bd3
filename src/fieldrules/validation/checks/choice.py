"""``enum`` directive: membership in an allowed list."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from fieldrules.messages.errors import ErrorKind, FieldError
from fieldrules.messages.formatter import stringify

if TYPE_CHECKING:
    from fieldrules.validation.evaluator import EvaluationContext


def allowed_values(spec: Any) -> list[Any]:
    """Flatten an ``enum`` spec; ``{"value": v, ...}`` items contribute ``v``."""
    if isinstance(spec, Mapping):
        items = list(spec.values())
    elif isinstance(spec, (list, tuple, set, frozenset)):
        items = list(spec)
    else:
        items = [spec]

    values: list[Any] = []
    for item in items:
        if isinstance(item, Mapping) and item.get("value") is not None:
            values.append(item["value"])
        else:
            values.append(item)
    return values


def strict_member(value: Any, allowed: list[Any]) -> bool:
    """Membership without cross-type equality (``1`` is not ``"1"``, ``True`` is not ``1``)."""
    return any(type(value) is type(item) and value == item for item in allowed)


def loose_member(value: Any, allowed: list[Any]) -> bool:
    """Membership by string form (``"1"`` matches ``1``), as list values arrive from form input."""
    return stringify(value) in {stringify(item) for item in allowed}


def check_enum(
    rule: Mapping[str, Any], value: Any, record: Mapping[str, Any], ctx: EvaluationContext
) -> FieldError | None:
    allowed = allowed_values(rule["enum"])
    if isinstance(value, (list, tuple)):
        passed = all(loose_member(item, allowed) for item in value)
    else:
        passed = strict_member(value, allowed)
    if passed:
        return None
    return ctx.formatter.render("enum", rule, ErrorKind.ENUM_OUT_OF_RANGE)
