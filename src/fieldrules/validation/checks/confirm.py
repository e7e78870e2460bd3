"""``confirm`` directive: value must equal another field of the record."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from fieldrules.messages.errors import ErrorKind, FieldError

if TYPE_CHECKING:
    from fieldrules.validation.evaluator import EvaluationContext


def check_confirm(
    rule: Mapping[str, Any], value: Any, record: Mapping[str, Any], ctx: EvaluationContext
) -> FieldError | None:
    if not isinstance(value, str):
        return ctx.formatter.render("type", rule, ErrorKind.TYPE_MISMATCH)

    other = rule["confirm"]
    bound = dict(rule)
    if bound.get("confirm_label") is None:
        bound["confirm_label"] = f"[{other}]"

    if record.get(other) is None:
        return ctx.formatter.render("confirm_not_found", bound, ErrorKind.CONFIRMATION_FIELD_MISSING)
    counterpart = record[other]
    if type(counterpart) is not type(value) or counterpart != value:
        return ctx.formatter.render("confirm", bound, ErrorKind.CONFIRMATION_MISMATCH)
    return None
