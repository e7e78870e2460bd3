"""``validateFunction`` directive: caller-supplied checks.

The function is called as ``fn(rule, value, record)``.  A ``str`` result
is the error message verbatim, ``False`` renders the catalog's
``default`` message, anything else is a pass.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from fieldrules.messages.errors import ErrorKind, FieldError

if TYPE_CHECKING:
    from fieldrules.validation.evaluator import EvaluationContext


def check_validate_function(
    rule: Mapping[str, Any], value: Any, record: Mapping[str, Any], ctx: EvaluationContext
) -> FieldError | None:
    fn = ctx.functions.resolve(rule["validateFunction"])
    if fn is None:
        return None

    result = fn(rule, value, record)
    if isinstance(result, str):
        return FieldError(result, ErrorKind.CUSTOM_VALIDATION_FAILED)
    if result is False:
        return ctx.formatter.render("default", rule, ErrorKind.CUSTOM_VALIDATION_FAILED)
    return None
