"""Bound checks: value bounds (``min``/``max``), length bounds and number bounds.

All bounds are inclusive.  A combined bound failure renders the combined
message (``between``, ``range_length``, ``range_number``) rather than the
single-bound one.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from fieldrules.classifier import is_number, is_numeric
from fieldrules.messages.errors import ErrorKind, FieldError

if TYPE_CHECKING:
    from fieldrules.validation.evaluator import EvaluationContext


def outside(value: Any, low: Any = None, high: Any = None) -> bool:
    """True when ``value`` is below ``low`` or above ``high``; uncomparable values are outside.

    Numeric strings are compared as numbers against numeric bounds.
    """
    if isinstance(value, str) and is_numeric(value) and (is_number(low) or is_number(high)):
        value = float(value)
    try:
        return (low is not None and value < low) or (high is not None and value > high)
    except TypeError:
        return True


def _bound(
    key: str, rule: Mapping[str, Any], measured: Any, low: Any, high: Any, ctx: EvaluationContext
) -> FieldError | None:
    if outside(measured, low, high):
        return ctx.formatter.render(key, rule, ErrorKind.BOUND_VIOLATION)
    return None


# ── Value bounds ────────────────────────────────────────────────────


def check_between(
    rule: Mapping[str, Any], value: Any, record: Mapping[str, Any], ctx: EvaluationContext
) -> FieldError | None:
    return _bound("between", rule, value, rule["min"], rule["max"], ctx)


def check_min(
    rule: Mapping[str, Any], value: Any, record: Mapping[str, Any], ctx: EvaluationContext
) -> FieldError | None:
    return _bound("min", rule, value, rule["min"], None, ctx)


def check_max(
    rule: Mapping[str, Any], value: Any, record: Mapping[str, Any], ctx: EvaluationContext
) -> FieldError | None:
    return _bound("max", rule, value, None, rule["max"], ctx)


# ── Length bounds ───────────────────────────────────────────────────


def _length(rule: Mapping[str, Any], value: Any, ctx: EvaluationContext) -> tuple[int | None, FieldError | None]:
    if isinstance(value, (str, list, tuple, Mapping)):
        return len(value), None
    return None, ctx.formatter.render("type", rule, ErrorKind.TYPE_MISMATCH)


def check_length_between(
    rule: Mapping[str, Any], value: Any, record: Mapping[str, Any], ctx: EvaluationContext
) -> FieldError | None:
    length, error = _length(rule, value, ctx)
    if error is not None:
        return error
    return _bound("range_length", rule, length, rule["min_length"], rule["max_length"], ctx)


def check_min_length(
    rule: Mapping[str, Any], value: Any, record: Mapping[str, Any], ctx: EvaluationContext
) -> FieldError | None:
    length, error = _length(rule, value, ctx)
    if error is not None:
        return error
    return _bound("min_length", rule, length, rule["min_length"], None, ctx)


def check_max_length(
    rule: Mapping[str, Any], value: Any, record: Mapping[str, Any], ctx: EvaluationContext
) -> FieldError | None:
    length, error = _length(rule, value, ctx)
    if error is not None:
        return error
    return _bound("max_length", rule, length, None, rule["max_length"], ctx)


# ── Number bounds ───────────────────────────────────────────────────


def _not_a_number(rule: Mapping[str, Any], value: Any, ctx: EvaluationContext) -> FieldError | None:
    if is_number(value):
        return None
    return ctx.formatter.render("type", rule, ErrorKind.TYPE_MISMATCH)


def check_number_between(
    rule: Mapping[str, Any], value: Any, record: Mapping[str, Any], ctx: EvaluationContext
) -> FieldError | None:
    return _not_a_number(rule, value, ctx) or _bound(
        "range_number", rule, value, rule["minimum"], rule["maximum"], ctx
    )


def check_minimum(
    rule: Mapping[str, Any], value: Any, record: Mapping[str, Any], ctx: EvaluationContext
) -> FieldError | None:
    return _not_a_number(rule, value, ctx) or _bound("minimum", rule, value, rule["minimum"], None, ctx)


def check_maximum(
    rule: Mapping[str, Any], value: Any, record: Mapping[str, Any], ctx: EvaluationContext
) -> FieldError | None:
    return _not_a_number(rule, value, ctx) or _bound("maximum", rule, value, None, rule["maximum"], ctx)
