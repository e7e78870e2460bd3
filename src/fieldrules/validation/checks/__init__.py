"""Directive check functions.

Every check has the signature ``check(rule, value, record, ctx)`` and
returns ``None`` on pass or a rendered ``FieldError``.
"""

from __future__ import annotations

from fieldrules.validation.checks.bounds import (
    check_between,
    check_length_between,
    check_max,
    check_max_length,
    check_maximum,
    check_min,
    check_min_length,
    check_minimum,
    check_number_between,
)
from fieldrules.validation.checks.choice import check_enum
from fieldrules.validation.checks.confirm import check_confirm
from fieldrules.validation.checks.custom import check_validate_function
from fieldrules.validation.checks.format import check_regex, check_type
from fieldrules.validation.checks.presence import check_required, required_flag

__all__ = [
    "check_between",
    "check_confirm",
    "check_enum",
    "check_length_between",
    "check_max",
    "check_max_length",
    "check_maximum",
    "check_min",
    "check_min_length",
    "check_minimum",
    "check_number_between",
    "check_regex",
    "check_required",
    "check_type",
    "check_validate_function",
    "required_flag",
]
