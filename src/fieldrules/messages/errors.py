"""Rendered field errors and their kinds."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """What kind of check produced a field error."""

    REQUIRED_MISSING = "required_missing"
    TYPE_MISMATCH = "type_mismatch"
    PATTERN_MISMATCH = "pattern_mismatch"
    ENUM_OUT_OF_RANGE = "enum_out_of_range"
    BOUND_VIOLATION = "bound_violation"
    CONFIRMATION_FIELD_MISSING = "confirmation_field_missing"
    CONFIRMATION_MISMATCH = "confirmation_mismatch"
    CUSTOM_VALIDATION_FAILED = "custom_validation_failed"


class FieldError(str):
    """A rendered error message that also remembers its ``ErrorKind``.

    Compares and hashes like the plain message string.
    """

    kind: ErrorKind

    def __new__(cls, message: str, kind: ErrorKind = ErrorKind.CUSTOM_VALIDATION_FAILED) -> FieldError:
        obj = super().__new__(cls, message)
        obj.kind = kind
        return obj

    def __repr__(self) -> str:
        return f"FieldError({str(self)!r}, kind={self.kind.value})"
