"""Exception hierarchy for fieldrules."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


class FieldRulesError(Exception):
    """Base exception for all fieldrules errors."""


class ValidateError(FieldRulesError):
    """Raised by ``Validator.check`` when a record fails and fail-exception is on.

    ``error`` is the single message (fail-fast) or the field -> message
    mapping (batch mode).  ``str(exc)`` joins batch messages with newlines.
    ``code`` is an HTTP-style status for hosts that surface the failure.
    """

    def __init__(self, error: str | Mapping[str, str], data: Any = None, code: int = 400) -> None:
        self.error = error
        self.data = data
        self.code = code
        if isinstance(error, Mapping):
            message = "\n".join(str(msg) for msg in error.values())
        else:
            message = str(error)
        super().__init__(message)

    def get_error(self) -> str | Mapping[str, str]:
        return self.error


class ConfigurationError(FieldRulesError, ValueError):
    """Invalid configuration (bad locale code, malformed rule set, ...)."""


class UnknownFunctionError(ConfigurationError):
    """A rule references a function name that is not registered (strict mode)."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Validation function {name!r} is not registered")
        self.name = name


class RuleFileError(FieldRulesError):
    """A rule-set file could not be parsed or has the wrong shape."""
