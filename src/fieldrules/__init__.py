"""fieldrules: declarative field validation with scenes and localized messages.

Core API::

    from fieldrules import (
        Validator, ValidationResult, FieldSpec,
        ValidateError, ConfigurationError,
        MessageCatalog, FieldRulesSettings,
    )

Extension points::

    from fieldrules import (
        TypeClassifier, FunctionRegistry, DirectiveRegistry, Directive,
        FileRuleSetBackend, MemoryRuleSetBackend,
        FileLocaleBackend, MemoryLocaleBackend,
    )
"""

from __future__ import annotations

from fieldrules.classifier import TypeClassifier, classify
from fieldrules.config import FieldRulesSettings
from fieldrules.exceptions import (
    ConfigurationError,
    FieldRulesError,
    RuleFileError,
    UnknownFunctionError,
    ValidateError,
)
from fieldrules.logging_config import setup_logging
from fieldrules.messages import (
    ErrorKind,
    FieldError,
    FileLocaleBackend,
    MemoryLocaleBackend,
    MessageCatalog,
    MessageFormatter,
    PackageLocaleBackend,
    create_catalog,
)
from fieldrules.validation import (
    Directive,
    DirectiveRegistry,
    FieldSpec,
    FileRuleSetBackend,
    FunctionRegistry,
    MemoryRuleSetBackend,
    ValidationResult,
)
from fieldrules.validator import Validator

__version__ = "0.1.0"

__all__ = [
    # Core
    "Validator",
    "ValidationResult",
    "FieldSpec",
    "FieldRulesSettings",
    "setup_logging",
    # Errors
    "ErrorKind",
    "FieldError",
    "FieldRulesError",
    "ValidateError",
    "ConfigurationError",
    "UnknownFunctionError",
    "RuleFileError",
    # Messages
    "MessageCatalog",
    "MessageFormatter",
    "create_catalog",
    "PackageLocaleBackend",
    "FileLocaleBackend",
    "MemoryLocaleBackend",
    # Extension
    "TypeClassifier",
    "classify",
    "Directive",
    "DirectiveRegistry",
    "FunctionRegistry",
    "FileRuleSetBackend",
    "MemoryRuleSetBackend",
]
