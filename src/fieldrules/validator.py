"""The ``Validator``: runs a rule set over a record.

Usage::

    from fieldrules import Validator

    validator = Validator(
        {
            "username": {"label": "Username", "rules": [{"required": True}, {"type": "string"}]},
            "age": {"label": "Age", "rules": [{"type": "int"}, {"min": 18, "max": 100}]},
        },
        scenes={"login": ["username"]},
    )
    validator.set_language("en_US").batch().fail_exception(False)

    if not validator.check({"username": "", "age": 17}):
        validator.get_error()   # {"username": "Please fill in Username", "age": ...}

Every setter returns the validator so calls can be chained.  An instance
holds per-check state and is not reentrant.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from fieldrules.classifier import TypeClassifier
from fieldrules.config import FieldRulesSettings
from fieldrules.exceptions import ConfigurationError, ValidateError
from fieldrules.messages.catalog import MessageCatalog, create_catalog, validate_locale
from fieldrules.messages.formatter import MessageFormatter
from fieldrules.validation.backends.protocol import IRuleSetBackend
from fieldrules.validation.evaluator import EvaluationContext, FieldEvaluator, RuleEvaluator
from fieldrules.validation.models import FieldSpec, RuleSet, ValidationResult, coerce_rule_set
from fieldrules.validation.registry import (
    CheckFn,
    Directive,
    DirectiveRegistry,
    FunctionRegistry,
    default_directives,
)
from fieldrules.validation.scenes import SceneProcedure, SceneResolver

log = logging.getLogger(__name__)


class Validator:
    """Validates records against a field -> ``FieldSpec`` rule set.

    Args:
        rules: Field name -> ``FieldSpec`` (or ``{"label", "rules"}`` mapping).
        scenes: Scene name -> list of field names.
        settings: Defaults for locale, batch and fail-exception policy,
            and strict function resolution.  Read from the environment
            when omitted.
        catalog: Message catalog; built from ``settings`` when omitted.
        classifier: Type classifier for ``type`` rules.  Defaults to a
            fresh classifier with the built-in tags.
        functions: Registry of named ``required`` predicates and
            ``validateFunction`` callbacks.
        directives: Directive table; defaults to the built-ins.
    """

    def __init__(
        self,
        rules: Mapping[str, FieldSpec | Mapping[str, Any]] | None = None,
        *,
        scenes: Mapping[str, Iterable[str]] | None = None,
        settings: FieldRulesSettings | None = None,
        catalog: MessageCatalog | None = None,
        classifier: TypeClassifier | None = None,
        functions: FunctionRegistry | None = None,
        directives: DirectiveRegistry | None = None,
    ) -> None:
        self._settings = settings or FieldRulesSettings()
        self._catalog = catalog if catalog is not None else create_catalog(self._settings)
        self._classifier = classifier if classifier is not None else TypeClassifier()
        self._functions = (
            functions if functions is not None else FunctionRegistry(strict=self._settings.strict_functions)
        )
        self._directives = directives if directives is not None else default_directives()
        self._batch = self._settings.batch
        self._fail_exception = self._settings.fail_exception
        self._error: str | dict[str, str] = {}
        self._failed_field: str | None = None

        self._scenes = SceneResolver(owner=self)
        self._scenes.set_rules(coerce_rule_set(rules))
        self._scenes.set_scenes(scenes)

    @classmethod
    def from_backend(cls, backend: IRuleSetBackend, **kwargs: Any) -> Validator:
        """Build a validator from a rule-set backend's rules and scenes."""
        validator = cls(backend.get_rules(), scenes=backend.get_scenes(), **kwargs)
        log.debug("Validator built from %s (rule set version %d)", type(backend).__name__, backend.get_version())
        return validator

    # ── Configuration ───────────────────────────────────────────────

    @property
    def language(self) -> str:
        return self._catalog.locale

    @property
    def catalog(self) -> MessageCatalog:
        return self._catalog

    @property
    def classifier(self) -> TypeClassifier:
        return self._classifier

    @property
    def functions(self) -> FunctionRegistry:
        return self._functions

    @property
    def directives(self) -> DirectiveRegistry:
        return self._directives

    @property
    def current_scene(self) -> str | None:
        return self._scenes.scene

    def set_rules(self, rules: Mapping[str, FieldSpec | Mapping[str, Any]]) -> Validator:
        self._scenes.set_rules(coerce_rule_set(rules))
        return self

    def set_scenes(self, scenes: Mapping[str, Iterable[str]]) -> Validator:
        self._scenes.set_scenes(scenes)
        return self

    def register_scene(self, name: str, procedure: SceneProcedure) -> Validator:
        """Register ``procedure(validator)``, run when scene ``name`` is resolved."""
        self._scenes.register(name, procedure)
        return self

    def scene(self, name: str | None) -> Validator:
        self._scenes.select(name)
        return self

    set_scene = scene

    def batch(self, flag: bool = True) -> Validator:
        self._batch = flag
        return self

    def fail_exception(self, flag: bool = True) -> Validator:
        self._fail_exception = flag
        return self

    def set_language(self, locale: str) -> Validator:
        """Switch message locale; raises ``ConfigurationError`` on a malformed code."""
        self._catalog = self._catalog.with_locale(validate_locale(locale))
        return self

    def set_catalog(self, catalog: MessageCatalog) -> Validator:
        if not isinstance(catalog, MessageCatalog):
            raise ConfigurationError(f"Expected a MessageCatalog, got {type(catalog).__name__}")
        self._catalog = catalog
        return self

    def register_function(self, name: str, fn: Callable[..., Any]) -> Validator:
        self._functions.register(name, fn)
        return self

    def register_directive(
        self,
        name: str,
        check: CheckFn,
        keys: Iterable[str] | None = None,
        *,
        before: str | None = None,
    ) -> Validator:
        """Add a directive selected when every key in ``keys`` (default ``(name,)``) is set."""
        self._directives.register(Directive(name, tuple(keys or (name,)), check), before=before)
        return self

    def register_type(self, tag: str, predicate: Callable[[Any], bool]) -> Validator:
        self._classifier.register(tag, predicate)
        return self

    # ── Working-set edits (for scene procedures) ────────────────────

    def only(self, fields: Iterable[str]) -> Validator:
        self._scenes.only(fields)
        return self

    def append(self, field: str, rule: Mapping[str, Any]) -> Validator:
        self._scenes.append(field, rule)
        return self

    def remove(self, field: str, rule_name: str) -> Validator:
        self._scenes.remove(field, rule_name)
        return self

    def current_rules(self) -> RuleSet:
        return self._scenes.current_rules()

    # ── Validation ──────────────────────────────────────────────────

    def check(self, record: Mapping[str, Any]) -> bool:
        """Validate ``record``.

        Returns:
            ``True`` when every field passes.  On failure returns ``False``
            with the error(s) stored for ``get_error()``, or raises
            ``ValidateError`` when fail-exception is on.
        """
        self._error = {}
        self._failed_field = None
        if not isinstance(record, Mapping):
            raise ConfigurationError(f"Record must be a mapping, got {type(record).__name__}")

        rules = self._scenes.current_rules()
        evaluator = self._field_evaluator()
        errors: dict[str, str] = {}

        for name, spec in rules.items():
            error = evaluator.evaluate(name, spec, record)
            if error is None:
                continue

            if self._batch:
                errors[name] = error
                continue

            log.debug("Field %r failed: %s", name, error)
            self._error = error
            self._failed_field = name
            if self._fail_exception:
                raise ValidateError(error, record)
            return False

        if errors:
            log.debug("%d field(s) failed: %s", len(errors), ", ".join(errors))
            self._error = errors
            if self._fail_exception:
                raise ValidateError(dict(errors), record)
            return False

        log.debug("Record passed %d field rule set(s) (scene=%r)", len(rules), self._scenes.scene)
        return True

    def validate(self, record: Mapping[str, Any]) -> ValidationResult:
        """Like ``check`` but returns a ``ValidationResult`` instead of raising ``ValidateError``."""
        try:
            passed = self.check(record)
        except ValidateError:
            passed = False
        error = dict(self._error) if isinstance(self._error, dict) else self._error
        return ValidationResult(passed=passed, error=error, failed_field=self._failed_field)

    def get_error(self) -> str | dict[str, str]:
        """The last check's error: a message (fail-fast), a mapping (batch), or ``{}``."""
        return self._error

    def _field_evaluator(self) -> FieldEvaluator:
        ctx = EvaluationContext(
            formatter=MessageFormatter(self._catalog),
            classifier=self._classifier,
            functions=self._functions,
        )
        return FieldEvaluator(RuleEvaluator(self._directives, ctx))
