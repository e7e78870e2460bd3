"""Registries for directive checks and named validation functions.

``DirectiveRegistry`` decides which check a rule-item runs: directives
are tried in priority order and the first whose keys are all present
(and not ``None``) wins.  ``FunctionRegistry`` resolves the string names
used by ``required`` predicates and ``validateFunction`` callbacks.

Usage::

    functions = FunctionRegistry()

    @functions.register("adult")
    def adult(rule, value, record):
        return value >= 18 or f"{rule['label']} must be an adult"

    directives = default_directives()
    directives.register(Directive("even", ("even",), check_even), before="min")
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from fieldrules.exceptions import ConfigurationError, UnknownFunctionError

if TYPE_CHECKING:
    from fieldrules.messages.errors import FieldError
    from fieldrules.validation.evaluator import EvaluationContext

log = logging.getLogger(__name__)

CheckFn = Callable[[Mapping[str, Any], Any, Mapping[str, Any], "EvaluationContext"], "FieldError | None"]

# Alternate directive spellings -> canonical key
DIRECTIVE_ALIASES: dict[str, str] = {
    "format": "type",
    "range": "enum",
    "confirm_field": "confirm",
}


@dataclass(frozen=True)
class Directive:
    """A named check selected when every key in ``keys`` is set on a rule-item."""

    name: str
    keys: tuple[str, ...]
    check: CheckFn

    def matches(self, rule: Mapping[str, Any]) -> bool:
        return all(rule.get(key) is not None for key in self.keys)


class DirectiveRegistry:
    """Ordered directive table; earlier entries take priority."""

    def __init__(self, directives: list[Directive] | None = None) -> None:
        self._directives: list[Directive] = []
        for directive in directives or []:
            self.register(directive)

    def register(self, directive: Directive, *, before: str | None = None) -> None:
        """Add ``directive``, at the end or ahead of the directive named ``before``.

        Raises:
            ConfigurationError: If the name is taken or ``before`` is unknown.
        """
        if any(d.name == directive.name for d in self._directives):
            raise ConfigurationError(f"Directive {directive.name!r} is already registered")
        if before is None:
            self._directives.append(directive)
            return
        for index, existing in enumerate(self._directives):
            if existing.name == before:
                self._directives.insert(index, directive)
                return
        raise ConfigurationError(f"Cannot insert before unknown directive {before!r}")

    def unregister(self, name: str) -> None:
        self._directives = [d for d in self._directives if d.name != name]

    def get(self, name: str) -> Directive:
        for directive in self._directives:
            if directive.name == name:
                return directive
        raise KeyError(f"Directive {name!r} not found. Available: {self.names()}")

    def names(self) -> list[str]:
        return [d.name for d in self._directives]

    def select(self, rule: Mapping[str, Any]) -> Directive | None:
        """First directive (in priority order) matching ``rule``."""
        for directive in self._directives:
            if directive.matches(rule):
                return directive
        return None

    def copy(self) -> DirectiveRegistry:
        return DirectiveRegistry(list(self._directives))

    def __iter__(self) -> Iterator[Directive]:
        return iter(list(self._directives))

    def __len__(self) -> int:
        return len(self._directives)


def normalize_rule(rule: Mapping[str, Any]) -> dict[str, Any]:
    """Copy ``rule`` adding canonical keys for any alias spellings it uses."""
    normalized = dict(rule)
    for alias, canonical in DIRECTIVE_ALIASES.items():
        if normalized.get(canonical) is None and normalized.get(alias) is not None:
            normalized[canonical] = normalized[alias]
    return normalized


class FunctionRegistry:
    """Name -> callable table for ``required`` predicates and ``validateFunction``.

    Unregistered names resolve to ``None`` (the caller treats that as a
    pass) unless ``strict`` is set, in which case ``UnknownFunctionError``
    is raised.
    """

    def __init__(self, functions: Mapping[str, Callable[..., Any]] | None = None, *, strict: bool = False) -> None:
        self._functions: dict[str, Callable[..., Any]] = dict(functions or {})
        self.strict = strict

    def register(self, name: str, fn: Callable[..., Any] | None = None) -> Any:
        """Register ``fn`` under ``name``; usable as a decorator when ``fn`` is omitted."""
        if fn is None:

            def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
                self.register(name, func)
                return func

            return decorator

        if not callable(fn):
            raise ConfigurationError(f"Function registered as {name!r} is not callable")
        if name in self._functions:
            log.debug("Validation function %r overridden", name)
        self._functions[name] = fn
        return fn

    def has(self, name: str) -> bool:
        return name in self._functions

    def names(self) -> list[str]:
        return sorted(self._functions)

    def resolve(self, ref: Any) -> Callable[..., Any] | None:
        """Return the callable behind ``ref`` (a callable or a registered name)."""
        if callable(ref):
            return ref
        if isinstance(ref, str) and ref in self._functions:
            return self._functions[ref]
        if self.strict:
            raise UnknownFunctionError(str(ref))
        log.warning("Validation function %r is not registered; rule skipped", ref)
        return None


def default_directives() -> DirectiveRegistry:
    """The built-in directive table in dispatch-priority order."""
    from fieldrules.validation.checks import (
        check_between,
        check_confirm,
        check_enum,
        check_length_between,
        check_max,
        check_max_length,
        check_maximum,
        check_min,
        check_min_length,
        check_minimum,
        check_number_between,
        check_regex,
        check_required,
        check_type,
        check_validate_function,
    )

    return DirectiveRegistry(
        [
            Directive("required", ("required",), check_required),
            Directive("type", ("type",), check_type),
            Directive("confirm", ("confirm",), check_confirm),
            Directive("enum", ("enum",), check_enum),
            Directive("regex", ("regex",), check_regex),
            Directive("validateFunction", ("validateFunction",), check_validate_function),
            Directive("between", ("min", "max"), check_between),
            Directive("min", ("min",), check_min),
            Directive("max", ("max",), check_max),
            Directive("length_between", ("min_length", "max_length"), check_length_between),
            Directive("min_length", ("min_length",), check_min_length),
            Directive("max_length", ("max_length",), check_max_length),
            Directive("number_between", ("minimum", "maximum"), check_number_between),
            Directive("minimum", ("minimum",), check_minimum),
            Directive("maximum", ("maximum",), check_maximum),
        ]
    )
