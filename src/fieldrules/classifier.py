"""Semantic type tags: ``classify("email", value) -> bool``.

The built-in tags cover primitive Python types plus a handful of
format-by-regex tags (mobile numbers, mainland ID cards, password
strength, ...).  Extra tags can be registered on a ``TypeClassifier``
instance; the module-level ``default_classifier()`` is shared and should
not be mutated by library code.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Mapping
from typing import Any

log = logging.getLogger(__name__)

TypePredicate = Callable[[Any], bool]

# Full-string patterns (applied with ``fullmatch``)
PATTERNS: dict[str, re.Pattern[str]] = {
    "chinese": re.compile(r"[\u4e00-\u9fa5]+"),
    "email": re.compile(r"\w+([-+.]\w+)*@\w+([-.]\w+)*\.\w+([-.]\w+)*", re.ASCII),
    "mobile": re.compile(r"1[3-9]\d{9}", re.ASCII),
    "weak_pwd": re.compile(r"[\w!@#$%^&*?]{6,18}", re.ASCII),
    "pwd": re.compile(r"(?!\d+\Z)(?![a-zA-Z]+\Z)(?![!@#$%^&_.*?]+\Z).{6,18}"),
    "strong_pwd": re.compile(r"(?=.{8,})(?=.*\d)(?=.*[A-Z])(?=.*[a-z])(?=.*[!@#$%^&_.*?]).*"),
    "date": re.compile(
        r"[0-9]{4}(-|/)[0-9]{1,2}\1[0-9]{1,2}(|\s+[0-9]{1,2}(|:[0-9]{1,2}(|:[0-9]{1,2})))",
        re.ASCII,
    ),
    "url": re.compile(
        r"((http|ftp|ws)(s)?)://[\w\-]+(\.[\w\-]+)+([\w\-.,@?^=%&:/~+#]*[\w\-@?^=%&/~+#])?",
        re.ASCII,
    ),
    "id_card": re.compile(
        r"([1-9]\d{5}(18|19|([23]\d))\d{2}((0[1-9])|(10|11|12))(([0-2][1-9])|10|20|30|31)\d{3}[0-9Xx])"
        r"|([1-9]\d{5}\d{2}((0[1-9])|(10|11|12))(([0-2][1-9])|10|20|30|31)\d{3})",
        re.ASCII,
    ),
}

PASSWORD_TAGS = frozenset({"pwd", "weak_pwd", "strong_pwd"})

# Long-form spellings accepted for backward-compatible rule files
TAG_ALIASES: dict[str, str] = {
    "password": "pwd",
    "weak_password": "weak_pwd",
    "strong_password": "strong_pwd",
}

_NUMERIC_RE = re.compile(r"\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*", re.ASCII)


def canonical_tag(tag: str) -> str:
    """Map alias spellings (``strong_password``) to the canonical tag."""
    return TAG_ALIASES.get(tag, tag)


def is_number(value: Any) -> bool:
    """``int`` or ``float`` but never ``bool``."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_numeric(value: Any) -> bool:
    """Numbers and numeric strings (``"42"``, ``" 1.5e3"``)."""
    if is_number(value):
        return True
    return isinstance(value, str) and _NUMERIC_RE.fullmatch(value) is not None


def is_empty(value: Any) -> bool:
    """Empty-value policy: ``0``, ``"0"`` and ``False`` are real values."""
    if isinstance(value, bool) or is_numeric(value):
        return False
    return not value


def _pattern_predicate(name: str) -> TypePredicate:
    pattern = PATTERNS[name]

    def predicate(value: Any) -> bool:
        return isinstance(value, str) and pattern.fullmatch(value) is not None

    predicate.__name__ = f"is_{name}"
    return predicate


def _is_timestamp(value: Any) -> bool:
    if not is_numeric(value):
        return False
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return len(str(value)) in (10, 13)



_BUILTIN_PREDICATES: dict[str, TypePredicate] = {
    "int": lambda v: isinstance(v, int) and not isinstance(v, bool),
    "string": lambda v: isinstance(v, str),
    "number": is_number,
    "bool": lambda v: isinstance(v, bool),
    "float": lambda v: isinstance(v, float),
    "array": lambda v: isinstance(v, (list, tuple)),
    "object": lambda v: isinstance(v, Mapping),
    "timestamp": _is_timestamp,
    **{name: _pattern_predicate(name) for name in PATTERNS},
}


class TypeClassifier:
    """Registry of tag -> predicate.  Unknown tags classify ``False``."""

    def __init__(self, predicates: Mapping[str, TypePredicate] | None = None) -> None:
        self._predicates: dict[str, TypePredicate] = dict(_BUILTIN_PREDICATES)
        if predicates:
            self._predicates.update(predicates)

    def register(self, tag: str, predicate: TypePredicate) -> None:
        """Add or replace the predicate behind ``tag``."""
        if tag in self._predicates:
            log.debug("Type tag %r overridden", tag)
        self._predicates[tag] = predicate

    def has(self, tag: str) -> bool:
        return canonical_tag(tag) in self._predicates

    def tags(self) -> list[str]:
        return sorted(self._predicates)

    def classify(self, tag: str, value: Any) -> bool:
        if not isinstance(tag, str):
            return False
        predicate = self._predicates.get(canonical_tag(tag))
        if predicate is None:
            return False
        try:
            return bool(predicate(value))
        except Exception:
            log.debug("Type predicate %r raised for %r", tag, value, exc_info=True)
            return False


_default: TypeClassifier | None = None


def default_classifier() -> TypeClassifier:
    """Return the shared classifier with the built-in tags."""
    global _default
    if _default is None:
        _default = TypeClassifier()
    return _default


def classify(tag: str, value: Any) -> bool:
    """Classify ``value`` against ``tag`` using the built-in tags."""
    return default_classifier().classify(tag, value)
