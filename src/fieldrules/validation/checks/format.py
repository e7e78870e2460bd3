"""Format checks: semantic ``type`` tags and ``regex`` patterns."""

from __future__ import annotations

import functools
import logging
import re
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from fieldrules.classifier import PASSWORD_TAGS, canonical_tag, is_number
from fieldrules.messages.errors import ErrorKind, FieldError

if TYPE_CHECKING:
    from fieldrules.validation.evaluator import EvaluationContext

log = logging.getLogger(__name__)

# ``/pattern/flags`` as accepted by PCRE-style rule files
_DELIMITED = re.compile(r"/(.+)/([A-Za-z]*)", re.DOTALL)

_FLAG_MAP: dict[str, int] = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
    "x": re.VERBOSE,
    "u": 0,
    "A": 0,
    "D": 0,
    "S": 0,
    "X": 0,
    "U": 0,
}


def check_type(
    rule: Mapping[str, Any], value: Any, record: Mapping[str, Any], ctx: EvaluationContext
) -> FieldError | None:
    tag = rule["type"]
    if ctx.classifier.classify(tag, value):
        return None
    key = canonical_tag(tag) if isinstance(tag, str) else "type"
    message_key = key if key in PASSWORD_TAGS else "type"
    return ctx.formatter.render(message_key, rule, ErrorKind.TYPE_MISMATCH)


@functools.lru_cache(maxsize=256)
def compile_pattern(spec: str) -> tuple[re.Pattern[str], bool]:
    """Compile a rule pattern; returns ``(pattern, anchored)``.

    ``/body/flags`` honours PCRE flags where Python has an equivalent;
    without ``u`` character classes are ASCII-only.  ``U``, ``D``, ``S`` and ``X``
    are accepted and ignored.
    Bare patterns are compiled as written, an unescaped ``/`` included.

    Raises:
        re.error: On an invalid pattern or unsupported flag.
    """
    delimited = _DELIMITED.fullmatch(spec)
    if delimited:
        body, flag_chars = delimited.group(1), delimited.group(2)
    else:
        body, flag_chars = spec, ""

    flags = 0
    for char in flag_chars:
        if char not in _FLAG_MAP:
            raise re.error(f"unsupported pattern modifier {char!r}")
        flags |= _FLAG_MAP[char]
    if "u" not in flag_chars:
        flags |= re.ASCII
    return re.compile(body, flags), "A" in flag_chars


def pattern_matches(spec: Any, value: Any) -> bool:
    """``preg_match`` semantics: search anywhere unless anchored; errors mean no match."""
    if not isinstance(spec, str):
        return False
    if is_number(value):
        value = str(value)
    if not isinstance(value, str):
        return False
    try:
        pattern, anchored = compile_pattern(spec)
    except re.error as exc:
        log.debug("Invalid rule pattern %r: %s", spec, exc)
        return False
    found = pattern.match(value) if anchored else pattern.search(value)
    return found is not None


def check_regex(
    rule: Mapping[str, Any], value: Any, record: Mapping[str, Any], ctx: EvaluationContext
) -> FieldError | None:
    if pattern_matches(rule["regex"], value):
        return None
    return ctx.formatter.render("regex", rule, ErrorKind.PATTERN_MISMATCH)
