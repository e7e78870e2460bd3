"""Placeholder substitution for message templates."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from fieldrules.messages.catalog import MessageCatalog
from fieldrules.messages.errors import ErrorKind, FieldError

_PLACEHOLDER = re.compile(r"\{([^{}]+)\}")


def stringify(value: Any) -> str:
    """Render a rule parameter for interpolation into a message."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ", ".join(stringify(item) for item in value)
    if value is None:
        return ""
    return str(value)


class MessageFormatter:
    """Renders catalog templates (or a rule's own ``message``) against rule fields."""

    def __init__(self, catalog: MessageCatalog) -> None:
        self._catalog = catalog

    @property
    def catalog(self) -> MessageCatalog:
        return self._catalog

    @staticmethod
    def format(template: str, rule_fields: Mapping[str, Any]) -> str:
        """Replace ``{key}`` for every key present in ``rule_fields``.

        Unknown placeholders are left as-is.
        """

        def _sub(match: re.Match[str]) -> str:
            key = match.group(1)
            if key in rule_fields:
                return stringify(rule_fields[key])
            return match.group(0)

        return _PLACEHOLDER.sub(_sub, template)

    def render(self, key: str, rule: Mapping[str, Any], kind: ErrorKind) -> FieldError:
        """Render the message for ``key``; a rule ``message`` overrides the catalog."""
        override = rule.get("message")
        if override is not None:
            template = str(override)
        else:
            template = self._catalog.get(key)
        return FieldError(self.format(template, rule), kind)
