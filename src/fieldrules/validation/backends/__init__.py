"""Rule-set storage backends."""

from __future__ import annotations

from fieldrules.validation.backends.file_backend import FileRuleSetBackend
from fieldrules.validation.backends.memory_backend import MemoryRuleSetBackend
from fieldrules.validation.backends.protocol import IRuleSetBackend

__all__ = ["FileRuleSetBackend", "IRuleSetBackend", "MemoryRuleSetBackend"]
