"""Environment-driven configuration via Pydantic Settings."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings

LOCALE_PATTERN = re.compile(r"^[a-z]{2}_[A-Z]{2}$")

DEFAULT_LOCALE = "zh_CN"


class FieldRulesSettings(BaseSettings):
    """All configuration is driven by env vars with ``FIELDRULES_`` prefix.

    Example::

        export FIELDRULES_LOCALE=en_US
        export FIELDRULES_BATCH=true
        export FIELDRULES_LOCALE_DIR=/etc/myapp/messages
    """

    model_config = {"env_prefix": "FIELDRULES_"}

    # ── Messages ─────────────────────────────────────────────────────
    locale: str = DEFAULT_LOCALE
    base_locale: str = DEFAULT_LOCALE
    locale_dir: Path | None = None

    # ── Validation policy ────────────────────────────────────────────
    batch: bool = False
    fail_exception: bool = True
    strict_functions: bool = False

    # ── Logging ──────────────────────────────────────────────────────
    log_level: str = "INFO"
    log_format: Literal["auto", "console", "json"] = "auto"

    @field_validator("locale", "base_locale")
    @classmethod
    def _check_locale(cls, value: str) -> str:
        if not LOCALE_PATTERN.match(value):
            raise ValueError(f"Invalid language code format: {value}. Expected format: en_US")
        return value
