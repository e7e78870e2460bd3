"""Shared fixtures for fieldrules tests."""

from __future__ import annotations

import os
from collections.abc import Callable
from typing import Any

import pytest

from fieldrules.classifier import TypeClassifier
from fieldrules.config import FieldRulesSettings
from fieldrules.messages.catalog import MessageCatalog
from fieldrules.messages.formatter import MessageFormatter
from fieldrules.validation.evaluator import EvaluationContext
from fieldrules.validation.registry import FunctionRegistry
from fieldrules.validator import Validator


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep FIELDRULES_* variables from the host out of every test."""
    for name in list(os.environ):
        if name.startswith("FIELDRULES_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def settings() -> FieldRulesSettings:
    """English messages, return-false on failure."""
    return FieldRulesSettings(locale="en_US", fail_exception=False)


@pytest.fixture
def en_catalog() -> MessageCatalog:
    return MessageCatalog("en_US")


@pytest.fixture
def zh_catalog() -> MessageCatalog:
    return MessageCatalog("zh_CN")


@pytest.fixture
def functions() -> FunctionRegistry:
    return FunctionRegistry()


@pytest.fixture
def ctx(en_catalog: MessageCatalog, functions: FunctionRegistry) -> EvaluationContext:
    """Evaluation context with English messages and the built-in type tags."""
    return EvaluationContext(
        formatter=MessageFormatter(en_catalog),
        classifier=TypeClassifier(),
        functions=functions,
    )


@pytest.fixture
def user_rules() -> dict[str, Any]:
    """Registration form used across validator tests."""
    return {
        "username": {
            "label": "Username",
            "rules": [
                {"required": True},
                {"type": "string"},
                {"regex": "/^[a-zA-Z][a-zA-Z0-9_]{5,19}$/"},
            ],
        },
        "email": {
            "label": "Email",
            "rules": [{"required": True}, {"type": "email"}],
        },
        "password": {
            "label": "Password",
            "rules": [{"required": True}, {"type": "strong_pwd"}],
        },
        "confirm_password": {
            "label": "Confirm password",
            "rules": [{"required": True}, {"confirm": "password", "confirm_label": "Password"}],
        },
        "age": {
            "label": "Age",
            "rules": [{"type": "int"}, {"min": 18, "max": 100}],
        },
        "phone": {
            "label": "Phone",
            "rules": [{"type": "mobile"}],
        },
    }


@pytest.fixture
def valid_user() -> dict[str, Any]:
    return {
        "username": "alice_01",
        "email": "alice@example.com",
        "password": "Secret#123",
        "confirm_password": "Secret#123",
        "age": 30,
        "phone": "13812345678",
    }


@pytest.fixture
def make_validator(settings: FieldRulesSettings) -> Callable[..., Validator]:
    """Factory building validators with the English test settings."""

    def _make(rules: dict[str, Any] | None = None, **kwargs: Any) -> Validator:
        kwargs.setdefault("settings", settings)
        return Validator(rules, **kwargs)

    return _make
