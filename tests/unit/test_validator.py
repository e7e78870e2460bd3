"""Tests for the Validator API: policies, scenes, language and extension hooks."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from fieldrules.config import FieldRulesSettings
from fieldrules.exceptions import ConfigurationError, UnknownFunctionError, ValidateError
from fieldrules.messages.backends import MemoryLocaleBackend
from fieldrules.messages.catalog import MessageCatalog
from fieldrules.messages.errors import ErrorKind
from fieldrules.validation.backends import MemoryRuleSetBackend
from fieldrules.validation.models import FieldSpec
from fieldrules.validator import Validator

MakeValidator = Callable[..., Validator]


class TestCheck:
    def test_valid_record_passes(self, make_validator: MakeValidator, user_rules: dict, valid_user: dict) -> None:
        validator = make_validator(user_rules)
        assert validator.check(valid_user) is True
        assert validator.get_error() == {}

    def test_fail_fast_returns_first_error(self, make_validator: MakeValidator, user_rules: dict) -> None:
        validator = make_validator(user_rules)
        assert validator.check({"username": "alice_01", "email": "bad", "age": 5}) is False
        assert validator.get_error() == "Email type error"

    def test_fail_fast_raises(self, make_validator: MakeValidator, user_rules: dict) -> None:
        validator = make_validator(user_rules).fail_exception()
        record = {"username": ""}
        with pytest.raises(ValidateError) as exc_info:
            validator.check(record)
        assert exc_info.value.error == "Please fill in Username"
        assert str(exc_info.value) == "Please fill in Username"
        assert exc_info.value.data is record
        assert validator.get_error() == "Please fill in Username"

    def test_batch_collects_every_field(self, make_validator: MakeValidator, user_rules: dict) -> None:
        validator = make_validator(user_rules).batch()
        assert validator.check({"username": "alice_01", "email": "bad", "age": 5}) is False
        errors = validator.get_error()
        assert isinstance(errors, dict)
        assert list(errors) == ["email", "password", "confirm_password", "age"]
        assert errors["age"] == "Age must be between 18 and 100"

    def test_batch_raises_with_mapping(self, make_validator: MakeValidator, user_rules: dict) -> None:
        validator = make_validator(user_rules).batch().fail_exception(True)
        with pytest.raises(ValidateError) as exc_info:
            validator.check({"username": "alice_01", "email": "bad", "age": 5})
        assert isinstance(exc_info.value.error, dict)
        assert len(exc_info.value.error) == 4
        assert str(exc_info.value).split("\n")[0] == "Email type error"

    def test_errors_cleared_between_checks(
        self, make_validator: MakeValidator, user_rules: dict, valid_user: dict
    ) -> None:
        validator = make_validator(user_rules)
        validator.check({})
        assert validator.get_error() != {}
        validator.check(valid_user)
        assert validator.get_error() == {}

    def test_errors_carry_kinds(self, make_validator: MakeValidator, user_rules: dict) -> None:
        validator = make_validator(user_rules).batch()
        validator.check({"username": "", "email": "bad", "age": 5})
        errors = validator.get_error()
        assert errors["username"].kind is ErrorKind.REQUIRED_MISSING  # type: ignore[index,union-attr]
        assert errors["email"].kind is ErrorKind.TYPE_MISMATCH  # type: ignore[index,union-attr]
        assert errors["age"].kind is ErrorKind.BOUND_VIOLATION  # type: ignore[index,union-attr]

    def test_numeric_string_within_bounds(self, make_validator: MakeValidator) -> None:
        validator = make_validator({"age": {"min": 18, "max": 100, "label": "Age"}})
        assert validator.check({"age": "50"}) is True
        assert validator.check({"age": "101"}) is False
        assert validator.get_error() == "Age must be between 18 and 100"

    def test_non_mapping_record_rejected(self, make_validator: MakeValidator) -> None:
        with pytest.raises(ConfigurationError):
            make_validator({}).check(["not", "a", "mapping"])  # type: ignore[arg-type]

    def test_no_rules_passes(self, make_validator: MakeValidator) -> None:
        assert make_validator().check({"anything": 1}) is True


class TestValidate:
    def test_passed(self, make_validator: MakeValidator, user_rules: dict, valid_user: dict) -> None:
        result = make_validator(user_rules).fail_exception().validate(valid_user)
        assert result
        assert result.errors() == {}

    def test_fail_fast_never_raises(self, make_validator: MakeValidator, user_rules: dict) -> None:
        result = make_validator(user_rules).fail_exception().validate({"username": ""})
        assert not result
        assert result.failed_field == "username"
        assert result.errors() == {"username": "Please fill in Username"}
        assert result.kinds() == {"username": ErrorKind.REQUIRED_MISSING}

    def test_batch(self, make_validator: MakeValidator, user_rules: dict) -> None:
        result = make_validator(user_rules).batch().fail_exception().validate({"username": "alice_01"})
        assert result.passed is False
        assert set(result.errors()) == {"email", "password", "confirm_password"}
        assert result.failed_field is None


class TestSettings:
    def test_settings_drive_defaults(self, user_rules: dict) -> None:
        validator = Validator(user_rules, settings=FieldRulesSettings(locale="zh_CN", batch=True, fail_exception=False))
        assert validator.language == "zh_CN"
        validator.check({"username": "alice_01"})
        assert validator.get_error()["email"] == "请填写Email"  # type: ignore[index]

    def test_env_settings(self, monkeypatch: pytest.MonkeyPatch, user_rules: dict) -> None:
        monkeypatch.setenv("FIELDRULES_LOCALE", "en_US")
        monkeypatch.setenv("FIELDRULES_FAIL_EXCEPTION", "false")
        validator = Validator(user_rules)
        assert validator.check({}) is False
        assert validator.get_error() == "Please fill in Username"

    def test_strict_functions_setting(self) -> None:
        rules = {"age": {"rules": [{"validateFunction": "unknown"}]}}
        validator = Validator(rules, settings=FieldRulesSettings(strict_functions=True, fail_exception=False))
        with pytest.raises(UnknownFunctionError):
            validator.check({"age": 20})


class TestLanguage:
    def test_switch_changes_text_only(self, make_validator: MakeValidator, user_rules: dict) -> None:
        record = {"username": "alice_01", "email": "bad"}
        validator = make_validator(user_rules)
        validator.check(record)
        english = validator.get_error()

        validator.set_language("zh_CN")
        validator.check(record)
        chinese = validator.get_error()

        assert english != chinese
        assert english.kind is chinese.kind  # type: ignore[union-attr]
        assert chinese == "Email类型错误"

    def test_invalid_code(self, make_validator: MakeValidator) -> None:
        validator = make_validator()
        with pytest.raises(ConfigurationError):
            validator.set_language("english")
        assert validator.language == "en_US"

    def test_set_catalog(self, make_validator: MakeValidator) -> None:
        catalog = MessageCatalog("en_US", backend=MemoryLocaleBackend({"en_US": {"required": "{label}!"}}))
        validator = make_validator({"a": {"label": "A", "rules": [{"required": True}]}}).set_catalog(catalog)
        validator.check({})
        assert validator.get_error() == "A!"
        assert validator.catalog is catalog

    def test_set_catalog_type_checked(self, make_validator: MakeValidator) -> None:
        with pytest.raises(ConfigurationError):
            make_validator().set_catalog({"required": "x"})  # type: ignore[arg-type]


class TestScenes:
    def test_mapping_scene(self, make_validator: MakeValidator, user_rules: dict) -> None:
        validator = make_validator(user_rules, scenes={"login": ["username", "password"]})
        assert validator.scene("login").check({"username": "alice_01", "password": "Secret#123"})
        assert list(validator.current_rules()) == ["username", "password"]
        assert validator.current_scene == "login"

    def test_scene_switch_is_non_destructive(self, make_validator: MakeValidator, user_rules: dict) -> None:
        validator = make_validator(user_rules, scenes={"login": ["username", "password"]})
        validator.scene("login").current_rules()
        validator.set_scene(None)
        assert list(validator.current_rules()) == list(user_rules)

    def test_registered_procedure(self, make_validator: MakeValidator, user_rules: dict) -> None:
        def relaxed(v: Validator) -> None:
            v.only(["username", "age"]).remove("age", "min").append("age", {"max": 150})

        validator = make_validator(user_rules).register_scene("relaxed", relaxed).scene("relaxed")
        assert validator.check({"username": "alice_01", "age": 120})
        assert validator.check({"username": "alice_01", "age": 151}) is False
        assert validator.get_error() == "Age must not be greater than 150"

    def test_set_rules_and_scenes_chain(self, make_validator: MakeValidator) -> None:
        validator = (
            make_validator()
            .set_rules({"a": {"rules": [{"required": True}]}, "b": {"rules": [{"required": True}]}})
            .set_scenes({"only_b": ["b"]})
            .scene("only_b")
        )
        assert validator.check({"b": 1})
        assert not validator.check({"a": 1})
        assert validator.get_error() == "Please fill in [b]"


class TestExtension:
    def test_register_function(self, make_validator: MakeValidator) -> None:
        validator = make_validator({"age": {"label": "Age", "rules": [{"validateFunction": "adult"}]}})
        validator.register_function("adult", lambda rule, value, record: value >= 18)
        assert validator.check({"age": 20})
        assert not validator.check({"age": 10})
        assert validator.get_error() == "Validation failed"

    def test_register_directive(self, make_validator: MakeValidator) -> None:
        def check_even(rule: Any, value: Any, record: Any, ctx: Any) -> Any:
            if value % 2:
                return ctx.formatter.render("even", rule, ErrorKind.CUSTOM_VALIDATION_FAILED)
            return None

        catalog = MessageCatalog(
            "en_US", backend=MemoryLocaleBackend({"en_US": {"even": "{label} must be even", "default": "bad"}})
        )
        validator = make_validator({"n": {"label": "N", "rules": [{"even": True}]}}, catalog=catalog)
        validator.register_directive("even", check_even)
        assert validator.check({"n": 4})
        assert not validator.check({"n": 3})
        assert validator.get_error() == "N must be even"

    def test_register_type(self, make_validator: MakeValidator) -> None:
        validator = make_validator({"sku": {"label": "SKU", "rules": [{"type": "sku"}]}})
        validator.register_type("sku", lambda v: isinstance(v, str) and v.startswith("SKU-"))
        assert validator.check({"sku": "SKU-1"})
        assert not validator.check({"sku": "1"})

    def test_instances_do_not_share_registries(self, make_validator: MakeValidator) -> None:
        first = make_validator().register_type("sku", lambda v: True).register_function("f", len)
        second = make_validator()
        assert first.classifier.has("sku")
        assert not second.classifier.has("sku")
        assert not second.functions.has("f")

    def test_field_spec_models_accepted(self, make_validator: MakeValidator) -> None:
        validator = make_validator({"name": FieldSpec(label="Name", rules=[{"required": True}])})
        assert not validator.check({})
        assert validator.get_error() == "Please fill in Name"

    def test_invalid_rules_rejected(self, make_validator: MakeValidator) -> None:
        with pytest.raises(ConfigurationError):
            make_validator({"name": {"rules": "required"}})


class TestFromBackend:
    def test_rules_and_scenes(self, settings: FieldRulesSettings, user_rules: dict) -> None:
        backend = MemoryRuleSetBackend(user_rules, {"login": ["username", "password"]}, version=3)
        validator = Validator.from_backend(backend, settings=settings)
        validator.scene("login")
        assert list(validator.current_rules()) == ["username", "password"]
