"""Tests for MessageCatalog lookup, locale fallback and create_catalog."""

from __future__ import annotations

from pathlib import Path

import pytest

from fieldrules.config import FieldRulesSettings
from fieldrules.exceptions import ConfigurationError
from fieldrules.messages.backends import MemoryLocaleBackend, PackageLocaleBackend
from fieldrules.messages.catalog import MessageCatalog, create_catalog, validate_locale


class TestLookup:
    def test_bundled_english(self, en_catalog: MessageCatalog) -> None:
        assert en_catalog.locale == "en_US"
        assert en_catalog.get("required") == "Please fill in {label}"

    def test_bundled_chinese(self, zh_catalog: MessageCatalog) -> None:
        assert zh_catalog.get("required") == "请填写{label}"

    def test_missing_key_uses_default(self, en_catalog: MessageCatalog) -> None:
        assert en_catalog.get("no_such_key") == "Validation failed"

    def test_missing_key_without_default_returns_key(self) -> None:
        backend = MemoryLocaleBackend({"en_US": {"required": "Need {label}"}})
        catalog = MessageCatalog("en_US", backend=backend)
        assert catalog.get("required") == "Need {label}"
        assert catalog.get("min") == "min"

    def test_lookup_in_other_locale(self, en_catalog: MessageCatalog) -> None:
        assert en_catalog.get("required", locale="zh_CN") == "请填写{label}"
        assert en_catalog.locale == "en_US"

    def test_contains(self, en_catalog: MessageCatalog) -> None:
        assert "between" in en_catalog
        assert "nope" not in en_catalog

    def test_messages_are_read_only(self, en_catalog: MessageCatalog) -> None:
        with pytest.raises(TypeError):
            en_catalog.messages["required"] = "changed"  # type: ignore[index]


class TestLocaleCodes:
    @pytest.mark.parametrize("code", ["english", "en-US", "EN_us", "en_USA", ""])
    def test_invalid_code_rejected(self, code: str) -> None:
        with pytest.raises(ConfigurationError, match="Invalid language code format"):
            MessageCatalog(code)

    def test_configuration_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            validate_locale("xx")

    def test_with_locale_validates(self, en_catalog: MessageCatalog) -> None:
        with pytest.raises(ConfigurationError):
            en_catalog.with_locale("fr")


class TestCopyOnSwitch:
    def test_with_locale_returns_new_catalog(self, en_catalog: MessageCatalog) -> None:
        zh = en_catalog.with_locale("zh_CN")
        assert zh is not en_catalog
        assert zh.locale == "zh_CN"
        assert en_catalog.get("required") == "Please fill in {label}"
        assert zh.get("required") == "请填写{label}"

    def test_with_locale_keeps_backends(self) -> None:
        backend = MemoryLocaleBackend(
            {"en_US": {"default": "bad"}, "de_DE": {"default": "schlecht"}, "zh_CN": {"default": "坏"}}
        )
        catalog = MessageCatalog("en_US", backend=backend)
        assert catalog.with_locale("de_DE").get("x") == "schlecht"


class TestFallback:
    def test_unknown_locale_falls_back_to_base(self) -> None:
        catalog = MessageCatalog("fr_FR")
        assert catalog.locale == "fr_FR"
        assert catalog.get("required") == "请填写{label}"

    def test_custom_base_locale(self) -> None:
        catalog = MessageCatalog("fr_FR", base_locale="en_US")
        assert catalog.get("required") == "Please fill in {label}"

    def test_missing_base_table_returns_raw_keys(self) -> None:
        catalog = MessageCatalog("en_US", backend=MemoryLocaleBackend({}))
        assert catalog.get("required") == "required"
        assert dict(catalog.messages) == {}

    def test_malformed_table_falls_back(self) -> None:
        backend = MemoryLocaleBackend(
            {"en_US": {"required": 5}, "zh_CN": {"required": "请填写{label}", "default": "验证失败"}}
        )
        catalog = MessageCatalog("en_US", backend=backend)
        assert catalog.get("required") == "请填写{label}"

    def test_fallback_backend_used_when_primary_lacks_locale(self) -> None:
        catalog = MessageCatalog(
            "en_US",
            backend=MemoryLocaleBackend({}),
            fallback_backend=PackageLocaleBackend(),
        )
        assert catalog.get("required") == "Please fill in {label}"

    def test_primary_backend_wins(self) -> None:
        catalog = MessageCatalog(
            "en_US",
            backend=MemoryLocaleBackend({"en_US": {"required": "Need {label}", "default": "Nope"}}),
            fallback_backend=PackageLocaleBackend(),
        )
        assert catalog.get("required") == "Need {label}"
        assert catalog.get("between") == "Nope"


class TestCreateCatalog:
    def test_from_settings(self) -> None:
        catalog = create_catalog(FieldRulesSettings(locale="en_US"))
        assert catalog.locale == "en_US"
        assert catalog.get("min") == "{label} must not be less than {min}"

    def test_locale_dir_with_bundled_fallback(self, tmp_path: Path) -> None:
        (tmp_path / "en_US.yaml").write_text("default: Bad value\nrequired: '{label} is mandatory'\n")
        settings = FieldRulesSettings(locale="en_US", locale_dir=tmp_path)

        catalog = create_catalog(settings)
        assert catalog.get("required") == "{label} is mandatory"
        assert catalog.get("between") == "Bad value"

        zh = catalog.with_locale("zh_CN")
        assert zh.get("required") == "请填写{label}"
