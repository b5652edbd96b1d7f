"""Tests for LocaleConfig, the Issue value type and the error hierarchy."""

import dataclasses

import pytest

from schemalocale import (
    Issue,
    IssueCode,
    LocaleConfig,
    LocaleRegistrationError,
    RegistryConfigurationError,
    SchemaLocaleError,
    __version__,
    install,
)
from schemalocale.locales import config_de, config_en, config_ja, config_zh_cn
from schemalocale.registry import get_default_registry


class TestLocaleConfig:
    """Test the host-facing configuration object."""

    def test_factory(self) -> None:
        """Locale factories carry their id and formatter."""
        config = config_de()
        assert config.locale == "de"
        assert config.format(Issue("nil_pointer")) == "Null-Zeiger erkannt"

    def test_frozen(self) -> None:
        """Configurations are immutable."""
        config = config_ja()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.locale = "en"  # type: ignore[misc]

    def test_non_callable_rejected(self) -> None:
        """locale_error must be callable."""
        with pytest.raises(ValueError, match="callable"):
            LocaleConfig("nope", "de")  # type: ignore[arg-type]

    def test_empty_locale_rejected(self) -> None:
        """locale must be a non-empty string."""
        with pytest.raises(ValueError, match="non-empty"):
            LocaleConfig(str, "")

    def test_install_into_default_registry(self) -> None:
        """install() with a built-in config leaves resolution unchanged."""
        before = get_default_registry().resolve("zh-CN")
        install(config_zh_cn())
        assert get_default_registry().resolve("zh-CN") is before

    def test_install_english_config(self) -> None:
        """Switching back to English installs without error."""
        install(config_de())
        install(config_en())
        assert get_default_registry().resolve("en") is config_en().locale_error


class TestIssue:
    """Test the Issue value type."""

    def test_properties_read_only(self) -> None:
        """The property bag cannot be mutated through the issue."""
        issue = Issue("too_small", properties={"minimum": 1})
        with pytest.raises(TypeError):
            issue.properties["minimum"] = 2  # type: ignore[index]

    def test_source_mapping_copied(self) -> None:
        """Later changes to the source dict do not leak in."""
        props = {"minimum": 1}
        issue = Issue("too_small", properties=props)
        props["minimum"] = 99
        assert issue.properties["minimum"] == 1

    def test_none_properties(self) -> None:
        """properties=None is an empty bag."""
        issue = Issue(IssueCode.NIL_POINTER, properties=None)  # type: ignore[arg-type]
        assert dict(issue.properties) == {}

    def test_with_properties(self) -> None:
        """with_properties returns an updated copy."""
        issue = Issue(IssueCode.TOO_BIG, 5, {"maximum": 3}, "msg")
        updated = issue.with_properties(maximum=4, inclusive=False)
        assert updated.properties == {"maximum": 4, "inclusive": False}
        assert issue.properties == {"maximum": 3}
        assert (updated.code, updated.input, updated.message) == (IssueCode.TOO_BIG, 5, "msg")

    def test_code_equals_string(self) -> None:
        """IssueCode members compare equal to their string values."""
        assert IssueCode.INVALID_UNION == "invalid_union"


class TestErrorHierarchy:
    """Test exception types."""

    def test_base_class(self) -> None:
        """All errors share SchemaLocaleError and ValueError."""
        for error_type in (LocaleRegistrationError, RegistryConfigurationError):
            assert issubclass(error_type, SchemaLocaleError)
            assert issubclass(error_type, ValueError)

    def test_registration_error_locale(self) -> None:
        """The rejected identifier is kept on the exception."""
        error = LocaleRegistrationError("bad", "xx")
        assert error.locale == "xx"
        assert str(error) == "bad"


class TestVersion:
    """Test package metadata."""

    def test_version_string(self) -> None:
        """__version__ is a non-empty string."""
        assert isinstance(__version__, str)
        assert __version__
