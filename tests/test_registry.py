"""Tests for LocaleRegistry resolution, registration and the default registry.

Tests verify:
- Exact, language-prefix and default-locale resolution
- Registration validation and the protected default locale
- Fallback and replacement logging
- Isolation between registry instances
- Concurrent resolution during registration
"""

import logging
import threading

import pytest

from schemalocale import (
    Issue,
    LocaleConfig,
    LocaleRegistrationError,
    LocaleRegistry,
    RegistryConfigurationError,
    SchemaLocaleError,
    get_available_locales,
    get_default_registry,
    get_locale_formatter,
    get_localized_error,
)
from schemalocale.constants import BUILTIN_LOCALES
from schemalocale.locales import (
    BUILTIN_FORMATTERS,
    config_en,
    format_message_de,
    format_message_en,
)


def _shout(issue: Issue) -> str:
    return f"!{issue.code}!"


# ============================================================================
# Resolution
# ============================================================================


class TestResolve:
    """Test the three resolution steps."""

    def test_exact_match(self, registry: LocaleRegistry) -> None:
        """Registered ids resolve to their own formatter."""
        assert registry.resolve("zh-CN") is BUILTIN_FORMATTERS["zh-CN"]

    def test_exact_match_before_prefix(self, registry: LocaleRegistry) -> None:
        """zh-TW is not resolved through zh."""
        assert registry.resolve("zh-TW") is BUILTIN_FORMATTERS["zh-TW"]
        assert registry.resolve("zh-TW") is not registry.resolve("zh")

    def test_language_prefix(self, registry: LocaleRegistry) -> None:
        """de-AT resolves to de."""
        assert registry.resolve("de-AT") is registry.resolve("de")

    def test_prefix_of_zh_region(self, registry: LocaleRegistry) -> None:
        """Unregistered Chinese regions resolve to the bare zh entry."""
        assert registry.resolve("zh-HK") is BUILTIN_FORMATTERS["zh"]

    def test_unknown_falls_back_to_english(self, registry: LocaleRegistry) -> None:
        """xx-YY renders exactly like en."""
        issue = Issue("too_small", "hi", {"origin": "string", "minimum": 5})
        assert registry.format(issue, "xx-YY") == registry.format(issue, "en")

    def test_underscore_separator_not_prefixed(self, registry: LocaleRegistry) -> None:
        """de_AT has no hyphen at position two and falls back to English."""
        assert registry.resolve("de_AT") is registry.resolve("en")

    def test_three_letter_language(self, registry: LocaleRegistry) -> None:
        """Three-letter languages are not prefix-matched."""
        assert registry.resolve("deu-DE") is registry.resolve("en")

    def test_case_sensitive(self, registry: LocaleRegistry) -> None:
        """Identifiers are matched case-sensitively."""
        assert registry.resolve("DE") is registry.resolve("en")

    def test_empty_and_non_string(self, registry: LocaleRegistry) -> None:
        """Degenerate identifiers fall back without raising."""
        assert registry.resolve("") is registry.resolve("en")
        assert registry.resolve(None) is registry.resolve("en")  # type: ignore[arg-type]

    def test_format(self, registry: LocaleRegistry) -> None:
        """format() renders with the resolved formatter."""
        assert registry.format(Issue("nil_pointer"), "de-CH") == "Null-Zeiger erkannt"

    def test_fallback_logged(
        self, registry: LocaleRegistry, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Prefix and default fallbacks are logged at debug level."""
        with caplog.at_level(logging.DEBUG, logger="schemalocale.registry"):
            registry.resolve("de-AT")
            registry.resolve("xx")
        messages = [record.getMessage() for record in caplog.records]
        assert any("'de-AT'" in m and "prefix" in m for m in messages)
        assert any("'xx'" in m and "falling back" in m for m in messages)

    def test_exact_match_not_logged(
        self, registry: LocaleRegistry, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Exact matches stay silent."""
        with caplog.at_level(logging.DEBUG, logger="schemalocale.registry"):
            registry.resolve("fr")
        assert not caplog.records


# ============================================================================
# Registration
# ============================================================================


class TestRegister:
    """Test adding and replacing formatters."""

    def test_register_new_locale(self, registry: LocaleRegistry) -> None:
        """New ids resolve exactly after registration."""
        registry.register("eo", _shout)
        assert registry.resolve("eo") is _shout
        assert registry.is_registered("eo")
        assert "eo" in registry

    def test_registered_language_serves_regions(self, registry: LocaleRegistry) -> None:
        """A new language is reachable through the prefix rule."""
        registry.register("eo", _shout)
        assert registry.resolve("eo-XX") is _shout

    def test_replace_existing(
        self, registry: LocaleRegistry, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Replacing a non-default locale is allowed and logged at info."""
        with caplog.at_level(logging.INFO, logger="schemalocale.registry"):
            registry.register("de", _shout)
        assert registry.resolve("de-AT") is _shout
        assert any(r.levelno == logging.INFO and "'de'" in r.getMessage() for r in caplog.records)

    def test_default_locale_protected(self, registry: LocaleRegistry) -> None:
        """The default locale's formatter cannot be replaced."""
        with pytest.raises(LocaleRegistrationError, match="default locale") as exc_info:
            registry.register("en", _shout)
        assert exc_info.value.locale == "en"
        assert registry.resolve("en") is BUILTIN_FORMATTERS["en"]

    def test_default_locale_same_formatter(
        self, registry: LocaleRegistry, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Re-registering the default locale's own formatter is a no-op."""
        with caplog.at_level(logging.DEBUG, logger="schemalocale.registry"):
            registry.install(config_en())
        assert registry.resolve("en") is BUILTIN_FORMATTERS["en"]
        assert not any(r.levelno >= logging.INFO for r in caplog.records)

    @pytest.mark.parametrize("locale", ["", None, 42])
    def test_invalid_identifier(self, registry: LocaleRegistry, locale: object) -> None:
        """Empty and non-string identifiers are rejected."""
        with pytest.raises(LocaleRegistrationError, match="non-empty string"):
            registry.register(locale, _shout)  # type: ignore[arg-type]

    def test_non_callable_formatter(self, registry: LocaleRegistry) -> None:
        """Formatters must be callable."""
        with pytest.raises(LocaleRegistrationError, match="not callable"):
            registry.register("eo", "not a function")  # type: ignore[arg-type]

    def test_registration_error_is_value_error(self, registry: LocaleRegistry) -> None:
        """Registration errors are SchemaLocaleError and ValueError."""
        with pytest.raises(ValueError) as exc_info:
            registry.register("", _shout)
        assert isinstance(exc_info.value, SchemaLocaleError)

    def test_install_config(self, registry: LocaleRegistry) -> None:
        """install() registers a LocaleConfig."""
        registry.install(LocaleConfig(_shout, "eo"))
        assert registry.format(Issue("custom"), "eo") == "!custom!"

    def test_available_locales_sorted(self, registry: LocaleRegistry) -> None:
        """Snapshot is sorted and includes new ids."""
        registry.register("aa", _shout)
        available = registry.available_locales()
        assert available == tuple(sorted(available))
        assert "aa" in available
        assert set(BUILTIN_LOCALES) <= set(available)
        assert len(registry) == len(available)


# ============================================================================
# Construction
# ============================================================================


class TestConstruction:
    """Test custom registries."""

    def test_custom_entries(self) -> None:
        """A registry can hold only the entries it is given."""
        registry = LocaleRegistry({"en": format_message_en, "de": format_message_de})
        assert registry.available_locales() == ("de", "en")
        assert registry.resolve("fr") is format_message_en

    def test_custom_default_locale(self) -> None:
        """Fallback uses the configured default."""
        registry = LocaleRegistry({"de": format_message_de}, default_locale="de")
        assert registry.default_locale == "de"
        assert registry.resolve("xx") is format_message_de

    def test_missing_default_rejected(self) -> None:
        """A registry must contain its default locale."""
        with pytest.raises(RegistryConfigurationError, match="'en'"):
            LocaleRegistry({"de": format_message_de})

    def test_invalid_entry_rejected(self) -> None:
        """Initial entries are validated."""
        with pytest.raises(LocaleRegistrationError):
            LocaleRegistry({"en": format_message_en, "": _shout})

    def test_entries_copied(self) -> None:
        """Mutating the source mapping does not affect the registry."""
        entries = {"en": format_message_en}
        registry = LocaleRegistry(entries)
        entries["de"] = format_message_de
        assert not registry.is_registered("de")

    def test_repr(self, registry: LocaleRegistry) -> None:
        """repr names the size and default locale."""
        assert "default_locale='en'" in repr(registry)


# ============================================================================
# Isolation and the default registry
# ============================================================================


class TestDefaultRegistry:
    """Test module-level functions backed by the process-wide registry."""

    def test_instances_are_isolated(self, registry: LocaleRegistry) -> None:
        """Registering on one instance leaves the default registry alone."""
        registry.register("tlh", _shout)
        assert not get_default_registry().is_registered("tlh")

    def test_get_locale_formatter(self) -> None:
        """Module-level resolution uses the same rules."""
        assert get_locale_formatter("fr-CA") is BUILTIN_FORMATTERS["fr"]

    def test_get_localized_error(self) -> None:
        """Module-level rendering."""
        assert get_localized_error(Issue("nil_pointer"), "de-CH") == "Null-Zeiger erkannt"

    def test_get_available_locales(self) -> None:
        """Built-in ids are available."""
        assert set(BUILTIN_LOCALES) <= set(get_available_locales())


# ============================================================================
# Concurrency
# ============================================================================


class TestRegistryConcurrency:
    """Test concurrent resolution and registration."""

    def test_resolve_during_register(self, registry: LocaleRegistry) -> None:
        """Readers always see a complete formatter while writers register."""
        issue = Issue("nil_pointer")
        errors: list[BaseException] = []
        stop = threading.Event()

        def reader() -> None:
            try:
                while not stop.is_set():
                    message = registry.format(issue, "de-AT")
                    assert message in ("Null-Zeiger erkannt", "!nil_pointer!")
            except BaseException as exc:  # noqa: BLE001
                errors.append(exc)

        readers = [threading.Thread(target=reader) for _ in range(4)]
        for thread in readers:
            thread.start()
        for i in range(50):
            registry.register(f"x{i}", _shout)
        registry.register("de", _shout)
        stop.set()
        for thread in readers:
            thread.join()

        assert not errors
        assert registry.format(issue, "de-AT") == "!nil_pointer!"
