"""Locale registry: maps locale identifiers to formatters.

Resolution never fails. An identifier resolves in three steps:

1. Exact match ("zh-CN").
2. Language prefix of a "xx-YY" identifier ("de-AT" -> "de").
3. The registry's default locale ("en").

A process-wide default registry backs the module-level functions. Batch
helpers and tests can pass their own LocaleRegistry instead.

Thread Safety:
    LocaleRegistry guards its mapping with an RWLock. Resolutions take the
    read lock and run concurrently; registrations take the write lock, so
    readers never observe a partially updated mapping.

Python 3.13+.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from schemalocale.constants import DEFAULT_LOCALE
from schemalocale.diagnostics.errors import (
    LocaleRegistrationError,
    RegistryConfigurationError,
)
from schemalocale.locale_utils import language_prefix
from schemalocale.locales import BUILTIN_FORMATTERS
from schemalocale.runtime.rwlock import RWLock

if TYPE_CHECKING:
    from collections.abc import Mapping

    from schemalocale.config import LocaleConfig
    from schemalocale.issues import Issue
    from schemalocale.types import LocaleCode, LocaleFormatter

__all__ = [
    "LocaleRegistry",
    "get_available_locales",
    "get_default_registry",
    "get_locale_formatter",
    "get_localized_error",
    "install",
    "register_locale",
]

logger = logging.getLogger(__name__)


class LocaleRegistry:
    """Thread-safe mapping from locale identifiers to formatters.

    Args:
        entries: Initial locale -> formatter mapping. Defaults to the built-in
            locales.
        default_locale: Locale used when nothing else matches. Must be present
            in ``entries`` and cannot be re-registered afterwards.

    Raises:
        RegistryConfigurationError: If ``default_locale`` has no entry.

    Example:
        >>> registry = LocaleRegistry()
        >>> registry.resolve("de-AT") is registry.resolve("de")
        True
        >>> registry.resolve("xx-YY") is registry.resolve("en")
        True
    """

    __slots__ = ("_default_locale", "_formatters", "_lock")

    def __init__(
        self,
        entries: Mapping[LocaleCode, LocaleFormatter] | None = None,
        *,
        default_locale: LocaleCode = DEFAULT_LOCALE,
    ) -> None:
        formatters = dict(BUILTIN_FORMATTERS if entries is None else entries)
        if default_locale not in formatters:
            msg = (
                f"Default locale {default_locale!r} has no formatter; "
                f"registered: {sorted(formatters)}"
            )
            raise RegistryConfigurationError(msg)
        for locale, formatter in formatters.items():
            _validate_entry(locale, formatter)

        self._formatters: dict[LocaleCode, LocaleFormatter] = formatters
        self._default_locale = default_locale
        self._lock = RWLock()

    def __repr__(self) -> str:
        return (
            f"LocaleRegistry(locales={len(self._formatters)}, "
            f"default_locale={self._default_locale!r})"
        )

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._formatters)

    def __contains__(self, locale: object) -> bool:
        return isinstance(locale, str) and self.is_registered(locale)

    @property
    def default_locale(self) -> LocaleCode:
        """Locale used when resolution finds no better match."""
        return self._default_locale

    def resolve(self, locale: LocaleCode) -> LocaleFormatter:
        """Return the formatter for ``locale``, falling back as needed.

        Never raises. Non-string identifiers resolve to the default locale.
        """
        with self._lock.read():
            if isinstance(locale, str):
                formatter = self._formatters.get(locale)
                if formatter is not None:
                    return formatter

                prefix = language_prefix(locale)
                if prefix is not None:
                    formatter = self._formatters.get(prefix)
                    if formatter is not None:
                        logger.debug("Locale %r resolved by language prefix %r", locale, prefix)
                        return formatter

            logger.debug(
                "Locale %r not registered; falling back to %r", locale, self._default_locale
            )
            return self._formatters[self._default_locale]

    def format(self, issue: Issue, locale: LocaleCode) -> str:
        """Render ``issue`` with the formatter resolved for ``locale``."""
        return self.resolve(locale)(issue)

    def register(self, locale: LocaleCode, formatter: LocaleFormatter) -> None:
        """Add or replace the formatter for ``locale``.

        Raises:
            LocaleRegistrationError: If ``locale`` is empty or not a string,
                ``formatter`` is not callable, or ``formatter`` would replace
                the default locale's formatter with a different one.
        """
        _validate_entry(locale, formatter)

        with self._lock.write():
            if locale == self._default_locale:
                if formatter is not self._formatters[locale]:
                    msg = f"Cannot replace the default locale {locale!r}"
                    raise LocaleRegistrationError(msg, locale)
                logger.debug("Default locale %r already uses this formatter", locale)
                return
            replaced = locale in self._formatters
            self._formatters[locale] = formatter

        if replaced:
            logger.info("Replaced formatter for locale %r", locale)
        else:
            logger.debug("Registered formatter for locale %r", locale)

    def install(self, config: LocaleConfig) -> None:
        """Register the formatter carried by a locale configuration."""
        self.register(config.locale, config.locale_error)

    def is_registered(self, locale: LocaleCode) -> bool:
        """Return True if ``locale`` has an exact entry (no fallback)."""
        with self._lock.read():
            return locale in self._formatters

    def available_locales(self) -> tuple[LocaleCode, ...]:
        """Return a sorted snapshot of registered locale identifiers."""
        with self._lock.read():
            return tuple(sorted(self._formatters))


def _validate_entry(locale: object, formatter: object) -> None:
    if not isinstance(locale, str) or not locale:
        msg = f"Locale identifier must be a non-empty string, got {locale!r}"
        raise LocaleRegistrationError(msg, locale)
    if not callable(formatter):
        msg = f"Formatter for locale {locale!r} is not callable: {formatter!r}"
        raise LocaleRegistrationError(msg, locale)


# ============================================================================
# PROCESS-WIDE DEFAULT REGISTRY
# ============================================================================

_default_registry = LocaleRegistry()


def get_default_registry() -> LocaleRegistry:
    """Return the process-wide registry used by the module-level functions."""
    return _default_registry


def get_locale_formatter(locale: LocaleCode) -> LocaleFormatter:
    """Resolve ``locale`` in the default registry."""
    return _default_registry.resolve(locale)


def get_localized_error(issue: Issue, locale: LocaleCode) -> str:
    """Render ``issue`` in ``locale`` using the default registry.

    Example:
        >>> from schemalocale.issues import Issue
        >>> get_localized_error(Issue("nil_pointer"), "de-CH")
        'Null-Zeiger erkannt'
    """
    return _default_registry.format(issue, locale)


def register_locale(locale: LocaleCode, formatter: LocaleFormatter) -> None:
    """Register ``formatter`` for ``locale`` in the default registry."""
    _default_registry.register(locale, formatter)


def install(config: LocaleConfig) -> None:
    """Install a locale configuration into the default registry."""
    _default_registry.install(config)


def get_available_locales() -> tuple[LocaleCode, ...]:
    """Return the sorted locale identifiers of the default registry."""
    return _default_registry.available_locales()
