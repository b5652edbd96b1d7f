"""schemalocale exception hierarchy.

Formatting itself never raises. These exceptions report misuse of the
configuration surface: registering a bad locale or building a registry that
cannot satisfy its fallback guarantee.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "LocaleRegistrationError",
    "RegistryConfigurationError",
    "SchemaLocaleError",
]


class SchemaLocaleError(Exception):
    """Base exception for all schemalocale errors."""


class LocaleRegistrationError(SchemaLocaleError, ValueError):
    """A locale registration was rejected.

    Raised for an empty or non-string locale identifier, a formatter that is
    not callable, or an attempt to replace the default locale.

    Attributes:
        locale: The identifier that was being registered.
    """

    def __init__(self, message: str, locale: object = None) -> None:
        super().__init__(message)
        self.locale = locale


class RegistryConfigurationError(SchemaLocaleError, ValueError):
    """A LocaleRegistry was constructed without its default locale."""
