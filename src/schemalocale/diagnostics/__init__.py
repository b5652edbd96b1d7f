"""Error types for schemalocale.

Python 3.13+.
"""

from .errors import (
    LocaleRegistrationError,
    RegistryConfigurationError,
    SchemaLocaleError,
)

__all__ = [
    "LocaleRegistrationError",
    "RegistryConfigurationError",
    "SchemaLocaleError",
]
