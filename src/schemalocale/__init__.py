"""schemalocale - Localized messages for schema-validation issues.

Turns structured validation issues (a code plus a property bag) into one
human-readable sentence in one of about thirty languages. Formatting is pure
and total: every issue renders to a non-empty string, unknown locales fall
back to English.

Public API:
    Issue - One validation failure (code, input, properties, message)
    IssueCode - The closed set of issue codes
    LocaleConfig - Configuration object carrying a locale's formatter
    LocaleRegistry - Thread-safe locale -> formatter mapping with fallback
    get_locale_formatter - Resolve a locale in the default registry
    get_localized_error - Render an issue in a locale
    register_locale - Add a formatter to the default registry
    get_available_locales - Sorted registered locale identifiers
    format_many / join_messages - Batch rendering
    partition_locales / dedupe_locales - Locale list utilities

Exceptions:
    SchemaLocaleError - Base exception class
    LocaleRegistrationError - Rejected registration
    RegistryConfigurationError - Registry without its default locale

Submodules:
    schemalocale.locales - One module per locale (config_<lang>, format_message_<lang>)
    schemalocale.formatting - MessageCatalog, SizingInfo and the IssueFormatter skeleton
    schemalocale.core - PropertyAccessor and primitive renderers
"""

from .batch import dedupe_locales, format_many, join_messages, partition_locales
from .config import LocaleConfig
from .diagnostics import (
    LocaleRegistrationError,
    RegistryConfigurationError,
    SchemaLocaleError,
)
from .enums import IssueCode, ReceivedType
from .issues import Issue
from .registry import (
    LocaleRegistry,
    get_available_locales,
    get_default_registry,
    get_locale_formatter,
    get_localized_error,
    install,
    register_locale,
)

# Version information - Auto-populated from package metadata
try:
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as _get_version
except ImportError as e:
    raise RuntimeError("importlib.metadata unavailable - Python version too old? " + str(e)) from e

try:
    __version__ = _get_version("schemalocale")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Issue",
    "IssueCode",
    "LocaleConfig",
    "LocaleRegistrationError",
    "LocaleRegistry",
    "ReceivedType",
    "RegistryConfigurationError",
    "SchemaLocaleError",
    "__version__",
    "dedupe_locales",
    "format_many",
    "get_available_locales",
    "get_default_registry",
    "get_locale_formatter",
    "get_localized_error",
    "install",
    "join_messages",
    "partition_locales",
    "register_locale",
]
