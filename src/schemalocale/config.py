"""Host-facing locale configuration.

A validator installs a LocaleConfig to decide which language its issues are
rendered in. Each locale module provides a zero-argument factory returning
one (``config_de()``, ``config_ja()``, ...).

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .issues import Issue
    from .types import LocaleFormatter

__all__ = ["LocaleConfig"]


@dataclass(frozen=True, slots=True)
class LocaleConfig:
    """Immutable configuration carrying a locale error function.

    Attributes:
        locale_error: Formatter invoked for every issue.
        locale: Identifier the formatter was built for ("de", "zh-CN").

    Example:
        >>> from schemalocale.issues import Issue
        >>> from schemalocale.locales import config_de
        >>> config = config_de()
        >>> config.locale
        'de'
        >>> config.format(Issue("nil_pointer"))
        'Null-Zeiger erkannt'
    """

    locale_error: LocaleFormatter
    locale: str

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If locale_error is not callable or locale is empty.
        """
        if not callable(self.locale_error):
            msg = "locale_error must be callable"
            raise ValueError(msg)
        if not isinstance(self.locale, str) or not self.locale:
            msg = "locale must be a non-empty string"
            raise ValueError(msg)

    def format(self, issue: Issue) -> str:
        """Render an issue with this configuration's formatter."""
        return self.locale_error(issue)
