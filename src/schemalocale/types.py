"""Type aliases shared across schemalocale.

Uses PEP 695 ``type`` statements.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeAlias

from .issues import Issue

__all__ = [
    "LocaleCode",
    "LocaleFormatter",
]

LocaleCode: TypeAlias = str
"""Locale identifier such as "en" or "zh-CN". Case-sensitive."""

LocaleFormatter: TypeAlias = Callable[[Issue], str]
"""Pure function rendering one issue as a sentence in one language."""
