"""Runtime support: registry locking and CLDR plural selection.

Python 3.13+.
"""

from .plural_rules import select_plural_category
from .rwlock import RWLock

__all__ = ["RWLock", "select_plural_category"]
