"""Locale formatter building blocks: catalog data and the dispatch skeleton.

Python 3.13+.
"""

from .catalog import MessageCatalog, SizingInfo
from .formatter import IssueFormatter

__all__ = ["IssueFormatter", "MessageCatalog", "SizingInfo"]
