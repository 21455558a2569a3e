# src/tfs_highlight/highlight/general/fuzzy/__init__.py
"""
fuzzy.

Does: Facade exposing completion item building and fuzzy prefix ranking.
Used by: Editor completion adapters.
"""

from __future__ import annotations

from .completion import (
    CompletionItem,
    completion_items,
    rank_items,
    token_items,
    vocabulary_items,
)

__all__ = [
    "CompletionItem",
    "completion_items",
    "rank_items",
    "token_items",
    "vocabulary_items",
]

__docformat__ = "google"
