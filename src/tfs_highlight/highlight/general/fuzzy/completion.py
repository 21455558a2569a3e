# src/tfs_highlight/highlight/general/fuzzy/completion.py
from __future__ import annotations

"""
completion.py

Does: Build completion items for a TFS document (property names, block directives,
      state names, palette tokens) and rank them against a typed prefix.
Returns: completion_items(text, prefix) -> list[CompletionItem].
Used by: Editor completion adapters; purely declarative, no host types.
"""

import logging
from typing import NamedTuple

from rapidfuzz import fuzz

from tfs_highlight.highlight.color.constants import (
    TFS_DIRECTIVES,
    TFS_PROPERTIES,
    TFS_STATES,
)
from tfs_highlight.highlight.color.utils.color_math import parse_color
from tfs_highlight.highlight.general.token.registry import build_registry

__all__ = [
    "CompletionItem",
    "vocabulary_items",
    "token_items",
    "completion_items",
    "rank_items",
]

__docformat__ = "google"

# ── Logging ──────────────────────────────────────────────────────────────────
log = logging.getLogger(__name__)

# ── Tunables ─────────────────────────────────────────────────────────────────
FUZZY_MIN_SCORE = 80


class CompletionItem(NamedTuple):
    label: str
    kind: str  # "property" | "keyword" | "enum-member" | "color"
    insert_text: str
    detail: str | None = None
    documentation: str | None = None


def vocabulary_items() -> list[CompletionItem]:
    """
    Does: Fixed vocabulary, in order: properties (insert `name: `),
          directives (insert `@x `), states.
    """
    items = [CompletionItem(p, "property", f"{p}: ") for p in TFS_PROPERTIES]
    items += [CompletionItem(d, "keyword", f"{d} ") for d in TFS_DIRECTIVES]
    items += [CompletionItem(s, "enum-member", s) for s in TFS_STATES]
    return items


def token_items(registry: dict[str, str]) -> list[CompletionItem]:
    """
    Does: One color item per registered token; documentation only when the raw
          value is a parsable color.
    """
    items: list[CompletionItem] = []
    for name, raw in registry.items():
        doc = f"Color **{name}** = `{raw}`" if parse_color(raw) is not None else None
        items.append(CompletionItem(name, "color", name, detail=raw, documentation=doc))
    return items


def rank_items(items: list[CompletionItem], prefix: str) -> list[CompletionItem]:
    """
    Does: Keep prefix matches first (case-insensitive), then fuzzy matches scoring
          at least FUZZY_MIN_SCORE; equal scores keep input order.
    Returns: All items unchanged when the prefix is blank.
    """
    q = prefix.strip().lower()
    if not q:
        return list(items)

    exact: list[CompletionItem] = []
    scored: list[tuple[float, CompletionItem]] = []
    for item in items:
        label = item.label.lower()
        if label.startswith(q):
            exact.append(item)
            continue
        score = fuzz.partial_ratio(q, label)
        if score >= FUZZY_MIN_SCORE:
            scored.append((score, item))

    scored.sort(key=lambda pair: -pair[0])
    if log.isEnabledFor(logging.DEBUG):
        log.debug("[COMPLETE] %r -> %d prefix, %d fuzzy", prefix, len(exact), len(scored))
    return exact + [item for _, item in scored]


def completion_items(text: str, prefix: str = "") -> list[CompletionItem]:
    """Does: Vocabulary items followed by document tokens, ranked by `prefix`."""
    items = vocabulary_items() + token_items(build_registry(text))
    return rank_items(items, prefix)
