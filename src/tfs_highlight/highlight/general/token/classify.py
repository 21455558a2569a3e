# src/tfs_highlight/highlight/general/token/classify.py
"""
classify.py
===========

Does: Decide the syntactic role of an identifier occurrence from raw text around it
      (property key before `:`, capitalised component definition before `{`),
      and scan identifiers / `[state]` annotations.
Returns: Role predicates, classify_identifier(), iter_identifiers(), iter_state_annotations().
Used by: Span builder; exclusion ranges are deliberately not consulted here.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from enum import Enum

__all__ = [
    "IdentifierRole",
    "is_property_key",
    "is_component_definition",
    "classify_identifier",
    "iter_identifiers",
    "iter_state_annotations",
]
__docformat__ = "google"

_IDENTIFIER_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_-]*")
_STATE_RE = re.compile(r"\[[^\]\n]+\]")
_WS_RE = re.compile(r"\s*")


class IdentifierRole(str, Enum):
    PROPERTY_KEY = "property-key"
    COMPONENT_DEFINITION = "component-definition"
    REFERENCE = "reference"


def _next_significant(text: str, end: int) -> str:
    """Character after `end` once whitespace is skipped ('' at end of input)."""
    pos = _WS_RE.match(text, end).end()
    return text[pos] if pos < len(text) else ""


def is_property_key(text: str, end: int) -> bool:
    """Does: True when the next non-whitespace character after `end` is ':'."""
    return _next_significant(text, end) == ":"


def is_component_definition(text: str, start: int, end: int) -> bool:
    """Does: True for an ASCII-uppercase-first identifier directly followed by '{'."""
    if start >= end or not ("A" <= text[start] <= "Z"):
        return False
    return _next_significant(text, end) == "{"


def classify_identifier(text: str, start: int, end: int) -> IdentifierRole:
    """
    Does: Property key wins over component definition; anything else is a reference.
    Note: Purely local lookahead, no brace-nesting awareness.
    """
    if is_property_key(text, end):
        return IdentifierRole.PROPERTY_KEY
    if is_component_definition(text, start, end):
        return IdentifierRole.COMPONENT_DEFINITION
    return IdentifierRole.REFERENCE


def iter_identifiers(text: str) -> Iterator[tuple[int, int, str]]:
    """Does: Yield (start, end, identifier) for each identifier run, left to right."""
    for m in _IDENTIFIER_RE.finditer(text):
        yield m.start(), m.end(), m.group(0)


def iter_state_annotations(text: str) -> Iterator[tuple[int, int]]:
    """Does: Yield [start, end) of every single-line `[ ... ]` annotation, brackets included."""
    for m in _STATE_RE.finditer(text):
        yield m.start(), m.end()
