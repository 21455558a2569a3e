# src/tfs_highlight/highlight/general/token/registry.py
"""
registry.py
===========

Does: Find `@colors { name: value; ... }` palette blocks and build the ordered
      token registry (declared name -> raw value text), last declaration wins.
Returns: build_registry(text) -> dict[str, str];
         iter_palette_definitions(text) -> PaletteDefinition per declaration line.
Used by: Span builder (token list + LHS definition pass) and completion provider.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator
from typing import NamedTuple

__all__ = [
    "PaletteDefinition",
    "iter_palette_definitions",
    "build_registry",
    "case_collisions",
]
__docformat__ = "google"

log = logging.getLogger(__name__)

# Body ends at the first closing brace; blocks do not nest.
_PALETTE_BLOCK_RE = re.compile(r"@colors\s*\{(.*?)\}", re.DOTALL)
_DECLARATION_RE = re.compile(r"([A-Za-z_][A-Za-z0-9_-]*)\s*:\s*([^;]+);")


class PaletteDefinition(NamedTuple):
    """One `name: value;` line inside a palette block, with absolute offsets."""

    name: str
    raw_value: str
    start: int
    end: int


def iter_palette_definitions(text: str) -> Iterator[PaletteDefinition]:
    """
    Does: Walk every palette block in document order, yielding each declaration
          with the absolute [start, end) range of its name.
    """
    for block in _PALETTE_BLOCK_RE.finditer(text):
        body_start = block.start(1)
        for line in _DECLARATION_RE.finditer(block.group(1)):
            start = body_start + line.start(1)
            yield PaletteDefinition(
                name=line.group(1).strip(),
                raw_value=line.group(2).strip(),
                start=start,
                end=start + len(line.group(1)),
            )


def build_registry(text: str) -> dict[str, str]:
    """
    Does: Map declared token name (case preserved) -> raw value; later declarations
          overwrite earlier ones while keeping the first insertion position.
    Returns: Ordered dict; empty when the document has no palette block.
    """
    registry: dict[str, str] = {}
    for definition in iter_palette_definitions(text):
        if definition.name in registry and log.isEnabledFor(logging.DEBUG):
            log.debug(
                "[REGISTRY] %r redeclared: %r -> %r",
                definition.name,
                registry[definition.name],
                definition.raw_value,
            )
        registry[definition.name] = definition.raw_value
    return registry


def case_collisions(registry: dict[str, str]) -> list[tuple[str, ...]]:
    """
    Does: Group registry names that only differ by case (e.g. `Brand` / `brand`).
    Returns: Groups of 2+ names in registry order; empty when there is no clash.
    """
    groups: dict[str, list[str]] = {}
    for name in registry:
        groups.setdefault(name.lower(), []).append(name)
    return [tuple(names) for names in groups.values() if len(names) > 1]
