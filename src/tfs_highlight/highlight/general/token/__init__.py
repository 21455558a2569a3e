"""
token.

Does: Lexical layer for TFS documents: comment/string exclusion scanning,
      palette registry building, and identifier role classification.
Used by: Span builder and completion provider.
"""

from __future__ import annotations

from .classify import (
    IdentifierRole,
    classify_identifier,
    is_component_definition,
    is_property_key,
    iter_identifiers,
    iter_state_annotations,
)
from .registry import (
    PaletteDefinition,
    build_registry,
    case_collisions,
    iter_palette_definitions,
)
from .scanner import ExclusionIndex, ExclusionRange, scan_exclusions

__all__ = [
    # scanner
    "ExclusionRange",
    "ExclusionIndex",
    "scan_exclusions",
    # registry
    "PaletteDefinition",
    "iter_palette_definitions",
    "build_registry",
    "case_collisions",
    # classify
    "IdentifierRole",
    "is_property_key",
    "is_component_definition",
    "classify_identifier",
    "iter_identifiers",
    "iter_state_annotations",
]

__docformat__ = "google"
