"""
color.
=====

Does: Aggregate TFS color-domain definitions (vocabularies & rendering constants)
      shared by the span builder, color math, and completion provider.
Used By: Span builder, compensation policy, completion provider, CLI demo.
Returns: Pure data structures; no side effects.
"""

# ── Constants ────────────────────────────────────────────────────────────────
from .constants import (
    COMPLETION_TRIGGER_CHARACTERS,
    DEFAULT_MIN_LUMINANCE,
    MARKER_GLYPH,
    MARKER_MARGIN,
    STATE_ACCENT_COLOR,
    TFS_DIRECTIVES,
    TFS_PROPERTIES,
    TFS_STATES,
)

__all__ = [
    "TFS_PROPERTIES",
    "TFS_DIRECTIVES",
    "TFS_STATES",
    "COMPLETION_TRIGGER_CHARACTERS",
    "MARKER_GLYPH",
    "MARKER_MARGIN",
    "STATE_ACCENT_COLOR",
    "DEFAULT_MIN_LUMINANCE",
]
