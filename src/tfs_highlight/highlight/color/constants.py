# constants.py
# ============

"""
constants.
=========

Does: Define immutable TFS-language vocabularies (properties, directives, states)
      and rendering constants (marker glyph, state accent, compensation tunables).
Used By: Span builder, compensation policy, completion provider.
Returns: Pure data structures only (no side effects).
"""

# ── 1) Language vocabularies ─────────────────────────────────────────────────

TFS_PROPERTIES: tuple[str, ...] = (
    "color",
    "background",
    "border",
    "border-style",
    "border-color",
    "padding",
    "font",
    "font-size",
    "weight",
    "family",
    "outline",
    "fill",
    "track",
    "line-height",
    "text-align",
    "margin",
    "margin-bottom",
    "border-radius",
    "box-shadow",
    "transform",
    "height",
)

TFS_DIRECTIVES: tuple[str, ...] = ("@colors", "@fonts", "@keyframes", "@media")

TFS_STATES: tuple[str, ...] = (
    "default",
    "hover",
    "focus",
    "error",
    "warning",
    "success",
    "active",
    "disabled",
)

# Characters after which a host should re-query completions
COMPLETION_TRIGGER_CHARACTERS: tuple[str, ...] = ("@", "[", ":", "-", "_")


# ── 2) Rendering ─────────────────────────────────────────────────────────────

MARKER_GLYPH = "■"
MARKER_MARGIN = "0 0.25ch 0 0"
STATE_ACCENT_COLOR = "#FF6BD8"


# ── 3) Compensation tunables ─────────────────────────────────────────────────

TRANSLUCENT_ALPHA = 0.55  # below this, always blend halfway to white
TRANSLUCENT_BLEND = 0.5
BLEND_STEP = 0.1
MAX_BLEND = 0.85
OPAQUE_ALPHA = 0.999  # at or above, canonical hex drops the alpha byte

DEFAULT_MIN_LUMINANCE = 0.45
