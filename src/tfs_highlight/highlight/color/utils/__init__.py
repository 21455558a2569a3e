"""
utils package.
=============

Does: Provide color math primitives: literal parsing, WCAG luminance,
      blending toward white, and canonical hex / picker formatting.
"""

from .color_math import (
    RGBA,
    blend_toward_white,
    color_presentations,
    parse_color,
    relative_luminance,
    to_byte,
    to_canonical_hex,
)

__all__ = [
    "RGBA",
    "parse_color",
    "relative_luminance",
    "blend_toward_white",
    "to_canonical_hex",
    "to_byte",
    "color_presentations",
]

__docformat__ = "google"
