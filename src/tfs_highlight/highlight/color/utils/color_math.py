"""
color_math.py
=============

Does: Parse TFS color literals (#RGB, #RRGGBB, #RRGGBBAA, rgb()/rgba()) into
      normalized RGBA, compute WCAG relative luminance, blend toward white,
      and format canonical hex / picker presentations.
Used By: Compensation policy, span builder, document color extractor, completions.
Returns: RGBA tuples (floats in [0, 1]), luminance floats, hex/rgba strings.
"""

from __future__ import annotations

import logging
import math
import re
from typing import NamedTuple

import webcolors

from tfs_highlight.highlight.color.constants import OPAQUE_ALPHA

# Public surface
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

logger = logging.getLogger(__name__)


# ── Types ─────────────────────────────────────────────────────────────────────
class RGBA(NamedTuple):
    """Normalized color; every channel in [0, 1]."""

    red: float
    green: float
    blue: float
    alpha: float = 1.0


# =============================================================================
# 1) PARSING
# =============================================================================

_HEX_RE = re.compile(r"#([0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})")
_NUM = r"([0-9]+(?:\.[0-9]*)?|\.[0-9]+)"
_RGBA_RE = re.compile(
    rf"rgba?\s*\(\s*{_NUM}\s*,\s*{_NUM}\s*,\s*{_NUM}(?:\s*,\s*{_NUM})?\s*\)",
    re.IGNORECASE,
)


def _clamp(v: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, v))


def _parse_hex(digits: str) -> RGBA:
    # webcolors normalizes 3/6-digit forms; the alpha byte is handled here
    rgb = webcolors.hex_to_rgb("#" + digits[:6] if len(digits) == 8 else "#" + digits)
    alpha = int(digits[6:8], 16) / 255 if len(digits) == 8 else 1.0
    return RGBA(rgb.red / 255, rgb.green / 255, rgb.blue / 255, alpha)


def parse_color(raw: str | None) -> RGBA | None:
    """
    Does: Parse a hex or rgb()/rgba() literal; channels clamped to [0, 255],
          alpha clamped to [0, 1] (default 1). Surrounding whitespace is ignored.
    Returns: RGBA or None for any other textual form.
    """
    if not raw:
        return None
    s = raw.strip()

    m = _HEX_RE.fullmatch(s)
    if m:
        return _parse_hex(m.group(1))

    m = _RGBA_RE.fullmatch(s)
    if m:
        r, g, b = (_clamp(float(v), 0.0, 255.0) for v in m.group(1, 2, 3))
        a = _clamp(float(m.group(4)), 0.0, 1.0) if m.group(4) is not None else 1.0
        return RGBA(r / 255, g / 255, b / 255, a)

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("[PARSE FAIL] not a color literal: %r", raw)
    return None


# =============================================================================
# 2) LUMINANCE & BLENDING
# =============================================================================

def _srgb_to_linear(v: float) -> float:
    return v / 12.92 if v <= 0.03928 else ((v + 0.055) / 1.055) ** 2.4


def relative_luminance(color: RGBA) -> float:
    """Does: WCAG relative luminance of the (alpha-agnostic) sRGB channels."""
    r, g, b = (_srgb_to_linear(c) for c in (color.red, color.green, color.blue))
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def blend_toward_white(color: RGBA, factor: float) -> RGBA:
    """Does: Move each RGB channel linearly toward 1 by `factor`; alpha unchanged."""
    return RGBA(
        color.red + (1 - color.red) * factor,
        color.green + (1 - color.green) * factor,
        color.blue + (1 - color.blue) * factor,
        color.alpha,
    )


# =============================================================================
# 3) FORMATTING
# =============================================================================

def to_byte(v: float) -> int:
    """Does: Clamp to [0, 1] and round half up onto 0..255."""
    return int(math.floor(_clamp(v, 0.0, 1.0) * 255 + 0.5))


def to_canonical_hex(color: RGBA) -> str:
    """
    Does: Lowercase `#rrggbb` when alpha >= 0.999, otherwise `#rrggbbaa`.
    """
    hex6 = webcolors.rgb_to_hex((to_byte(color.red), to_byte(color.green), to_byte(color.blue)))
    if color.alpha >= OPAQUE_ALPHA:
        return hex6
    return f"{hex6}{to_byte(color.alpha):02x}"


def _short_number(v: float) -> str:
    # 1.0 -> "1", 0.30 -> "0.3"
    return f"{v:g}"


def color_presentations(color: RGBA) -> tuple[str, str]:
    """
    Does: Render a picked color as (`#rrggbb` with alpha dropped,
          `rgba(R, G, B, A)` with A rounded to 2 decimals).
    """
    r, g, b = to_byte(color.red), to_byte(color.green), to_byte(color.blue)
    a = math.floor(_clamp(color.alpha, 0.0, 1.0) * 100 + 0.5) / 100
    return webcolors.rgb_to_hex((r, g, b)), f"rgba({r}, {g}, {b}, {_short_number(a)})"
