"""
compensation.py
===============

Does: Brighten dark or translucent colors so token highlights stay legible on a
      dark editor background. Pure and deterministic.
Returns: compensate(color, min_luminance) -> RGBA; render_color(color, config) -> RGBA.
Used By: Span builder before formatting a token's render color.
"""

from __future__ import annotations

import logging

from tfs_highlight.highlight.color.constants import (
    BLEND_STEP,
    MAX_BLEND,
    TRANSLUCENT_ALPHA,
    TRANSLUCENT_BLEND,
)
from tfs_highlight.highlight.color.utils.color_math import (
    RGBA,
    blend_toward_white,
    relative_luminance,
)
from tfs_highlight.highlight.general.utils.load_config import HighlightConfig

__all__ = ["compensate", "render_color"]
__docformat__ = "google"

logger = logging.getLogger(__name__)


def compensate(color: RGBA, min_luminance: float) -> RGBA:
    """
    Does: Translucent colors (alpha < 0.55) blend halfway to white. Opaque colors
          under `min_luminance` re-blend the ORIGINAL color by 0.1, 0.2, ... until
          the target is met, the last step being clamped to 0.85.
    Returns: The input unchanged when already bright enough.
    """
    if color.alpha < TRANSLUCENT_ALPHA:
        return blend_toward_white(color, TRANSLUCENT_BLEND)

    if relative_luminance(color) >= min_luminance:
        return color

    out = color
    step = 0
    factor = 0.0
    while factor < MAX_BLEND:
        step += 1
        # integer step count keeps 0.1 increments free of float drift
        factor = min(round(step * BLEND_STEP, 10), MAX_BLEND)
        out = blend_toward_white(color, factor)
        if relative_luminance(out) >= min_luminance:
            break

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "[COMPENSATE] %r -> factor=%.2f lum=%.4f (target %.4f)",
            color,
            factor,
            relative_luminance(out),
            min_luminance,
        )
    return out


def render_color(color: RGBA, config: HighlightConfig) -> RGBA:
    """Does: Apply `compensate` only in "auto" mode; other modes pass through."""
    if not config.compensate:
        return color
    return compensate(color, config.min_luminance)
