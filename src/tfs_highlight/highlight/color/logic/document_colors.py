"""
document_colors.py
==================

Does: Find raw hex (#RGB/#RRGGBB/#RRGGBBAA) and rgb()/rgba() literals anywhere in
      a document (comments and strings included) for a color picker, and turn a
      picked color back into its textual forms.
Returns: extract_document_colors(text) -> [ColorInformation];
         color_presentations(color) -> (hex, rgba).
Used By: Color-picker adapters and the CLI demo.
"""

from __future__ import annotations

import logging
import re
from typing import NamedTuple

from tfs_highlight.highlight.color.utils.color_math import (
    RGBA,
    color_presentations,
    parse_color,
)

__all__ = ["ColorInformation", "extract_document_colors", "color_presentations"]
__docformat__ = "google"

logger = logging.getLogger(__name__)

_HEX_LITERAL_RE = re.compile(r"#[0-9a-fA-F]{3,8}\b", re.ASCII)
_RGB_CALL_RE = re.compile(r"rgba?\([^)]*\)")


class ColorInformation(NamedTuple):
    """An editable color literal at [start, end); `color` is the uncompensated value."""

    start: int
    end: int
    color: RGBA
    text: str


def _collect(pattern: re.Pattern[str], text: str) -> list[ColorInformation]:
    found: list[ColorInformation] = []
    for m in pattern.finditer(text):
        color = parse_color(m.group(0))
        if color is None:
            continue
        found.append(ColorInformation(m.start(), m.end(), color, m.group(0)))
    return found


def extract_document_colors(text: str) -> list[ColorInformation]:
    """
    Does: Run the hex scan then the rgb()/rgba() scan; literals that do not parse
          (e.g. 4- or 5-digit hex) are skipped.
    Returns: All hex hits first, then all rgb hits, each group in document order.
    """
    infos = _collect(_HEX_LITERAL_RE, text) + _collect(_RGB_CALL_RE, text)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("[DOC COLORS] %d literal(s) found", len(infos))
    return infos
