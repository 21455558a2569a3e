"""
logic.
=====

Does: Expose the color policies built on top of color math: legibility
      compensation and document color-literal extraction.
Used by: Span builder and color-picker adapters.
"""

from __future__ import annotations

from .compensation import compensate, render_color
from .document_colors import ColorInformation, color_presentations, extract_document_colors

__all__ = [
    "compensate",
    "render_color",
    "ColorInformation",
    "extract_document_colors",
    "color_presentations",
]

__docformat__ = "google"
