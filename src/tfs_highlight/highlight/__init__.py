# tfs_highlight/highlight/__init__.py

"""
highlight.
=========

Does: Public entry points of the TFS highlighter: the span builder, the session
      adapter, settings, document colors and completions.
Returns: Re-exports of the most used callables and types.
Used by: Editor integrations, the CLI demo, and tests.
"""
from __future__ import annotations

from .color.logic import ColorInformation, color_presentations, extract_document_colors
from .general.fuzzy import CompletionItem, completion_items
from .general.utils import HighlightConfig, load_highlight_config
from .orchestrator import (
    DecorationSpan,
    PipelineState,
    StateSpan,
    compute_decorations,
    position_at,
)
from .session import DecorationSink, HighlightSession

__all__ = [
    "compute_decorations",
    "position_at",
    "DecorationSpan",
    "StateSpan",
    "PipelineState",
    "HighlightConfig",
    "load_highlight_config",
    "HighlightSession",
    "DecorationSink",
    "extract_document_colors",
    "color_presentations",
    "ColorInformation",
    "completion_items",
    "CompletionItem",
]
__docformat__ = "google"
