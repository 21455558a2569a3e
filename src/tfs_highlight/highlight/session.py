"""
session.py
==========

Does: Thin adapter between the pure span builder and a rendering host: read the
      settings fresh, compute, retract every previously applied decoration, then
      apply the new ones, in that order.
Returns: HighlightSession.refresh(text) -> PipelineState.
Used by: Editor integrations and the CLI demo.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Protocol, runtime_checkable

from tfs_highlight.highlight.general.utils.load_config import (
    HighlightConfig,
    load_highlight_config,
)
from tfs_highlight.highlight.orchestrator import PipelineState, compute_decorations

__all__ = ["DecorationSink", "HighlightSession"]
__docformat__ = "google"

logger = logging.getLogger(__name__)


@runtime_checkable
class DecorationSink(Protocol):
    """Host side that owns the actual rendering handles."""

    def retract(self) -> None: ...

    def apply(self, state: PipelineState) -> None: ...


class HighlightSession:
    """One document view; refreshes are synchronous and never overlap."""

    def __init__(
        self,
        sink: DecorationSink,
        settings_loader: Callable[[], HighlightConfig] = load_highlight_config,
    ):
        self._sink = sink
        self._settings_loader = settings_loader
        self._busy = False
        self.last_state: PipelineState | None = None

    def refresh(self, text: str) -> PipelineState:
        """Does: Compute decorations for `text`, retract the old ones, apply the new."""
        if self._busy:
            raise RuntimeError("refresh() re-entered while a refresh is in progress")
        self._busy = True
        try:
            config = self._settings_loader()
            state = compute_decorations(text, config)
            self._sink.retract()
            self._sink.apply(state)
        finally:
            self._busy = False
        self.last_state = state
        logger.debug(
            "refreshed: %d inline, %d swatch, %d state",
            len(state.inline),
            len(state.swatch),
            len(state.states),
        )
        return state

    def close(self) -> None:
        """Does: Retract everything this session applied."""
        self._sink.retract()
        self.last_state = None
