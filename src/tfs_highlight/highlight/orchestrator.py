# orchestrator.py
from __future__ import annotations

"""
orchestrator.py
===============

Does: Span builder. Scan exclusions, build the palette registry, resolve and
      compensate each token color, classify every occurrence, and emit
      deduplicated decoration spans plus fixed-accent state spans.
Returns:
  - compute_decorations(text, config) -> PipelineState with
        inline:     [DecorationSpan]  (identifier text recolored + marker)
        swatch:     [DecorationSpan]  (marker only)
        states:     [StateSpan]       (`[hover]` etc., fixed accent)
  - position_at(text, offset) -> (line, character) for hosts using line/column ranges
Used by: Session adapter, CLI demo, editor integrations.
"""

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Literal, NamedTuple

from tfs_highlight.highlight.color.constants import (
    MARKER_GLYPH,
    MARKER_MARGIN,
    STATE_ACCENT_COLOR,
)
from tfs_highlight.highlight.color.logic.compensation import render_color
from tfs_highlight.highlight.color.utils.color_math import parse_color, to_canonical_hex
from tfs_highlight.highlight.general.token.classify import (
    IdentifierRole,
    classify_identifier,
    iter_identifiers,
    iter_state_annotations,
)
from tfs_highlight.highlight.general.token.registry import (
    PaletteDefinition,
    build_registry,
    case_collisions,
    iter_palette_definitions,
)
from tfs_highlight.highlight.general.token.scanner import ExclusionIndex, ExclusionRange
from tfs_highlight.highlight.general.utils.load_config import HighlightConfig
from tfs_highlight.highlight.general.utils.log import debug

logger = logging.getLogger(__name__)

__all__ = [
    "Category",
    "DecorationSpan",
    "StateSpan",
    "PipelineState",
    "compute_decorations",
    "position_at",
]

Category = Literal["inline", "swatch"]


# =============================================================================
# Types
# =============================================================================

class DecorationSpan(NamedTuple):
    """A token occurrence at [start, end) with its marker and render color."""

    start: int
    end: int
    render_color: str
    category: Category
    token: str
    marker: str = MARKER_GLYPH
    marker_margin: str = MARKER_MARGIN


class StateSpan(NamedTuple):
    start: int
    end: int
    color: str = STATE_ACCENT_COLOR


@dataclass
class PipelineState:
    """Everything one invocation computed; rebuilt from scratch on every call."""

    config: HighlightConfig
    registry: dict[str, str] = field(default_factory=dict)
    exclusions: list[ExclusionRange] = field(default_factory=list)
    render_colors: dict[str, str] = field(default_factory=dict)
    inline: list[DecorationSpan] = field(default_factory=list)
    swatch: list[DecorationSpan] = field(default_factory=list)
    states: list[StateSpan] = field(default_factory=list)
    collisions: list[tuple[str, ...]] = field(default_factory=list)

    @property
    def token_spans(self) -> list[DecorationSpan]:
        """Inline and swatch spans together, ordered by position."""
        return sorted(self.inline + self.swatch, key=lambda s: (s.start, s.end))


# =============================================================================
# Helpers
# =============================================================================

def _emit(
    state: PipelineState,
    seen: set[tuple[int, int]],
    start: int,
    end: int,
    name: str,
    color: str,
    category: Category,
) -> None:
    if (start, end) in seen:
        return
    seen.add((start, end))
    span = DecorationSpan(start, end, color, category, name)
    (state.inline if category == "inline" else state.swatch).append(span)


def _token_spans(
    text: str,
    name: str,
    color: str,
    definitions: list[PaletteDefinition],
    occurrences: list[tuple[int, int]],
    exclusions: ExclusionIndex,
    state: PipelineState,
    seen: set[tuple[int, int]],
) -> None:
    """Definition pass first, then every other occurrence of `name` in the text."""
    default_category: Category = "inline" if state.config.enable_color_highlight else "swatch"

    # 1) LHS of palette declarations
    for definition in definitions:
        if exclusions.is_excluded(definition.start):
            continue
        _emit(state, seen, definition.start, definition.end, name, color, default_category)

    # 2) General scan, whole identifiers only
    for start, end in occurrences:
        if exclusions.is_excluded(start):
            continue
        role = classify_identifier(text, start, end)
        if role is IdentifierRole.PROPERTY_KEY:
            continue
        if role is IdentifierRole.COMPONENT_DEFINITION:
            _emit(state, seen, start, end, name, color, "swatch")
            continue
        _emit(state, seen, start, end, name, color, default_category)


def _emission_order(
    registry: dict[str, str],
    collisions: list[tuple[str, ...]],
    definitions: list[PaletteDefinition],
) -> list[str]:
    """Registry order, except each case-collision group runs latest-declared first."""
    last_declared = {d.name: d.start for d in definitions}
    group_of = {name: group for group in collisions for name in group}

    order: list[str] = []
    placed: set[str] = set()
    for name in registry:
        if name in placed:
            continue
        group = group_of.get(name, (name,))
        ranked = sorted(group, key=lambda n: last_declared.get(n, -1), reverse=True)
        order += ranked
        placed.update(ranked)
    return order


# =============================================================================
# Public API
# =============================================================================

def compute_decorations(text: str, config: HighlightConfig | None = None) -> PipelineState:
    """
    Does: Run scan -> resolve -> compensate -> emit for one (text, config) pair.
          Tokens whose raw value does not parse contribute nothing. Each exact
          range is emitted at most once across all tokens.
    Returns: A fresh PipelineState; never raises on document content.
    """
    config = config or HighlightConfig()
    exclusions = ExclusionIndex.from_text(text)
    state = PipelineState(config=config, exclusions=exclusions.ranges)
    state.registry = build_registry(text)

    state.collisions = case_collisions(state.registry)
    for group in state.collisions:
        # last declared spelling claims shared ranges
        logger.warning("Token names differ only by case: %s", ", ".join(group))

    # one pass over the document, grouped by case-folded name
    definitions = list(iter_palette_definitions(text))
    defs_by_key: dict[str, list[PaletteDefinition]] = defaultdict(list)
    for definition in definitions:
        defs_by_key[definition.name.lower()].append(definition)

    keys = {name.lower() for name in state.registry}
    idents_by_key: dict[str, list[tuple[int, int]]] = defaultdict(list)
    for start, end, ident in iter_identifiers(text):
        key = ident.lower()
        if key in keys:
            idents_by_key[key].append((start, end))

    seen: set[tuple[int, int]] = set()
    for name in _emission_order(state.registry, state.collisions, definitions):
        raw = state.registry[name]
        resolved = parse_color(raw)
        if resolved is None:
            debug(f"skip {name!r}: unparsable value {raw!r}", topic="spans")
            continue
        color = to_canonical_hex(render_color(resolved, config))
        state.render_colors[name] = color
        key = name.lower()
        _token_spans(
            text, name, color, defs_by_key[key], idents_by_key[key], exclusions, state, seen
        )

    for start, end in iter_state_annotations(text):
        if exclusions.is_excluded(start):
            continue
        state.states.append(StateSpan(start, end))

    debug(
        f"{len(state.registry)} token(s), {len(state.inline)} inline, "
        f"{len(state.swatch)} swatch, {len(state.states)} state span(s)",
        topic="spans",
    )
    return state


def position_at(text: str, offset: int, *, utf16: bool = False) -> tuple[int, int]:
    """
    Does: Convert a string offset into a zero-based (line, character) pair.
          With `utf16=True`, characters count UTF-16 code units like most editors.
    """
    offset = max(0, min(offset, len(text)))
    line = text.count("\n", 0, offset)
    line_start = text.rfind("\n", 0, offset) + 1
    segment = text[line_start:offset]
    if utf16:
        return line, len(segment.encode("utf-16-le")) // 2
    return line, len(segment)
