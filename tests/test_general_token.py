# tests/test_general_token.py
"""
Does: Validate the lexical layer: comment/string exclusion scanning, palette
      registry building (overwrite order, case collisions), and identifier roles.
"""

from __future__ import annotations

import importlib

import pytest

scanner = importlib.import_module("tfs_highlight.highlight.general.token.scanner")
registry = importlib.import_module("tfs_highlight.highlight.general.token.registry")
classify = importlib.import_module("tfs_highlight.highlight.general.token.classify")


# ──────────────────────────────────────────────────────────────────────────────
# Exclusion scanner
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "text, expected",
    [
        ("a // c\nb", [(2, 6)]),
        ("/* x */y", [(0, 7)]),
        ("/* open", [(0, 7)]),
        ('"a\\"b" c', [(0, 6)]),
        ('"abc', [(0, 4)]),
        ('"a\\', [(0, 3)]),
        ('"// not comment" // yes', [(0, 16), (17, 23)]),
        ('// "x"\n"y"', [(0, 6), (7, 10)]),
        ('/* "a */ "b"', [(0, 8), (9, 12)]),
        ("plain text", []),
    ],
)
def test_scan_exclusions_cases(text, expected):
    assert scanner.scan_exclusions(text) == expected


def test_scan_exclusions_terminates_on_unterminated_block_inside_string():
    text = '"/*" still code /* never closed'
    ranges = scanner.scan_exclusions(text)
    assert ranges[0] == (0, 4)
    assert ranges[-1] == (16, len(text))


def test_exclusion_index_matches_linear_scan():
    text = 'x "s" y // c\nz /* b */ w'
    ranges = scanner.scan_exclusions(text)
    index = scanner.ExclusionIndex(ranges)
    for offset in range(len(text) + 1):
        linear = any(s <= offset < e for s, e in ranges)
        assert index.is_excluded(offset) is linear
        assert (offset in index) is linear


def test_exclusion_index_from_text_and_len():
    index = scanner.ExclusionIndex.from_text("a // b")
    assert len(index) == 1
    assert not index.is_excluded(0)
    assert index.is_excluded(2)


# ──────────────────────────────────────────────────────────────────────────────
# Registry
# ──────────────────────────────────────────────────────────────────────────────
def test_build_registry_last_declaration_wins_across_blocks():
    text = "@colors { a: #fff; b: rgb(1,2,3); }\n@colors{ a: #000; }"
    reg = registry.build_registry(text)
    assert reg == {"a": "#000", "b": "rgb(1,2,3)"}
    assert list(reg) == ["a", "b"]


def test_build_registry_strips_values_and_keeps_casing():
    reg = registry.build_registry("@colors {\n  Brand-Main :   #123456  ;\n}")
    assert reg == {"Brand-Main": "#123456"}


def test_build_registry_ignores_text_outside_palette_blocks():
    assert registry.build_registry("Button { color: #fff; }") == {}


def test_build_registry_body_ends_at_first_brace():
    reg = registry.build_registry("@colors { a: #fff; } b: #000;")
    assert reg == {"a": "#fff"}


def test_iter_palette_definitions_offsets():
    text = "@colors { brand: #fff; }"
    (definition,) = list(registry.iter_palette_definitions(text))
    assert definition.name == "brand"
    assert definition.raw_value == "#fff"
    assert (definition.start, definition.end) == (10, 15)
    assert text[definition.start:definition.end] == "brand"


def test_case_collisions_flagged():
    reg = registry.build_registry("@colors { Brand: #fff; brand: #000; other: #111; }")
    assert reg == {"Brand": "#fff", "brand": "#000", "other": "#111"}
    assert registry.case_collisions(reg) == [("Brand", "brand")]


# ──────────────────────────────────────────────────────────────────────────────
# Classifier
# ──────────────────────────────────────────────────────────────────────────────
def test_is_property_key_skips_whitespace():
    assert classify.is_property_key("color : red", 5) is True
    assert classify.is_property_key("color\n\t: red", 5) is True
    assert classify.is_property_key("color red", 5) is False
    assert classify.is_property_key("color", 5) is False


def test_is_component_definition_requires_uppercase_and_brace():
    assert classify.is_component_definition("Button {", 0, 6) is True
    assert classify.is_component_definition("Button\n\t{", 0, 6) is True
    assert classify.is_component_definition("button {", 0, 6) is False
    assert classify.is_component_definition("Button;", 0, 6) is False


def test_classify_identifier_roles():
    text = "Card { Title: x; color: Brand; }"
    assert classify.classify_identifier(text, 0, 4) is classify.IdentifierRole.COMPONENT_DEFINITION
    assert classify.classify_identifier(text, 7, 12) is classify.IdentifierRole.PROPERTY_KEY
    start = text.index("Brand")
    assert (
        classify.classify_identifier(text, start, start + 5)
        is classify.IdentifierRole.REFERENCE
    )


def test_nested_component_uses_local_lookahead_only():
    text = "Outer { Inner { } }"
    start = text.index("Inner")
    assert classify.is_component_definition(text, start, start + 5) is True


def test_iter_identifiers_whole_runs_with_hyphen():
    found = [ident for _, _, ident in classify.iter_identifiers("brand-dark 1x _a #ab")]
    assert found == ["brand-dark", "x", "_a", "ab"]


def test_iter_state_annotations_single_line_only():
    assert list(classify.iter_state_annotations("A[hover] [a\nb] []")) == [(1, 8)]
