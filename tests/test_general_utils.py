# tests/test_general_utils.py
"""End-to-end tests for general utils (load_config, HighlightConfig, log) with cache/env handling."""

from __future__ import annotations

import io
import os
from importlib import import_module

import pytest

LC = import_module("tfs_highlight.highlight.general.utils.load_config")
LOG = import_module("tfs_highlight.highlight.general.utils.log")


@pytest.fixture(autouse=True)
def _clean_cache(monkeypatch):
    monkeypatch.delenv(LC.SETTINGS_ENV_VAR, raising=False)
    LC.clear_config_cache()
    yield
    LC.clear_config_cache()


def _write(tmp_path, body, name="settings.json"):
    p = tmp_path / name
    p.write_text(body, encoding="utf-8")
    return p


# ---------- load_config ----------
def test_load_config_accepts_comments_and_trailing_commas(tmp_path):
    p = _write(
        tmp_path,
        """{
  // editor settings
  "tfs.enableColorHighlight": false,
  "tfs.brightness.minLuminance": 0.3, /* lower target */
}""",
    )
    data = LC.load_config(p)
    assert data == {"tfs.enableColorHighlight": False, "tfs.brightness.minLuminance": 0.3}


def test_load_config_strict_json_rejects_comments(tmp_path):
    p = _write(tmp_path, '{"a": 1, // no\n}')
    with pytest.raises(LC.ConfigParseError):
        LC.load_config(p, allow_comments=False)


def test_load_config_cache_hit_and_invalidation(tmp_path):
    p = _write(tmp_path, '{"minLuminance": 0.2}')
    first = LC.load_config(p)
    assert LC.load_config(p) is first

    p.write_text('{"minLuminance": 0.6}', encoding="utf-8")
    st = p.stat()
    os.utime(p, (st.st_atime, st.st_mtime + 5))
    assert LC.load_config(p) == {"minLuminance": 0.6}


def test_load_config_errors(tmp_path):
    with pytest.raises(LC.ConfigFileNotFound):
        LC.load_config(tmp_path / "missing.json")
    with pytest.raises(LC.ConfigParseError):
        LC.load_config(_write(tmp_path, "{not json", "bad.json"))
    with pytest.raises(LC.ConfigTypeError):
        LC.load_config(_write(tmp_path, "[1, 2]", "list.json"))


# ---------- HighlightConfig ----------
def test_highlight_config_defaults():
    c = LC.HighlightConfig.from_settings(None)
    assert c == LC.HighlightConfig(True, "auto", 0.45)
    assert c.compensate is True


@pytest.mark.parametrize(
    "settings",
    [
        {
            "tfs.enableColorHighlight": False,
            "tfs.brightness.compensation": "off",
            "tfs.brightness.minLuminance": 0.2,
        },
        {"enableColorHighlight": False, "compensationMode": "off", "minLuminance": 0.2},
        {"tfs": {"enableColorHighlight": False, "brightness": {"compensation": "off", "minLuminance": 0.2}}},
    ],
)
def test_highlight_config_key_spellings(settings):
    c = LC.HighlightConfig.from_settings(settings)
    assert c == LC.HighlightConfig(False, "off", 0.2)
    assert c.compensate is False


def test_highlight_config_int_luminance_coerced_to_float():
    c = LC.HighlightConfig.from_settings({"minLuminance": 1})
    assert c.min_luminance == 1.0 and isinstance(c.min_luminance, float)


def test_highlight_config_unknown_mode_kept_and_warned(caplog):
    c = LC.HighlightConfig.from_settings({"compensationMode": "vivid"})
    assert c.compensation_mode == "vivid"
    assert c.compensate is False
    assert "Unknown compensation mode" in caplog.text


@pytest.mark.parametrize(
    "settings",
    [
        {"enableColorHighlight": "yes"},
        {"compensationMode": 3},
        {"minLuminance": "high"},
        {"minLuminance": True},
    ],
)
def test_highlight_config_wrong_types(settings):
    with pytest.raises(LC.ConfigTypeError):
        LC.HighlightConfig.from_settings(settings)


def test_load_highlight_config_env_and_temp_override(tmp_path):
    assert LC.load_highlight_config() == LC.HighlightConfig()

    p = _write(tmp_path, '{"tfs.brightness.minLuminance": 0.7}')
    with LC.temp_settings_file(p):
        assert LC.load_highlight_config().min_luminance == 0.7
    assert LC.SETTINGS_ENV_VAR not in os.environ

    assert LC.load_highlight_config(p).min_luminance == 0.7


# ---------- log ----------
def test_debug_log_respects_topics(monkeypatch):
    monkeypatch.setenv("TFS_DEBUG_TOPICS", "spans")
    LOG.reload_topics()
    buf = io.StringIO()
    LOG.debug("hello", topic="spans", stream=buf)
    LOG.debug("ignored", topic="other", stream=buf)
    out = buf.getvalue()
    assert "[spans][DEBUG] hello" in out
    assert "ignored" not in out


def test_debug_log_all_and_silent(monkeypatch):
    monkeypatch.setenv("TFS_DEBUG_TOPICS", "all")
    LOG.reload_topics()
    assert LOG.topic_enabled("anything")

    monkeypatch.delenv("TFS_DEBUG_TOPICS")
    LOG.reload_topics()
    buf = io.StringIO()
    LOG.debug("quiet", stream=buf)
    assert buf.getvalue() == ""
