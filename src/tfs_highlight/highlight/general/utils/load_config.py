# src/tfs_highlight/highlight/general/utils/load_config.py

"""Load host settings files (JSON with comments) with caching and typed coercions.

- load_config(path)            -> parsed top-level object (dict), cached by mtime
- HighlightConfig.from_settings -> typed options read from flat/short/nested keys
- load_highlight_config(path)  -> explicit path > $TFS_SETTINGS > defaults

Used by the CLI, the session adapter, and tests needing hot reload.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from types import TracebackType
from typing import Any

import json5

# ── Public surface ────────────────────────────────────────────────────────────
__all__ = [
    "HighlightConfig",
    "load_config",
    "load_highlight_config",
    "clear_config_cache",
    "temp_settings_file",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
    "SETTINGS_ENV_VAR",
]

SETTINGS_ENV_VAR = "TFS_SETTINGS"


# ── Exceptions ───────────────────────────────────────────────────────────────
class ConfigFileNotFound(FileNotFoundError):
    """Raise when the requested settings file cannot be read or resolved."""


class ConfigParseError(ValueError):
    """Raise when JSON parsing fails for a settings file."""


class ConfigTypeError(TypeError):
    """Raise when the parsed JSON doesn't match the expected structure."""


# ── Logging & cache ──────────────────────────────────────────────────────────
log = logging.getLogger(__name__)
_CACHE_LOCK = threading.RLock()
# cache key includes: path, mtime, encoding, allow_comments
_CONFIG_CACHE: dict[tuple[Path, float, str, bool], dict[str, Any]] = {}


def clear_config_cache() -> None:
    """Empty the in-memory settings cache (useful for pytest/hot-reload)."""
    with _CACHE_LOCK:
        _CONFIG_CACHE.clear()
        log.debug("Config cache cleared.")


def load_config(
    file: str | os.PathLike[str],
    *,
    encoding: str = "utf-8",
    allow_comments: bool = True,
) -> dict[str, Any]:
    """Load a settings file, require a top-level object, and cache the result."""
    path = Path(os.path.expanduser(os.fspath(file))).resolve()
    if not path.is_file():
        raise ConfigFileNotFound(f"Settings file not found: {path}")

    # mtime-based cache key for auto-invalidation when file changes
    try:
        mtime = path.stat().st_mtime
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot stat {path}: {e}") from e

    cache_key = (path, mtime, encoding, allow_comments)
    with _CACHE_LOCK:
        if cache_key in _CONFIG_CACHE:
            log.debug("Config cache HIT: %s", path.name)
            return _CONFIG_CACHE[cache_key]

    try:
        text = path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e

    try:
        if allow_comments:
            data = json5.loads(text)  # allows comments/trailing commas
        else:
            data = json.loads(text)
    except ValueError as e:
        raise ConfigParseError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigTypeError(
            f"{path.name}: expected an object at top level, got {type(data).__name__}"
        )

    with _CACHE_LOCK:
        _CONFIG_CACHE[cache_key] = data
        log.debug("Config cache MISS → STORED: %s", path.name)
    return data


# ── Typed options ────────────────────────────────────────────────────────────
_DEFAULT_ENABLE = True
_DEFAULT_MODE = "auto"
_DEFAULT_MIN_LUMINANCE = 0.45

# option -> accepted spellings, checked in order
_KEYS: dict[str, tuple[tuple[str, ...], ...]] = {
    "enable_color_highlight": (
        ("tfs.enableColorHighlight",),
        ("enableColorHighlight",),
        ("tfs", "enableColorHighlight"),
    ),
    "compensation_mode": (
        ("tfs.brightness.compensation",),
        ("compensationMode",),
        ("tfs", "brightness", "compensation"),
        ("brightness", "compensation"),
    ),
    "min_luminance": (
        ("tfs.brightness.minLuminance",),
        ("minLuminance",),
        ("tfs", "brightness", "minLuminance"),
        ("brightness", "minLuminance"),
    ),
}

_MISSING = object()


def _lookup(settings: Mapping[str, Any], path: tuple[str, ...]) -> Any:
    node: Any = settings
    for part in path:
        if not isinstance(node, Mapping) or part not in node:
            return _MISSING
        node = node[part]
    return node


def _first(settings: Mapping[str, Any], option: str) -> Any:
    for path in _KEYS[option]:
        value = _lookup(settings, path)
        if value is not _MISSING:
            return value
    return _MISSING


@dataclass(frozen=True)
class HighlightConfig:
    """Options read once at the start of each pipeline invocation."""

    enable_color_highlight: bool = _DEFAULT_ENABLE
    compensation_mode: str = _DEFAULT_MODE
    min_luminance: float = _DEFAULT_MIN_LUMINANCE

    @property
    def compensate(self) -> bool:
        return self.compensation_mode == "auto"

    @classmethod
    def from_settings(cls, settings: Mapping[str, Any] | None) -> HighlightConfig:
        """Build from host settings; missing options keep their defaults."""
        if not settings:
            return cls()

        enable = _first(settings, "enable_color_highlight")
        if enable is _MISSING:
            enable = _DEFAULT_ENABLE
        elif not isinstance(enable, bool):
            raise ConfigTypeError(
                f"enableColorHighlight must be a boolean, got {type(enable).__name__}"
            )

        mode = _first(settings, "compensation_mode")
        if mode is _MISSING:
            mode = _DEFAULT_MODE
        elif not isinstance(mode, str):
            raise ConfigTypeError(
                f"brightness.compensation must be a string, got {type(mode).__name__}"
            )
        elif mode not in ("auto", "off"):
            log.warning("Unknown compensation mode %r; colors pass through unmodified", mode)

        min_lum = _first(settings, "min_luminance")
        if min_lum is _MISSING:
            min_lum = _DEFAULT_MIN_LUMINANCE
        elif isinstance(min_lum, bool) or not isinstance(min_lum, (int, float)):
            raise ConfigTypeError(
                f"brightness.minLuminance must be a number, got {type(min_lum).__name__}"
            )

        return cls(
            enable_color_highlight=enable,
            compensation_mode=mode,
            min_luminance=float(min_lum),
        )


def load_highlight_config(path: str | os.PathLike[str] | None = None) -> HighlightConfig:
    """Resolve settings: explicit path > $TFS_SETTINGS > defaults."""
    if path is None:
        env_path = os.environ.get(SETTINGS_ENV_VAR)
        if not env_path:
            return HighlightConfig()
        path = env_path
    return HighlightConfig.from_settings(load_config(path))


# ── Context manager to temporarily point $TFS_SETTINGS elsewhere ─────────────
class temp_settings_file:
    """Temporarily set the settings file via env for the block."""

    def __init__(self, path: os.PathLike[str] | str):
        self._new = str(path)
        self._old: str | None = None

    def __enter__(self) -> temp_settings_file:
        self._old = os.environ.get(SETTINGS_ENV_VAR)
        os.environ[SETTINGS_ENV_VAR] = self._new
        clear_config_cache()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._old is None:
            os.environ.pop(SETTINGS_ENV_VAR, None)
        else:
            os.environ[SETTINGS_ENV_VAR] = self._old
        clear_config_cache()
