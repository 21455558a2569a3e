# tfs_highlight/highlight/general/utils/__init__.py
"""

Does: Provide settings loading and lightweight debug logging utilities for the highlight stack.
Returns: Public API via load_config/load_highlight_config and debug/reload_topics.
Used by: Span builder, session adapter, CLI demo, and tests.
"""

from __future__ import annotations

from .load_config import (
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    HighlightConfig,
    clear_config_cache,
    load_config,
    load_highlight_config,
    temp_settings_file,
)
from .log import (
    debug,
    reload_topics,
    topic_enabled,
)

__all__ = [
    # Config loading
    "HighlightConfig",
    "load_config",
    "load_highlight_config",
    "clear_config_cache",
    "temp_settings_file",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
    # Logging helpers
    "debug",
    "reload_topics",
    "topic_enabled",
]
