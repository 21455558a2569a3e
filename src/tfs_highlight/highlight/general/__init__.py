"""
general.

Does: Language-agnostic helpers of the highlighter: lexical scanning, token
      registry, completion ranking, settings and debug logging.
"""

from __future__ import annotations

__all__: list[str] = []
__docformat__ = "google"
