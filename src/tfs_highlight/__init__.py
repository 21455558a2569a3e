"""
tfs_highlight
=============

Does: Root package initializer for the TFS color highlighter.
Returns: Exposes the `highlight` subpackage (scanner, color math, span builder).
Used by: Editor adapters, the CLI demo, and tests importing `tfs_highlight.*`.
"""

__all__: list[str] = []
__docformat__ = "google"
