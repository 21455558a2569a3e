# src/tfs_highlight/highlight/general/token/scanner.py
"""
scanner.py
==========

Does: Single forward pass over a TFS document marking comment and string regions
      (line comments, non-nesting block comments, backslash-escaped strings).
Returns: scan_exclusions(text) -> ordered [(start, end)], plus ExclusionIndex for
         O(log n) "is this offset excluded?" checks.
Used by: Span builder (token + state spans) so matches inside comments/strings
         never seed a highlight.
"""

from __future__ import annotations

from bisect import bisect_right

__all__ = ["ExclusionRange", "scan_exclusions", "ExclusionIndex"]
__docformat__ = "google"

ExclusionRange = tuple[int, int]


def scan_exclusions(text: str) -> list[ExclusionRange]:
    """
    Does: Scan left to right; at each cursor try `//`, then `/*`, then `"`.
          Unterminated block comments and strings run to end of input.
    Returns: Non-overlapping half-open ranges in scan order.
    """
    ranges: list[ExclusionRange] = []
    n = len(text)
    i = 0
    while i < n:
        two = text[i:i + 2]

        if two == "//":
            start = i
            end = text.find("\n", i + 2)
            i = n if end == -1 else end
            ranges.append((start, i))
            continue

        if two == "/*":
            start = i
            end = text.find("*/", i + 2)
            i = n if end == -1 else end + 2
            ranges.append((start, i))
            continue

        if text[i] == '"':
            start = i
            i += 1
            while i < n:
                ch = text[i]
                if ch == "\\":
                    i += 2
                    continue
                i += 1
                if ch == '"':
                    break
            # a trailing backslash may step past the end
            i = min(i, n)
            ranges.append((start, i))
            continue

        i += 1
    return ranges


class ExclusionIndex:
    """Binary-search lookup over the ranges produced by `scan_exclusions`."""

    __slots__ = ("ranges", "_starts")

    def __init__(self, ranges: list[ExclusionRange]):
        self.ranges = ranges
        self._starts = [s for s, _ in ranges]

    @classmethod
    def from_text(cls, text: str) -> ExclusionIndex:
        return cls(scan_exclusions(text))

    def is_excluded(self, offset: int) -> bool:
        """Does: True when `offset` lies inside any [start, end) range."""
        pos = bisect_right(self._starts, offset) - 1
        if pos < 0:
            return False
        start, end = self.ranges[pos]
        return start <= offset < end

    def __contains__(self, offset: int) -> bool:
        return self.is_excluded(offset)

    def __len__(self) -> int:
        return len(self.ranges)
