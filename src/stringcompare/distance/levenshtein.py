# src/stringcompare/distance/levenshtein.py
"""
levenshtein.

Does: Levenshtein edit distance (unit-cost insert/delete/substitute) over a single
      rolling row reused across calls.
Returns: Levenshtein comparator.
Used by: Fuzzy matching / deduplication callers, config loader ("levenshtein").
"""

from __future__ import annotations

from stringcompare.distance.comparator import BufferedComparator

__all__ = ["Levenshtein"]

__docformat__ = "google"


class Levenshtein(BufferedComparator):
    """
    Does: Levenshtein distance, normalized to [0, 1] by default.

    Args:
        normalize: Rescale with 2·d/(len+d) (distance) or sim/(len−sim) (similarity).
        similarity: Return (len − d)/2 based similarity instead of a distance.
        initial_buffer_capacity: Initial width of the scratch row.
    """

    rows = 1

    def levenshtein(self, s: str, t: str) -> int:
        """Raw (unnormalized) Levenshtein distance."""
        return self.raw_distance(s, t)

    def _distance(self, s: str, t: str) -> int:
        m = len(s)
        row = self._buffer[0]
        for i in range(m + 1):
            row[i] = i

        p = m
        for j, tc in enumerate(t, start=1):
            diag = j - 1
            p = j
            for i in range(1, m + 1):
                p = min(p + 1, row[i] + 1, diag + (s[i - 1] != tc))
                diag = row[i]
                row[i] = p
        return p
