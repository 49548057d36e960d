# src/stringcompare/distance/lcs.py
"""
lcs.

Does: Distance len(s) + len(t) − 2·L where L comes from a single-row
      longest-common-run recurrence (carry max on mismatch, diagonal + 1 on match).
Returns: LCSDistance comparator.
Used by: Callers wanting an insert/delete-only edit distance; config loader ("lcs").
"""

from __future__ import annotations

from stringcompare.distance.comparator import BufferedComparator

__all__ = ["LCSDistance"]

__docformat__ = "google"


class LCSDistance(BufferedComparator):
    """LCS-based distance, normalized like Levenshtein."""

    rows = 1

    def lcs(self, s: str, t: str) -> int:
        """
        Does: Run the single-row recurrence and return the final carried value L.
        Returns: Integer in [0, min(len(s), len(t))].
        """
        with self._checkout(len(s) + 1):
            return self._common(s, t)

    def _common(self, s: str, t: str) -> int:
        m = len(s)
        row = self._buffer[0]
        for i in range(m + 1):
            row[i] = 0

        p = 0
        for tc in t:
            diag = 0
            p = 0
            for i in range(1, m + 1):
                if s[i - 1] != tc:
                    p = max(row[i], p)
                else:
                    p = diag + 1
                diag = row[i]
                row[i] = p
        return p

    def _distance(self, s: str, t: str) -> int:
        return len(s) + len(t) - 2 * self._common(s, t)
