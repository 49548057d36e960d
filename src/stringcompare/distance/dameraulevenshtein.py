# src/stringcompare/distance/dameraulevenshtein.py
"""
dameraulevenshtein.

Does: Damerau-Levenshtein distance (Levenshtein + adjacent transposition, the
      "optimal string alignment" variant) over a rolling 3-row buffer.
Returns: DamerauLevenshtein comparator.
Used by: Callers needing typo-tolerant edit distance; config loader ("dameraulevenshtein").
"""

from __future__ import annotations

from stringcompare.distance.comparator import BufferedComparator

__all__ = ["DamerauLevenshtein"]

__docformat__ = "google"


class DamerauLevenshtein(BufferedComparator):
    """
    Does: Damerau-Levenshtein distance with the same normalization as Levenshtein.

    Row j of the DP lives in buffer row j % 3; the transposition step reads
    row (j − 2) % 3, two columns back.
    """

    rows = 3

    def dameraulevenshtein(self, s: str, t: str) -> int:
        """Raw (unnormalized) Damerau-Levenshtein distance."""
        return self.raw_distance(s, t)

    def _distance(self, s: str, t: str) -> int:
        m = len(s)
        n = len(t)
        dmat = self._buffer
        first = dmat[0]
        for i in range(m + 1):
            first[i] = i

        for j in range(1, n + 1):
            prev2 = dmat[(j - 2) % 3]
            prev = dmat[(j - 1) % 3]
            cur = dmat[j % 3]
            prev[0] = j - 1
            cur[0] = j
            tc = t[j - 1]
            for i in range(1, m + 1):
                sc = s[i - 1]
                cost = 0 if sc == tc else 1
                value = min(cur[i - 1] + 1, prev[i] + 1, prev[i - 1] + cost)
                if i > 1 and j > 1 and sc == t[j - 2] and s[i - 2] == tc:
                    value = min(value, prev2[i - 2] + 1)
                cur[i] = value

        return dmat[n % 3][m]
