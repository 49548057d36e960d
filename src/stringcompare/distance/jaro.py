# src/stringcompare/distance/jaro.py
"""
jaro.

Does: Jaro similarity with a greedy window matcher (outer loop over s, first free
      equal character of t inside the window wins) and half-transposition count.
Returns: Jaro comparator.
Used by: Name matching; JaroWinkler builds on Jaro.jaro.
"""

from __future__ import annotations

from stringcompare.distance.comparator import StringComparator

__all__ = ["Jaro"]

__docformat__ = "google"


class Jaro(StringComparator):
    """
    Does: Jaro distance (1 − similarity), or the similarity itself when
          `similarity=True`. Both are bounded to [0, 1]; there is no
          normalization switch.
    """

    def __init__(self, similarity: bool = False) -> None:
        self.similarity = bool(similarity)

    @staticmethod
    def jaro(s: str, t: str) -> float:
        """
        Does: Raw Jaro similarity.
        Returns: 1.0 for two empty strings, 0.0 when nothing matches.
        """
        ssize = len(s)
        tsize = len(t)
        if ssize + tsize == 0:
            return 1.0
        window = max(1, max(ssize, tsize) // 2 - 1)

        found_s = [False] * ssize
        found_t = [False] * tsize
        matches = 0
        for i in range(ssize):
            sc = s[i]
            for j in range(tsize):
                if not found_t[j] and sc == t[j] and abs(i - j) < window:
                    matches += 1
                    found_s[i] = True
                    found_t[j] = True
                    break

        if matches == 0:
            return 0.0

        transpositions = 0
        j = 0
        for i in range(ssize):
            if found_s[i]:
                while not found_t[j]:
                    j += 1
                if s[i] != t[j]:
                    transpositions += 1
                j += 1

        m = float(matches)
        return (m / ssize + m / tsize + (m - transpositions / 2.0) / m) / 3.0

    def compare(self, s: str, t: str) -> float:
        sim = self.jaro(s, t)
        return sim if self.similarity else 1.0 - sim

    def _options(self) -> dict:
        return {"similarity": self.similarity}
