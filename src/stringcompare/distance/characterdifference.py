# src/stringcompare/distance/characterdifference.py
"""
characterdifference.

Does: Distance between the character multisets of two strings:
      len(s) + len(t) − 2·common, where `common` is the sorted merge-scan
      intersection size. Order of characters is ignored.
Returns: CharacterDifference comparator.
Used by: Anagram-tolerant matching; config loader ("characterdifference").
"""

from __future__ import annotations

from stringcompare.distance.comparator import StringComparator, normalize_length_sum

__all__ = ["CharacterDifference"]

__docformat__ = "google"


class CharacterDifference(StringComparator):

    def __init__(self, normalize: bool = True, similarity: bool = False) -> None:
        self.normalize = bool(normalize)
        self.similarity = bool(similarity)

    @staticmethod
    def commoncharacters(s: str, t: str) -> int:
        """Size of the multiset intersection of the characters of s and t."""
        a = sorted(s)
        b = sorted(t)
        i = j = common = 0
        while i < len(a) and j < len(b):
            if a[i] < b[j]:
                i += 1
            elif b[j] < a[i]:
                j += 1
            else:
                common += 1
                i += 1
                j += 1
        return common

    def compare(self, s: str, t: str) -> float:
        length = len(s) + len(t)
        if length == 0:
            return float(self.similarity)
        dist = length - 2 * self.commoncharacters(s, t)
        return normalize_length_sum(
            dist, length, normalize=self.normalize, similarity=self.similarity
        )

    def _options(self) -> dict:
        return {"normalize": self.normalize, "similarity": self.similarity}
