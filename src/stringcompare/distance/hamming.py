# src/stringcompare/distance/hamming.py
"""
hamming.

Does: Hamming distance: positions that differ over the shorter string, plus the
      length difference. Normalized against the longer length.
Returns: Hamming comparator.
Used by: Fixed-width code comparisons; config loader ("hamming").
"""

from __future__ import annotations

from stringcompare.distance.comparator import StringComparator, normalize_length_max

__all__ = ["Hamming"]

__docformat__ = "google"


class Hamming(StringComparator):
    """
    Does: Hamming distance.

    With `normalize` the distance becomes d / max(|s|, |t|). The unnormalized
    similarity is max(|s|, |t|) − d; the normalized similarity is 1 minus the
    normalized distance.
    """

    def __init__(self, normalize: bool = True, similarity: bool = False) -> None:
        self.normalize = bool(normalize)
        self.similarity = bool(similarity)

    @staticmethod
    def hamming(s: str, t: str) -> int:
        """Raw Hamming distance."""
        shortest = min(len(s), len(t))
        distance = sum(1 for i in range(shortest) if s[i] != t[i])
        return distance + max(len(s), len(t)) - shortest

    def compare(self, s: str, t: str) -> float:
        length = max(len(s), len(t))
        if length == 0:
            return float(self.similarity)
        return normalize_length_max(
            self.hamming(s, t), length, normalize=self.normalize, similarity=self.similarity
        )

    def _options(self) -> dict:
        return {"normalize": self.normalize, "similarity": self.similarity}
