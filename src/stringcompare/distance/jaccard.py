# src/stringcompare/distance/jaccard.py
"""
jaccard.

Does: Jaccard overlap of the token bags produced by a Tokenizer.
Returns: Jaccard comparator.
Used by: Token-level deduplication; config loader ("jaccard").
"""

from __future__ import annotations

from typing import Optional

from stringcompare.distance.comparator import StringComparator
from stringcompare.preprocessing.tokenizer import Tokenizer

__all__ = ["Jaccard"]

__docformat__ = "google"


class Jaccard(StringComparator):
    """
    Does: |A ∩ B| / |A ∪ B| over token multisets.

    `normalize` and `similarity` are stored for interface parity with the other
    metrics but do not change the returned value, which is always the raw
    overlap ratio in [0, 1]. Two empty token bags score 1.0.

    Args:
        tokenizer: Tokenizer applied to both inputs. Defaults to whitespace splitting.
    """

    def __init__(
        self,
        tokenizer: Optional[Tokenizer] = None,
        normalize: bool = True,
        similarity: bool = False,
    ) -> None:
        self.tokenizer = tokenizer if tokenizer is not None else Tokenizer.whitespace()
        self.normalize = bool(normalize)
        self.similarity = bool(similarity)

    def compare(self, s: str, t: str) -> float:
        a = self.tokenizer(s)
        b = self.tokenizer(t)
        union = a.union_count(b)
        if union == 0:
            return 1.0
        return a.intersection_count(b) / union

    def _options(self) -> dict:
        return {
            "tokenizer": self.tokenizer,
            "normalize": self.normalize,
            "similarity": self.similarity,
        }
