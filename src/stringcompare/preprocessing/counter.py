# src/stringcompare/preprocessing/counter.py
"""
counter.

Does: String multiset (token bag) stored as a token → count mapping, with
      intersection/union cardinalities used by set-overlap metrics.
Returns: StringCounter.
Used by: Tokenizers (output type) and the Jaccard comparator.
"""

from __future__ import annotations

from typing import Iterable, Iterator

__all__ = ["StringCounter"]

__docformat__ = "google"


class StringCounter:
    """
    Does: Bag of string tokens. A token present in the mapping always has count ≥ 1;
          removing its last occurrence drops the entry.
    """

    __slots__ = ("_counts",)

    def __init__(self) -> None:
        self._counts: dict[str, int] = {}

    @classmethod
    def from_list(cls, tokens: Iterable[str]) -> StringCounter:
        """Does: Build a counter holding one occurrence per item of `tokens`."""
        result = cls()
        for token in tokens:
            result.insert(token)
        return result

    # ── Mutation ─────────────────────────────────────────────────────────────
    def insert(self, token: str) -> None:
        """Insert one occurrence of `token`."""
        self._counts[token] = self._counts.get(token, 0) + 1

    def remove(self, token: str) -> None:
        """Remove one occurrence of `token`; unknown tokens are ignored."""
        count = self._counts.get(token)
        if count is None:
            return
        if count <= 1:
            del self._counts[token]
        else:
            self._counts[token] = count - 1

    # ── Cardinalities ────────────────────────────────────────────────────────
    def intersection_count(self, other: StringCounter) -> int:
        """
        Does: Size of the multiset intersection (sum of per-token minimum counts).
        Returns: Integer ≥ 0. Iterates the smaller of the two mappings.
        """
        small, large = self._counts, other._counts
        if len(small) > len(large):
            small, large = large, small
        total = 0
        for token, count in small.items():
            other_count = large.get(token)
            if other_count is not None:
                total += min(count, other_count)
        return total

    def union_count(self, other: StringCounter) -> int:
        """Size of the multiset union."""
        return self.total() + other.total() - self.intersection_count(other)

    def total(self) -> int:
        """Number of tokens, counting multiplicity."""
        return sum(self._counts.values())

    def unique(self) -> int:
        """Number of distinct tokens."""
        return len(self._counts)

    # ── Views ────────────────────────────────────────────────────────────────
    def elements(self) -> set[str]:
        return set(self._counts)

    def as_dict(self) -> dict[str, int]:
        """Counts keyed by token, in sorted token order."""
        return {token: self._counts[token] for token in sorted(self._counts)}

    def count(self, token: str) -> int:
        return self._counts.get(token, 0)

    def __len__(self) -> int:
        return len(self._counts)

    def __contains__(self, token: object) -> bool:
        return token in self._counts

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._counts))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StringCounter):
            return NotImplemented
        return self._counts == other._counts

    def __repr__(self) -> str:
        return f"StringCounter({self.as_dict()!r})"
