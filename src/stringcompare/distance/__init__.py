# src/stringcompare/distance/__init__.py
"""
distance.

Does: Facade exposing every string comparator behind the shared
StringComparator contract (compare / elementwise / pairwise).

Returns: Edit-distance family (Levenshtein, DamerauLevenshtein, LCSDistance, Hamming),
phonetic family (Jaro, JaroWinkler) and set-overlap family (Jaccard, CharacterDifference).
Used by: Fuzzy search, deduplication and record-linkage callers.
"""

from __future__ import annotations

# ── Contract ─────────────────────────────────────────────────────────────────
from .comparator import (
    BufferedComparator,
    StringComparator,
    normalize_length_max,
    normalize_length_sum,
)

# ── Edit distances ───────────────────────────────────────────────────────────
from .dameraulevenshtein import DamerauLevenshtein
from .hamming import Hamming
from .lcs import LCSDistance
from .levenshtein import Levenshtein

# ── Phonetic ─────────────────────────────────────────────────────────────────
from .jaro import Jaro
from .jarowinkler import JaroWinkler

# ── Set overlap ──────────────────────────────────────────────────────────────
from .characterdifference import CharacterDifference
from .jaccard import Jaccard

__all__ = [
    # Contract
    "StringComparator",
    "BufferedComparator",
    "normalize_length_sum",
    "normalize_length_max",
    # Edit distances
    "Levenshtein",
    "DamerauLevenshtein",
    "LCSDistance",
    "Hamming",
    # Phonetic
    "Jaro",
    "JaroWinkler",
    # Set overlap
    "Jaccard",
    "CharacterDifference",
]

__docformat__ = "google"
