"""
stringcompare
=============

Does: Root package for pairwise string distances and similarities.
Returns: Re-exports comparators, tokenizers and error types from the subpackages.
Used by: All callers; `stringcompare.utils` adds config-driven construction.
"""

from .distance import (
    CharacterDifference,
    DamerauLevenshtein,
    Hamming,
    Jaccard,
    Jaro,
    JaroWinkler,
    LCSDistance,
    Levenshtein,
    StringComparator,
)
from .errors import ConcurrentUseError, ConfigError, InputError, StringCompareError
from .preprocessing import (
    DelimTokenizer,
    NGramTokenizer,
    StringCounter,
    Tokenizer,
    WhitespaceTokenizer,
)

__all__: list[str] = [
    "StringComparator",
    "Levenshtein",
    "DamerauLevenshtein",
    "LCSDistance",
    "Hamming",
    "Jaro",
    "JaroWinkler",
    "Jaccard",
    "CharacterDifference",
    "StringCounter",
    "Tokenizer",
    "DelimTokenizer",
    "WhitespaceTokenizer",
    "NGramTokenizer",
    "StringCompareError",
    "InputError",
    "ConfigError",
    "ConcurrentUseError",
]
__version__ = "0.1.0"
__docformat__ = "google"
