"""
preprocessing.

Does: Facade for token bags and tokenizers.
Returns: StringCounter, Tokenizer, TokenizerKind, DelimTokenizer, WhitespaceTokenizer, NGramTokenizer.
Used by: Set-overlap metrics (Jaccard) and config loading.
"""

from __future__ import annotations

from .counter import StringCounter
from .tokenizer import (
    DelimTokenizer,
    NGramTokenizer,
    Tokenizer,
    TokenizerKind,
    WhitespaceTokenizer,
)

__all__ = [
    "StringCounter",
    "Tokenizer",
    "TokenizerKind",
    "DelimTokenizer",
    "WhitespaceTokenizer",
    "NGramTokenizer",
]

__docformat__ = "google"
