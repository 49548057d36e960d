# src/stringcompare/preprocessing/tokenizer.py
"""
tokenizer.

Does: Turn a sentence into a StringCounter. One Tokenizer type covers the closed
      set of behaviours: no-op, delimiter split, whitespace split, n-gram window.
Returns: Tokenizer, TokenizerKind and the DelimTokenizer / WhitespaceTokenizer /
         NGramTokenizer constructors.
Used by: Jaccard comparator and the declarative config loader.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional

from stringcompare.preprocessing.counter import StringCounter
from stringcompare.errors import ConfigError

__all__ = [
    "TokenizerKind",
    "Tokenizer",
    "DelimTokenizer",
    "WhitespaceTokenizer",
    "NGramTokenizer",
]

__docformat__ = "google"


class TokenizerKind(str, Enum):
    NOOP = "noop"
    DELIM = "delim"
    WHITESPACE = "whitespace"
    NGRAM = "ngram"


@dataclass(frozen=True)
class Tokenizer:
    """
    Does: Tokenize sentences into token bags according to `kind`.

    The default instance is the no-op tokenizer (always returns an empty bag).
    Use the classmethods (or the module-level aliases) to build the others:

        >>> Tokenizer.whitespace().tokenize("a b a").as_dict()
        {'a': 2, 'b': 1}
        >>> Tokenizer.ngram(2).tokenize("abc").as_dict()
        {'ab': 1, 'bc': 1}
    """

    kind: TokenizerKind = TokenizerKind.NOOP
    delim: Optional[str] = None
    n: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", TokenizerKind(self.kind))
        if self.kind is TokenizerKind.WHITESPACE:
            if self.delim not in (None, " "):
                raise ConfigError(
                    f"Whitespace tokenizer splits on ' ' only, got delim={self.delim!r}"
                )
            object.__setattr__(self, "delim", " ")
        if self.kind in (TokenizerKind.DELIM, TokenizerKind.WHITESPACE) and not self.delim:
            raise ConfigError("Delimiter is empty.")

    # ── Constructors ─────────────────────────────────────────────────────────
    @classmethod
    def delimited(cls, delim: str) -> Tokenizer:
        """Split on every occurrence of `delim` (must be non-empty)."""
        return cls(TokenizerKind.DELIM, delim=delim)

    @classmethod
    def whitespace(cls) -> Tokenizer:
        """Split on single spaces."""
        return cls(TokenizerKind.WHITESPACE, delim=" ")

    @classmethod
    def ngram(cls, n: int) -> Tokenizer:
        """Sliding window of `n` characters; n ≤ 0 yields no tokens."""
        return cls(TokenizerKind.NGRAM, n=int(n))

    # ── Tokenizing ───────────────────────────────────────────────────────────
    def tokenize(self, sentence: str) -> StringCounter:
        if self.kind is TokenizerKind.NGRAM:
            return _ngram_split(sentence, self.n)
        if self.kind in (TokenizerKind.DELIM, TokenizerKind.WHITESPACE):
            return _delim_split(sentence, self.delim)  # type: ignore[arg-type]
        return StringCounter()

    def __call__(self, sentence: str) -> StringCounter:
        return self.tokenize(sentence)

    def batch_tokenize(self, sentences: Iterable[str]) -> List[StringCounter]:
        return [self.tokenize(s) for s in sentences]


def _delim_split(sentence: str, delim: str) -> StringCounter:
    """
    Does: Insert each non-empty span between successive `delim` occurrences,
          then the trailing span if non-empty.
    """
    result = StringCounter()
    if not sentence:
        return result

    k = len(delim)
    pos = 0
    match = sentence.find(delim, pos)
    while match != -1:
        if match != pos:
            result.insert(sentence[pos:match])
        pos = match + k
        match = sentence.find(delim, pos)
    if pos < len(sentence):
        result.insert(sentence[pos:])
    return result


def _ngram_split(sentence: str, n: int) -> StringCounter:
    result = StringCounter()
    if n <= 0 or n > len(sentence):
        return result
    for i in range(len(sentence) - n + 1):
        result.insert(sentence[i:i + n])
    return result


# Constructor-style aliases
DelimTokenizer = Tokenizer.delimited
WhitespaceTokenizer = Tokenizer.whitespace
NGramTokenizer = Tokenizer.ngram
