# src/stringcompare/distance/jarowinkler.py
"""
jarowinkler.

Does: Jaro-Winkler: Jaro similarity boosted by the shared prefix (up to 4 chars).
Returns: JaroWinkler comparator.
Used by: Name/person matching; config loader ("jarowinkler").
"""

from __future__ import annotations

from stringcompare.distance.comparator import StringComparator
from stringcompare.distance.jaro import Jaro
from stringcompare.errors import ConfigError

__all__ = ["JaroWinkler", "MAX_PREFIX", "DEFAULT_PREFIX_SCALE"]

__docformat__ = "google"

MAX_PREFIX = 4
DEFAULT_PREFIX_SCALE = 0.1


class JaroWinkler(StringComparator):
    """
    Does: Jaro-Winkler distance (1 − jw), or jw when `similarity=True`.

    Args:
        similarity: Return the similarity rather than the distance.
        p: Prefix scaling factor; must lie in [0, 0.25] to keep scores in [0, 1].
    """

    def __init__(self, similarity: bool = False, p: float = DEFAULT_PREFIX_SCALE) -> None:
        if not 0.0 <= p <= 1.0 / MAX_PREFIX:
            raise ConfigError(f"Prefix scale p must be within [0, 0.25], got {p!r}")
        self.similarity = bool(similarity)
        self.p = float(p)

    def jarowinkler(self, s: str, t: str) -> float:
        """Raw Jaro-Winkler similarity."""
        ell = 0
        for a, b in zip(s[:MAX_PREFIX], t[:MAX_PREFIX]):
            if a != b:
                break
            ell += 1

        sim = Jaro.jaro(s, t)
        return sim + ell * self.p * (1.0 - sim)

    def compare(self, s: str, t: str) -> float:
        sim = self.jarowinkler(s, t)
        return sim if self.similarity else 1.0 - sim

    def _options(self) -> dict:
        return {"similarity": self.similarity, "p": self.p}
