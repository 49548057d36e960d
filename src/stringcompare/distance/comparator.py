# src/stringcompare/distance/comparator.py
"""
comparator.

Does: Comparison contract shared by every string metric: `compare(s, t)` plus the
      derived batch operations `elementwise` and `pairwise`, the length-based
      normalization helpers, and the scratch-buffer base for edit distances.
Returns: StringComparator, BufferedComparator, normalize_length_sum, normalize_length_max.
Used by: All metrics in stringcompare.distance.
"""

from __future__ import annotations

import copy
import logging
import threading
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Iterator, List, Sequence

from stringcompare.errors import ConcurrentUseError, ConfigError, InputError

__all__ = [
    "Matrix",
    "StringComparator",
    "BufferedComparator",
    "normalize_length_sum",
    "normalize_length_max",
]

__docformat__ = "google"

log = logging.getLogger(__name__)

Matrix = List[List[float]]


# ─────────────────────────────────────────────────────────────────────────────
# Normalization
# ─────────────────────────────────────────────────────────────────────────────

def normalize_length_sum(dist: float, length: float, *, normalize: bool, similarity: bool) -> float:
    """
    Does: Transform a raw distance measured against `length = |s| + |t|`.

          distance:   2·d / (len + d)            when normalized, else d
          similarity: sim = (len − d) / 2, then sim / (len − sim) when normalized
    Returns: Float. `length` must be > 0.
    """
    if similarity:
        sim = (length - dist) / 2.0
        if normalize:
            sim = sim / (length - sim)
        return sim
    if normalize:
        return 2.0 * dist / (length + dist)
    return float(dist)


def normalize_length_max(dist: float, length: float, *, normalize: bool, similarity: bool) -> float:
    """
    Does: Transform a raw distance measured against `length = max(|s|, |t|)`.
          similarity is `len − d`; normalization divides by `len`.
    Returns: Float. `length` must be > 0.
    """
    result = float(dist)
    if similarity:
        result = length - result
    if normalize:
        result = result / length
    return result


# ─────────────────────────────────────────────────────────────────────────────
# Contract
# ─────────────────────────────────────────────────────────────────────────────

class StringComparator(ABC):
    """
    Does: Base class for pairwise string metrics.

    Subclasses implement `compare`. Batch operations are defined once here in
    terms of `compare`, so every metric gets them for free.
    """

    @abstractmethod
    def compare(self, s: str, t: str) -> float:
        """Score one pair of strings under the instance configuration."""

    def __call__(self, s: str, t: str) -> float:
        return self.compare(s, t)

    def elementwise(self, l1: Sequence[str], l2: Sequence[str]) -> List[float]:
        """
        Does: Compare `l1[i]` with `l2[i]` for every i.
        Returns: List of len(l1) scores.
        Raises: InputError if the sequences differ in length.
        """
        if len(l1) != len(l2):
            raise InputError(
                f"Lists should be of the same size (got {len(l1)} and {len(l2)})."
            )
        return [self.compare(s, t) for s, t in zip(l1, l2)]

    def pairwise(self, l1: Sequence[str], l2: Sequence[str]) -> Matrix:
        """
        Does: Compare every item of `l1` against every item of `l2`.
        Returns: len(l1) × len(l2) matrix as a list of rows.
        """
        return [[self.compare(s, t) for t in l2] for s in l1]

    def clone(self) -> StringComparator:
        """New instance with the same configuration and no shared mutable state."""
        return copy.deepcopy(self)

    def __repr__(self) -> str:
        opts = ", ".join(f"{k}={v!r}" for k, v in self._options().items())
        return f"{type(self).__name__}({opts})"

    def _options(self) -> dict:
        return {}


class BufferedComparator(StringComparator):
    """
    Does: Edit-distance base owning a scratch buffer of `rows` integer rows.

    The buffer grows to the largest `len(s) + 1` seen and never shrinks. Its
    content is rebuilt at the start of each call, so results only depend on the
    strings and configuration. An instance must not be used from two threads at
    once: a concurrent entry raises ConcurrentUseError instead of racing on the
    buffer. Use `clone()` to get one instance per thread.
    """

    rows: int = 1

    def __init__(
        self,
        normalize: bool = True,
        similarity: bool = False,
        initial_buffer_capacity: int = 100,
    ) -> None:
        if isinstance(initial_buffer_capacity, bool) or not isinstance(initial_buffer_capacity, int):
            raise ConfigError(
                f"initial_buffer_capacity must be an int, got {type(initial_buffer_capacity).__name__}"
            )
        if initial_buffer_capacity < 0:
            raise ConfigError("initial_buffer_capacity must be >= 0")
        self.normalize = bool(normalize)
        self.similarity = bool(similarity)
        self.initial_buffer_capacity = initial_buffer_capacity
        self._buffer: List[List[int]] = [[0] * initial_buffer_capacity for _ in range(self.rows)]
        self._guard = threading.Lock()

    def __getstate__(self) -> dict:
        # Locks can't be copied or pickled; restored instances get their own.
        state = self.__dict__.copy()
        del state["_guard"]
        return state

    def __setstate__(self, state: dict) -> None:
        self.__dict__.update(state)
        self._guard = threading.Lock()

    @property
    def buffer_capacity(self) -> int:
        return len(self._buffer[0])

    def _reserve(self, size: int) -> None:
        capacity = self.buffer_capacity
        if size <= capacity:
            return
        log.debug("%s: growing scratch buffer %d → %d", type(self).__name__, capacity, size)
        extra = size - capacity
        for row in self._buffer:
            row.extend([0] * extra)

    @abstractmethod
    def _distance(self, s: str, t: str) -> int:
        """Raw distance; may assume the buffer holds at least len(s) + 1 cells."""

    @contextmanager
    def _checkout(self, size: int) -> Iterator[List[List[int]]]:
        """Hold the buffer exclusively, grown to at least `size` cells per row."""
        if not self._guard.acquire(blocking=False):
            raise ConcurrentUseError(
                f"{type(self).__name__} instance is already in use; use one instance per thread"
            )
        try:
            self._reserve(size)
            yield self._buffer
        finally:
            self._guard.release()

    def raw_distance(self, s: str, t: str) -> int:
        """Raw (unnormalized) integer distance."""
        with self._checkout(len(s) + 1):
            return self._distance(s, t)

    def compare(self, s: str, t: str) -> float:
        length = len(s) + len(t)
        if length == 0:
            return float(self.similarity)
        dist = self.raw_distance(s, t)
        return normalize_length_sum(
            dist, length, normalize=self.normalize, similarity=self.similarity
        )

    def clone(self) -> BufferedComparator:
        return type(self)(**self._options())

    def _options(self) -> dict:
        return {
            "normalize": self.normalize,
            "similarity": self.similarity,
            "initial_buffer_capacity": self.initial_buffer_capacity,
        }
