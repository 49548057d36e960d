# tests/test_distance_edit.py
"""Tests for the edit-distance family: Levenshtein, DamerauLevenshtein, LCSDistance, Hamming."""

from __future__ import annotations

import copy
import itertools
import pickle
import threading

import pytest
from rapidfuzz.distance import Indel as RFIndel
from rapidfuzz.distance import Levenshtein as RFLevenshtein

from stringcompare.distance import (
    DamerauLevenshtein,
    Hamming,
    LCSDistance,
    Levenshtein,
)
from stringcompare.errors import ConcurrentUseError, ConfigError

WORDS = [
    "",
    "a",
    "ab",
    "ba",
    "abc",
    "kitten",
    "sitting",
    "saturday",
    "sunday",
    "rosettacode",
    "raisethysword",
    "MARTHA",
    "MARHTA",
    "aaaa",
]

LENGTH_SUM_METRICS = [Levenshtein, DamerauLevenshtein, LCSDistance]


# ─────────────────────────────────────────────────────────────────────────────
# Golden values
# ─────────────────────────────────────────────────────────────────────────────

def test_levenshtein_kitten_sitting():
    cmp = Levenshtein(normalize=False)
    assert cmp.compare("kitten", "sitting") == 3.0
    assert cmp.levenshtein("kitten", "sitting") == 3


@pytest.mark.parametrize(
    "s, t, expected",
    [
        ("", "", 0),
        ("", "abc", 3),
        ("abc", "", 3),
        ("saturday", "sunday", 3),
        ("flaw", "lawn", 2),
        ("ca", "ac", 2),
    ],
)
def test_levenshtein_raw(s, t, expected):
    assert Levenshtein().levenshtein(s, t) == expected


def test_transposition_advantage():
    assert DamerauLevenshtein(normalize=False).compare("ca", "ac") == 1.0
    assert Levenshtein(normalize=False).compare("ca", "ac") == 2.0


@pytest.mark.parametrize(
    "s, t, expected",
    [
        ("ca", "abc", 3),  # restricted edit distance: no edits inside a transposed pair
        ("abcdef", "abdcef", 1),
        ("", "ab", 2),
        ("ab", "", 2),
        ("kitten", "sitting", 3),
    ],
)
def test_dameraulevenshtein_raw(s, t, expected):
    assert DamerauLevenshtein().dameraulevenshtein(s, t) == expected


@pytest.mark.parametrize(
    "s, t, common",
    [
        ("kitten", "sitting", 4),
        ("ABCBDAB", "BDCABA", 4),
        ("abcd", "acbd", 3),
        ("abc", "abc", 3),
        ("abc", "xyz", 0),
        ("", "abc", 0),
        ("abc", "", 0),
    ],
)
def test_lcs_pinned_values(s, t, common):
    # Pinned outputs of the single-row recurrence, not a derived property.
    cmp = LCSDistance(normalize=False)
    assert cmp.lcs(s, t) == common
    assert cmp.compare(s, t) == len(s) + len(t) - 2 * common


@pytest.mark.parametrize(
    "s, t, expected",
    [
        ("karolin", "kathrin", 3),
        ("abc", "abcde", 2),
        ("", "abc", 3),
        ("abc", "abc", 0),
    ],
)
def test_hamming_raw(s, t, expected):
    assert Hamming.hamming(s, t) == expected


# ─────────────────────────────────────────────────────────────────────────────
# Normalization
# ─────────────────────────────────────────────────────────────────────────────

def test_levenshtein_normalization_modes():
    # len = 13, d = 3
    assert Levenshtein().compare("kitten", "sitting") == pytest.approx(6 / 16)
    assert Levenshtein(normalize=False, similarity=True).compare("kitten", "sitting") == 5.0
    assert Levenshtein(similarity=True).compare("kitten", "sitting") == pytest.approx(5 / 8)


def test_hamming_normalization_modes():
    assert Hamming().compare("karolin", "kathrin") == pytest.approx(3 / 7)
    assert Hamming(normalize=False).compare("karolin", "kathrin") == 3.0
    assert Hamming(normalize=False, similarity=True).compare("karolin", "kathrin") == 4.0
    assert Hamming(similarity=True).compare("karolin", "kathrin") == pytest.approx(4 / 7)


@pytest.mark.parametrize("metric", LENGTH_SUM_METRICS + [Hamming])
@pytest.mark.parametrize("normalize", [True, False])
def test_empty_inputs_return_similarity_flag(metric, normalize):
    assert metric(normalize=normalize).compare("", "") == 0.0
    assert metric(normalize=normalize, similarity=True).compare("", "") == 1.0


def test_empty_inputs_leave_buffer_untouched():
    cmp = Levenshtein(initial_buffer_capacity=0)
    cmp.compare("", "")
    assert cmp.buffer_capacity == 0


@pytest.mark.parametrize("metric", LENGTH_SUM_METRICS + [Hamming])
def test_identity(metric):
    for s in WORDS:
        assert metric().compare(s, s) == 0.0
        if s:
            assert metric(similarity=True).compare(s, s) == pytest.approx(1.0)


@pytest.mark.parametrize("metric", LENGTH_SUM_METRICS + [Hamming])
@pytest.mark.parametrize("similarity", [True, False])
def test_normalized_outputs_in_unit_interval(metric, similarity):
    cmp = metric(similarity=similarity)
    for s, t in itertools.product(WORDS, repeat=2):
        assert 0.0 <= cmp.compare(s, t) <= 1.0


@pytest.mark.parametrize("metric", LENGTH_SUM_METRICS + [Hamming])
def test_symmetry(metric):
    cmp = metric(normalize=False)
    for s, t in itertools.product(WORDS, repeat=2):
        assert cmp.compare(s, t) == cmp.compare(t, s)


def test_levenshtein_triangle_inequality():
    cmp = Levenshtein(normalize=False)
    for s, t, u in itertools.product(WORDS, repeat=3):
        assert cmp.compare(s, u) <= cmp.compare(s, t) + cmp.compare(t, u)


def test_dameraulevenshtein_never_exceeds_levenshtein():
    lev = Levenshtein(normalize=False)
    dl = DamerauLevenshtein(normalize=False)
    for s, t in itertools.product(WORDS, repeat=2):
        assert dl.compare(s, t) <= lev.compare(s, t)


# ─────────────────────────────────────────────────────────────────────────────
# Cross-check against rapidfuzz
# ─────────────────────────────────────────────────────────────────────────────

def test_levenshtein_agrees_with_rapidfuzz():
    cmp = Levenshtein()
    for s, t in itertools.product(WORDS, repeat=2):
        assert cmp.levenshtein(s, t) == RFLevenshtein.distance(s, t)


def test_lcs_distance_agrees_with_rapidfuzz_indel():
    cmp = LCSDistance(normalize=False)
    for s, t in itertools.product(WORDS, repeat=2):
        if s or t:
            assert cmp.compare(s, t) == RFIndel.distance(s, t)


# ─────────────────────────────────────────────────────────────────────────────
# Scratch buffer
# ─────────────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize("metric", LENGTH_SUM_METRICS)
def test_buffer_grows_and_never_shrinks(metric):
    cmp = metric(initial_buffer_capacity=2)
    long_s = "x" * 250
    cmp.compare(long_s, "xy")
    assert cmp.buffer_capacity >= len(long_s) + 1
    grown = cmp.buffer_capacity
    cmp.compare("a", "b")
    assert cmp.buffer_capacity == grown


@pytest.mark.parametrize("metric", LENGTH_SUM_METRICS)
def test_results_independent_of_call_history(metric):
    reused = metric(normalize=False, initial_buffer_capacity=1)
    for s, t in itertools.product(WORDS, repeat=2):
        fresh = metric(normalize=False)
        assert reused.compare(s, t) == fresh.compare(s, t)


@pytest.mark.parametrize("capacity", [-1, 2.5, True, "10"])
def test_invalid_buffer_capacity(capacity):
    with pytest.raises(ConfigError):
        Levenshtein(initial_buffer_capacity=capacity)


class _Stalling(Levenshtein):
    """Levenshtein that parks inside the buffer section until released."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.entered = threading.Event()
        self.release = threading.Event()

    def _distance(self, s, t):
        self.entered.set()
        self.release.wait(timeout=5)
        return super()._distance(s, t)


def test_concurrent_entry_is_rejected():
    cmp = _Stalling(normalize=False)
    results = []
    worker = threading.Thread(target=lambda: results.append(cmp.compare("kitten", "sitting")))
    worker.start()
    try:
        assert cmp.entered.wait(timeout=5)
        with pytest.raises(ConcurrentUseError):
            cmp.compare("abc", "abd")
    finally:
        cmp.release.set()
        worker.join(timeout=5)
    assert results == [3.0]
    # usable again once the first call has returned
    assert cmp.compare("abc", "abd") == 1.0


# ─────────────────────────────────────────────────────────────────────────────
# Copying / pickling
# ─────────────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize("metric", LENGTH_SUM_METRICS)
def test_deepcopy_keeps_config_and_gets_own_lock(metric):
    cmp = metric(normalize=False, initial_buffer_capacity=3)
    cmp.compare("rosettacode", "raisethysword")
    twin = copy.deepcopy(cmp)
    assert twin._guard is not cmp._guard
    assert twin._buffer is not cmp._buffer
    assert twin.buffer_capacity == cmp.buffer_capacity
    assert twin.compare("kitten", "sitting") == cmp.compare("kitten", "sitting")


@pytest.mark.parametrize("metric", LENGTH_SUM_METRICS)
def test_pickle_round_trip(metric):
    cmp = metric(similarity=True, initial_buffer_capacity=2)
    cmp.compare("saturday", "sunday")
    restored = pickle.loads(pickle.dumps(cmp))
    assert type(restored) is metric
    assert repr(restored) == repr(cmp)
    assert restored.buffer_capacity == cmp.buffer_capacity
    assert restored.compare("saturday", "sunday") == cmp.compare("saturday", "sunday")
    # the restored lock is live
    with restored._checkout(1):
        pass


@pytest.mark.parametrize("metric", LENGTH_SUM_METRICS)
def test_clone_owns_its_buffer(metric):
    cmp = metric(normalize=False, similarity=True, initial_buffer_capacity=7)
    twin = cmp.clone()
    assert type(twin) is metric
    assert twin is not cmp
    assert twin._buffer is not cmp._buffer
    assert (twin.normalize, twin.similarity, twin.initial_buffer_capacity) == (False, True, 7)
    assert twin.compare("kitten", "sitting") == cmp.compare("kitten", "sitting")
