# tests/test_matching_distance.py
from __future__ import annotations

import pytest
from rapidfuzz.distance import Levenshtein

from fuzzystrings.matching import distance as D

# ─────────────────────────────────────────────────────────────────────────────
# Known values
# ─────────────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "a,b,expected",
    [
        ("", "", 0),
        ("", "abc", 3),
        ("abc", "", 3),
        ("kitten", "sitting", 3),
        ("flaw", "lawn", 2),
        ("this is a test", "this is a pest", 1),
        ("test", "TEST", 4),                     # case matters at this level
    ],
)
def test_edit_distance_characters(a, b, expected):
    assert D.edit_distance(a, b) == expected


@pytest.mark.parametrize(
    "a,b,expected",
    [
        ([], [], 0),
        (["the", "quick", "fox"], ["the", "slow", "fox"], 1),
        (["a", "b", "c"], ["c", "b", "a"], 2),
        (["jumped"], ["jumped", "over", "it"], 2),
    ],
)
def test_edit_distance_tokens(a, b, expected):
    # whole tokens are the unit: "quick"→"slow" is one substitution
    assert D.edit_distance(a, b) == expected


# ─────────────────────────────────────────────────────────────────────────────
# Agreement with rapidfuzz
# ─────────────────────────────────────────────────────────────────────────────

_PAIRS = [
    ("A quick brown fox jumped over the lazy dog", "A quick brown fox jumps over the lazy dog"),
    ("A quick brown fox jumped over the lazy dog", "A quick brown fox jumped over the crazy bat"),
    ("rosegold", "rose gold"),
    ("Привет мир", "привет, мир"),
    ("abcdef", "fedcba"),
]


@pytest.mark.parametrize("a,b", _PAIRS)
def test_edit_distance_matches_reference_on_strings(a, b):
    assert D.edit_distance(a, b) == Levenshtein.distance(a, b)


@pytest.mark.parametrize("a,b", _PAIRS)
def test_edit_distance_matches_reference_on_token_lists(a, b):
    t1, t2 = a.split(), b.split()
    assert D.edit_distance(t1, t2) == Levenshtein.distance(t1, t2)


def test_edit_distance_is_symmetric():
    a, b = "saturday", "sunday"
    assert D.edit_distance(a, b) == D.edit_distance(b, a) == 3
