from __future__ import annotations

import pytest
from rapidfuzz.distance import Levenshtein

from responder.similarity import edit_distance, similarity

PAIRS = [
    ("kitten", "sitting"),
    ("flaw", "lawn"),
    ("hello", "helo"),
    ("howareyou", "hru"),
    ("", "abc"),
    ("abc", ""),
    ("intention", "execution"),
    ("what'sup", "whatsup?"),
]


def test_boundaries():
    assert similarity("", "") == 1.0
    assert similarity("", "abc") == 0.0
    assert similarity("abc", "") == 0.0


def test_known_distances():
    assert edit_distance("kitten", "sitting") == 3
    assert edit_distance("flaw", "lawn") == 2
    assert similarity("hello", "helo") == pytest.approx(0.8)


@pytest.mark.parametrize("a,b", PAIRS)
def test_symmetric_and_bounded(a, b):
    assert similarity(a, b) == similarity(b, a)
    assert 0.0 <= similarity(a, b) <= 1.0


@pytest.mark.parametrize("s", ["", "a", "hello", "how are you"])
def test_identity(s):
    assert similarity(s, s) == 1.0


@pytest.mark.parametrize("a,b", PAIRS + [("", "")])
def test_score_matches_normalized_levenshtein(a, b):
    assert similarity(a, b) == pytest.approx(Levenshtein.normalized_similarity(a, b))
