from __future__ import annotations

import pytest

from responder.corpus import CorpusEntry, CorpusStore
from responder.matcher import IntentMatcher, find_best_match, prepare, score_corpus

HELLO = CorpusEntry(prompt="hello", response="hi there")


def test_prepare_is_whitespace_insensitive():
    assert prepare("  How   Are You ") == "howareyou"
    assert prepare("h r u") == "howareyou"


def test_threshold_accepts_close_input():
    assert find_best_match("helo", [HELLO]) == HELLO


def test_threshold_rejects_far_input():
    assert find_best_match("xyz", [HELLO]) is None


def test_score_exactly_at_threshold_is_rejected():
    corpus = [CorpusEntry(prompt="abcd", response="r")]
    assert score_corpus("abxy", corpus)[0][1] == 0.5
    assert find_best_match("abxy", corpus) is None


def test_tie_keeps_earliest_entry():
    first = CorpusEntry(prompt="hell", response="first")
    second = CorpusEntry(prompt="help", response="second")
    assert find_best_match("helo", [first, second]) is first
    assert find_best_match("helo", [second, first]) is second


def test_slang_matches_canonical_prompt():
    corpus = [HELLO, CorpusEntry(prompt="how are you", response="great")]
    assert find_best_match("h r u", corpus).response == "great"


def test_empty_or_missing_corpus_never_matches():
    assert find_best_match("hello", []) is None
    assert find_best_match("hello", None) is None


def test_malformed_entries_are_skipped(capsys):
    good = {"prompt": "hello", "response": "hi"}
    corpus = [{"prompt": "hello"}, None, good]
    assert find_best_match("hello", corpus) is good
    out = capsys.readouterr().out
    assert out.count("WARNING") == 2


def test_intent_matcher_before_corpus_is_loaded():
    matcher = IntentMatcher(CorpusStore())
    assert matcher.match("hello") == (None, 0.0)
    assert matcher.top_suggestions("hello") == []


def test_intent_matcher_returns_score():
    matcher = IntentMatcher(CorpusStore([HELLO]))
    entry, score = matcher.match("helo")
    assert entry == HELLO
    assert score == pytest.approx(0.8)


def test_intent_matcher_reports_best_rejected_score():
    matcher = IntentMatcher(CorpusStore([CorpusEntry(prompt="abcd", response="r")]))
    assert matcher.match("abxy") == (None, 0.5)


def test_top_suggestions_ranked_and_limited():
    store = CorpusStore([
        CorpusEntry(prompt="goodbye", response="bye"),
        CorpusEntry(prompt="help me", response="sure"),
        HELLO,
        CorpusEntry(prompt="hello", response="duplicate prompt"),
    ])
    matcher = IntentMatcher(store)
    assert matcher.top_suggestions("hel") == ["hello", "help me"]
    assert matcher.top_suggestions("hel", limit=1) == ["hello"]
