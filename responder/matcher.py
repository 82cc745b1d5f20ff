# responder/matcher.py
# ✅ Slang/typo normalization of both sides
# ✅ Whitespace-insensitive edit-distance scoring
# ✅ Accept threshold (strictly greater), earliest entry wins ties
# ✅ Suggestions for unmatched input

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, List, Optional, Sequence, Tuple

import config
from responder.corpus import CorpusEntry, CorpusStore
from responder.normalizer import compress, normalize
from responder.similarity import similarity


# -------------------------
# COMPARISON FORM
# -------------------------
def prepare(text: str) -> str:
    """lowercase -> normalize -> strip ALL whitespace"""
    return compress(normalize((text or "").strip().lower()))


def _entry_fields(entry: Any) -> Optional[Tuple[str, str]]:
    if isinstance(entry, Mapping):
        prompt, response = entry.get("prompt"), entry.get("response")
    else:
        prompt = getattr(entry, "prompt", None)
        response = getattr(entry, "response", None)
    if not isinstance(prompt, str) or not isinstance(response, str):
        return None
    return prompt, response


def score_corpus(raw_message: str, corpus: Sequence[Any]) -> List[Tuple[Any, float]]:
    """Score every usable entry against the message, in corpus order."""
    msg = prepare(raw_message)
    scored: List[Tuple[Any, float]] = []
    for i, entry in enumerate(corpus or ()):
        fields = _entry_fields(entry)
        if fields is None:
            print(f"WARNING: Skipping malformed corpus entry #{i}: {entry!r}")
            continue
        scored.append((entry, similarity(prepare(fields[0]), msg)))
    return scored


def find_best_match(
    raw_message: str,
    corpus: Sequence[Any],
    threshold: float = config.MATCH_THRESHOLD,
) -> Optional[Any]:
    """Best entry scoring strictly above `threshold`, or None."""
    best, _ = _best(score_corpus(raw_message, corpus), threshold)
    return best


def _best(scored: List[Tuple[Any, float]], threshold: float) -> Tuple[Optional[Any], float]:
    best = None
    best_score = 0.0
    for entry, score in scored:
        # strict ">" keeps the earliest entry among equal scores
        if score > best_score and score > threshold:
            best, best_score = entry, score
    return best, best_score


# -------------------------
# MATCHER
# -------------------------
class IntentMatcher:
    def __init__(self, store: CorpusStore, threshold: float = config.MATCH_THRESHOLD):
        self.store = store
        self.threshold = float(threshold)

    def match(self, user_text: str) -> Tuple[Optional[CorpusEntry], float]:
        """(entry, score) of the accepted entry, or (None, best score seen)."""
        scored = score_corpus(user_text, self.store.entries)
        best, best_score = _best(scored, self.threshold)
        if best is None:
            return None, max((s for _, s in scored), default=0.0)
        return best, best_score

    def top_suggestions(
        self,
        user_text: str,
        limit: int = config.SUGGESTION_LIMIT,
        floor: float = config.SUGGESTION_FLOOR,
    ) -> List[str]:
        scored = score_corpus(user_text, self.store.entries)
        # sorted() is stable, so equal scores stay in corpus order
        ranked = sorted(scored, key=lambda x: x[1], reverse=True)

        out, seen = [], set()
        for entry, score in ranked:
            if score < floor:
                break
            prompt = _entry_fields(entry)[0]
            if prompt in seen:
                continue
            seen.add(prompt)
            out.append(prompt)
            if len(out) >= limit:
                break
        return out
