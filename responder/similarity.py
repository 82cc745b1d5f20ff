# responder/similarity.py
# Levenshtein edit distance and the [0, 1] closeness score built on it

from __future__ import annotations

from rapidfuzz.distance import Levenshtein


def edit_distance(a: str, b: str) -> int:
    """Exact Levenshtein distance (unit cost insert / delete / substitute)."""
    return Levenshtein.distance(a, b)


def similarity(a: str, b: str) -> float:
    """
    (L - d) / L where L is the longer length and d the edit distance.
    Two empty strings are identical (1.0).
    """
    longer = max(len(a), len(b))
    if longer == 0:
        return 1.0
    return (longer - edit_distance(a, b)) / longer
