"""String and set similarity measures used by fingerprint matching."""

from __future__ import annotations

from typing import Iterable

from rapidfuzz.distance import Levenshtein


def levenshtein_distance(a: str, b: str) -> int:
    """Classic edit distance with unit-cost insert, delete and substitute."""
    return Levenshtein.distance(a, b)


def string_similarity(a: str, b: str) -> float:
    """Edit distance normalised by the longer string, in [0, 1].

    Case-sensitive; callers lower-case names before comparing. Two empty
    strings are identical (1.0).
    """
    return Levenshtein.normalized_similarity(a, b)


def array_overlap(a: Iterable[str], b: Iterable[str]) -> float:
    """Jaccard similarity of two collections treated as sets.

    Two empty collections have no overlap (0.0) rather than an undefined ratio.
    """
    set_a, set_b = set(a), set(b)
    union = set_a | set_b
    if not union:
        return 0.0
    return len(set_a & set_b) / len(union)
