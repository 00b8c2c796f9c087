"""Column fingerprinting and fingerprint matching."""

from __future__ import annotations

from billmatch.fingerprint.builder import (
    build_fingerprint,
    compute_fingerprint_id,
    fingerprint_table,
    verify_fingerprint,
)
from billmatch.fingerprint.matcher import find_best_match, rank_matches, score_match
from billmatch.fingerprint.similarity import array_overlap, levenshtein_distance, string_similarity
from billmatch.fingerprint.type_classifier import classify_values

__all__ = [
    "array_overlap",
    "build_fingerprint",
    "classify_values",
    "compute_fingerprint_id",
    "find_best_match",
    "fingerprint_table",
    "levenshtein_distance",
    "rank_matches",
    "score_match",
    "string_similarity",
    "verify_fingerprint",
]
