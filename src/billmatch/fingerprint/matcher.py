"""Weighted fingerprint similarity and best-match search across tables."""

from __future__ import annotations

import logging
from typing import Sequence

from billmatch.fingerprint.builder import build_fingerprint
from billmatch.fingerprint.similarity import array_overlap, string_similarity
from billmatch.models.fingerprint import ColumnFingerprint, DataType, MatchResult
from billmatch.models.table import TableData

logger = logging.getLogger(__name__)

NAME_WEIGHT = 0.3
TYPE_WEIGHT = 0.2
MIXED_TYPE_WEIGHT = 0.1
SAMPLE_WEIGHT = 0.3
POSITION_WEIGHT = 0.1
UNIQUE_WEIGHT = 0.1

POSITION_SPAN = 10
ACCEPTANCE_THRESHOLD = 0.7


def _type_score(a: DataType, b: DataType) -> float:
    if a == b:
        return TYPE_WEIGHT
    if DataType.MIXED in (a, b):
        return MIXED_TYPE_WEIGHT
    return 0.0


def _unique_ratio(a: int, b: int) -> float:
    if a == b == 0:
        return 1.0
    return min(a, b) / max(a, b)


def score_match(target: ColumnFingerprint, candidate: ColumnFingerprint) -> float:
    """Composite similarity of two fingerprints in [0, 1]."""
    score = NAME_WEIGHT * string_similarity(target.name.lower(), candidate.name.lower())
    score += _type_score(target.data_type, candidate.data_type)
    score += SAMPLE_WEIGHT * array_overlap(target.sample_values, candidate.sample_values)

    position_diff = abs(target.position - candidate.position)
    score += POSITION_WEIGHT * max(0.0, 1 - position_diff / POSITION_SPAN)

    score += UNIQUE_WEIGHT * _unique_ratio(target.unique_values, candidate.unique_values)
    return min(1.0, score)


def rank_matches(target: ColumnFingerprint, tables: Sequence[TableData]) -> list[MatchResult]:
    """Score every column in every table against the target.

    Fingerprints are rebuilt from the live column values. Results are sorted
    by descending score; equal scores keep scan order.
    """
    results: list[MatchResult] = []
    for table in tables:
        for index, header in enumerate(table.headers):
            fingerprint = build_fingerprint(header, index, table.column_values(index))
            results.append(MatchResult(
                filename=table.filename,
                column=header,
                position=index,
                match_score=score_match(target, fingerprint),
                fingerprint=fingerprint,
            ))
    results.sort(key=lambda result: result.match_score, reverse=True)
    return results


def find_best_match(
    target: ColumnFingerprint,
    tables: Sequence[TableData],
    threshold: float = ACCEPTANCE_THRESHOLD,
) -> MatchResult | None:
    """Return the highest-scoring column whose score exceeds ``threshold``.

    Tables are scanned in order, columns in header order; the first column
    reaching the best score wins ties.
    """
    best: MatchResult | None = None
    for table in tables:
        for index, header in enumerate(table.headers):
            fingerprint = build_fingerprint(header, index, table.column_values(index))
            score = score_match(target, fingerprint)
            if score > threshold and (best is None or score > best.match_score):
                best = MatchResult(
                    filename=table.filename,
                    column=header,
                    position=index,
                    match_score=score,
                    fingerprint=fingerprint,
                )

    if best is None:
        logger.debug("No column matched fingerprint %s above %.2f", target.id, threshold)
    else:
        logger.debug(
            "Fingerprint %s matched %s:%s (score=%.3f)",
            target.id, best.filename, best.column, best.match_score,
        )
    return best
