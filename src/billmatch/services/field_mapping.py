"""Confirmation of the billing-approved column and later re-identification."""

from __future__ import annotations

import logging
from typing import Sequence

from billmatch.core.exceptions import ColumnNotFoundError
from billmatch.fingerprint.builder import build_fingerprint
from billmatch.fingerprint.matcher import ACCEPTANCE_THRESHOLD, find_best_match
from billmatch.models.candidates import Candidate, FieldMapping
from billmatch.models.fingerprint import ColumnFingerprint, MatchResult
from billmatch.models.table import TableData

logger = logging.getLogger(__name__)


def _lookup_fingerprint(
    tables: Sequence[TableData], filename: str, column: str
) -> ColumnFingerprint | None:
    for table in tables:
        if table.filename != filename:
            continue
        index = table.column_index(column)
        if index != -1:
            return build_fingerprint(column, index, table.column_values(index))
    return None


def confirm_candidate(
    candidate: Candidate, tables: Sequence[TableData] | None = None
) -> FieldMapping:
    """Record a candidate the user accepted as the billing-approved column.

    A candidate without a fingerprint gets one computed from ``tables``.
    """
    fingerprint = candidate.fingerprint
    if fingerprint is None and tables:
        fingerprint = _lookup_fingerprint(tables, candidate.filename, candidate.column)

    mapping = FieldMapping(
        column=candidate.column,
        column_id=fingerprint.id if fingerprint else candidate.column_id,
        filename=candidate.filename,
        confidence=candidate.confidence,
        fingerprint=fingerprint,
    )
    logger.info("Confirmed %s:%s as billing approved", mapping.filename, mapping.column)
    return mapping


def select_manual_column(tables: Sequence[TableData], filename: str, column: str) -> FieldMapping:
    """Record a column picked by hand when no candidate was accepted.

    Raises:
        ColumnNotFoundError: if the file or column is not among ``tables``.
    """
    fingerprint = _lookup_fingerprint(tables, filename, column)
    if fingerprint is None:
        raise ColumnNotFoundError(filename, column)

    logger.info("Manually selected %s:%s as billing approved", filename, column)
    return FieldMapping(
        column=column,
        column_id=fingerprint.id,
        filename=filename,
        confidence=1.0,
        fingerprint=fingerprint,
    )


def relocate_mapping(
    mapping: FieldMapping,
    tables: Sequence[TableData],
    threshold: float = ACCEPTANCE_THRESHOLD,
) -> MatchResult | None:
    """Find the confirmed column again in a new set of tables."""
    if mapping.fingerprint is None:
        logger.warning("Mapping for %s:%s has no fingerprint", mapping.filename, mapping.column)
        return None
    return find_best_match(mapping.fingerprint, tables, threshold)
