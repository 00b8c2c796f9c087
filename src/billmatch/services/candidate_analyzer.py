"""CandidateAnalyzer: ranks columns that may hold billing approval status."""

from __future__ import annotations

import json
import logging
from typing import Any, Sequence

from billmatch.core.exceptions import NoTablesError
from billmatch.fingerprint.builder import fingerprint_table
from billmatch.models.candidates import AnalysisResult, Candidate, CandidateList
from billmatch.models.fingerprint import ColumnFingerprint
from billmatch.models.table import TableData
from billmatch.services.base import BaseService

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are an expert at analyzing CSV data to identify billing and payment-related "
    "fields. Always respond with valid JSON only."
)

ANALYSIS_INSTRUCTIONS = """\
Find the column that represents "billing approved": a field indicating whether a \
creator is ready to be paid.

Return up to {max_candidates} candidates, each a DIFFERENT column. Favour boolean or \
status columns (yes/no, true/false, approved/rejected/pending) whose names mention \
approval, billing, payment, status or readiness. Identifiers, counts, roles, dates, \
names and amounts are not approval fields and should get confidence below 0.1.

Confidence is a number between 0 and 1.

Respond with a JSON object of the form:
{{"candidates": [{{"filename": "...", "column": "...", "confidence": 0.95, \
"reasoning": "..."}}]}}

Files to analyze:
{files}
"""


class CandidateAnalyzer(BaseService):
    """Asks the model provider to rank candidate columns across uploaded tables."""

    def build_messages(
        self, tables: Sequence[TableData], fingerprints: list[list[ColumnFingerprint]]
    ) -> list[dict[str, str]]:
        matching = self._settings.matching
        files: list[dict[str, Any]] = [
            {
                "filename": table.filename,
                "headers": table.headers,
                "sampleData": table.rows[: matching.llm_sample_rows],
                "columnFingerprints": [fp.model_dump(mode="json") for fp in table_fingerprints],
            }
            for table, table_fingerprints in zip(tables, fingerprints)
        ]
        prompt = ANALYSIS_INSTRUCTIONS.format(
            max_candidates=matching.max_candidates,
            files=json.dumps(files, indent=2),
        )
        return [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": prompt},
        ]

    def analyze(self, tables: Sequence[TableData]) -> AnalysisResult:
        """Rank candidate columns and attach the top candidate's fingerprint.

        Raises:
            NoTablesError: if ``tables`` is empty.
            ModelProviderError: if the model call fails or returns invalid JSON.
        """
        if not tables:
            raise NoTablesError("No CSV data provided")

        fingerprints = [fingerprint_table(table) for table in tables]
        messages = self.build_messages(tables, fingerprints)
        by_file: dict[str, list[ColumnFingerprint]] = {}
        for table, table_fingerprints in zip(tables, fingerprints):
            by_file.setdefault(table.filename, table_fingerprints)
        response = self._model.structured_output(
            messages, CandidateList, temperature=self._settings.llm.temperature
        )

        candidates = self._dedupe(response.candidates, tables)
        _log_candidates(candidates)

        floor = self._settings.matching.confidence_floor
        accepted = [c for c in candidates if c.confidence >= floor]
        accepted = [self._with_fingerprint(c, by_file) for c in accepted]

        return AnalysisResult(
            top_candidate=accepted[0] if accepted else None,
            all_candidates=accepted,
            has_high_confidence_candidates=bool(accepted),
        )

    def _dedupe(self, candidates: list[Candidate], tables: Sequence[TableData]) -> list[Candidate]:
        """Drop repeated, unknown and out-of-range columns, keeping the model's order."""
        known = {(table.filename, header) for table in tables for header in table.headers}
        seen: set[tuple[str, str]] = set()
        unique: list[Candidate] = []
        for candidate in candidates:
            key = (candidate.filename, candidate.column)
            if key in seen:
                continue
            if not 0.0 <= candidate.confidence <= 1.0:
                logger.warning(
                    "Model gave %r in %r confidence %s outside [0, 1]; ignoring",
                    candidate.column, candidate.filename, candidate.confidence,
                )
                continue
            if key not in known:
                logger.warning(
                    "Model proposed unknown column %r in %r; ignoring",
                    candidate.column, candidate.filename,
                )
                continue
            seen.add(key)
            unique.append(candidate)
        return unique[: self._settings.matching.max_candidates]

    @staticmethod
    def _with_fingerprint(
        candidate: Candidate, fingerprints: dict[str, list[ColumnFingerprint]]
    ) -> Candidate:
        for fingerprint in fingerprints.get(candidate.filename, []):
            if fingerprint.name == candidate.column:
                return candidate.model_copy(
                    update={"column_id": fingerprint.id, "fingerprint": fingerprint}
                )
        return candidate


def _log_candidates(candidates: list[Candidate]) -> None:
    if not candidates:
        logger.info("No candidates found in model response")
        return
    for rank, candidate in enumerate(candidates, start=1):
        logger.info(
            "Candidate %d: %s - %r confidence=%d%% (%s)",
            rank, candidate.filename, candidate.column,
            round(candidate.confidence * 100), candidate.reasoning,
        )
