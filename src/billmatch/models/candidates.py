"""Billing-approval candidate and confirmed mapping models."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from billmatch.models.fingerprint import ColumnFingerprint

_CAMEL = {"populate_by_name": True, "alias_generator": to_camel, "serialize_by_alias": True}


class Candidate(BaseModel):
    """A column proposed as the billing-approved field."""

    model_config = _CAMEL

    filename: str
    column: str
    confidence: float = 0.0
    reasoning: str = ""
    column_id: Optional[str] = None
    fingerprint: Optional[ColumnFingerprint] = None


class CandidateList(BaseModel):
    """Response schema expected from the ranking model."""

    candidates: list[Candidate] = Field(default_factory=list)


class AnalysisResult(BaseModel):
    """Outcome of ranking candidate columns across uploaded tables."""

    model_config = _CAMEL

    top_candidate: Optional[Candidate] = None
    all_candidates: list[Candidate] = Field(default_factory=list)
    has_high_confidence_candidates: bool = False


class FieldMapping(BaseModel):
    """A user-confirmed billing-approved column."""

    model_config = _CAMEL

    column: str
    column_id: Optional[str] = None
    filename: str
    confidence: float = 1.0
    fingerprint: Optional[ColumnFingerprint] = None
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
