"""Candidate ranking endpoint."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from billmatch.api.dependencies import get_model, get_settings, http_error
from billmatch.core.config import AppSettings
from billmatch.core.exceptions import BillMatchError
from billmatch.core.protocols import IModelProvider
from billmatch.models.candidates import AnalysisResult
from billmatch.models.table import TableData
from billmatch.services.candidate_analyzer import CandidateAnalyzer

logger = logging.getLogger(__name__)

router = APIRouter(tags=["analysis"])


class AnalyzeRequest(BaseModel):
    tables: list[TableData] = Field(default_factory=list)


@router.post("/analyze", response_model=AnalysisResult)
def analyze(
    request: AnalyzeRequest,
    settings: AppSettings = Depends(get_settings),
    model: IModelProvider = Depends(get_model),
) -> AnalysisResult:
    """Rank candidate billing-approved columns across the uploaded tables."""
    analyzer = CandidateAnalyzer(settings=settings, model=model)
    try:
        return analyzer.analyze(request.tables)
    except BillMatchError as exc:
        logger.error("Error analyzing CSV: %s", exc)
        raise http_error(exc) from exc
