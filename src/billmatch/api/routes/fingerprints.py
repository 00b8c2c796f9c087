"""Table parsing, fingerprinting and fingerprint matching endpoints."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from billmatch.api.dependencies import get_settings, http_error
from billmatch.core.config import AppSettings
from billmatch.core.exceptions import TableParseError
from billmatch.fingerprint import build_fingerprint, find_best_match, rank_matches, verify_fingerprint
from billmatch.models.fingerprint import ColumnFingerprint, MatchResult
from billmatch.models.table import ParsedTable, TableData
from billmatch.parsing.csv_parser import parse_csv_text

router = APIRouter(tags=["fingerprints"])


class CsvUpload(BaseModel):
    filename: str
    content: str


class FingerprintRequest(BaseModel):
    name: str
    position: int = Field(ge=0)
    values: list[Optional[str]] = Field(default_factory=list)


class MatchRequest(BaseModel):
    target: ColumnFingerprint
    tables: list[TableData] = Field(default_factory=list)


class MatchResponse(BaseModel):
    match: Optional[MatchResult] = None
    ranking: list[MatchResult] = Field(default_factory=list)


@router.post("/tables", response_model=ParsedTable)
async def parse_table(
    upload: CsvUpload, settings: AppSettings = Depends(get_settings)
) -> ParsedTable:
    """Parse CSV text and fingerprint its columns."""
    try:
        return parse_csv_text(upload.filename, upload.content, settings.matching.preview_rows)
    except TableParseError as exc:
        raise http_error(exc) from exc


@router.post("/fingerprints", response_model=ColumnFingerprint)
async def create_fingerprint(request: FingerprintRequest) -> ColumnFingerprint:
    return build_fingerprint(request.name, request.position, request.values)


@router.post("/fingerprints/verify")
async def check_fingerprint(fingerprint: ColumnFingerprint) -> dict[str, bool]:
    """Report whether a stored fingerprint still hashes to its own id."""
    return {"valid": verify_fingerprint(fingerprint)}


@router.post("/match", response_model=MatchResponse)
async def match_fingerprint(
    request: MatchRequest, settings: AppSettings = Depends(get_settings)
) -> MatchResponse:
    """Re-identify a fingerprinted column among the supplied tables."""
    threshold = settings.matching.acceptance_threshold
    return MatchResponse(
        match=find_best_match(request.target, request.tables, threshold),
        ranking=rank_matches(request.target, request.tables),
    )
