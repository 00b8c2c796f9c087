"""Mapping confirmation, manual selection and relocation endpoints."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from billmatch.api.dependencies import get_settings, http_error
from billmatch.core.config import AppSettings
from billmatch.core.exceptions import ColumnNotFoundError
from billmatch.models.candidates import Candidate, FieldMapping
from billmatch.models.fingerprint import MatchResult
from billmatch.models.table import TableData
from billmatch.services.field_mapping import confirm_candidate, relocate_mapping, select_manual_column

router = APIRouter(tags=["mappings"])


class ConfirmRequest(BaseModel):
    candidate: Candidate
    tables: list[TableData] = Field(default_factory=list)


class ManualSelectionRequest(BaseModel):
    filename: str
    column: str
    tables: list[TableData] = Field(default_factory=list)


class RelocateRequest(BaseModel):
    mapping: FieldMapping
    tables: list[TableData] = Field(default_factory=list)


class RelocateResponse(BaseModel):
    match: Optional[MatchResult] = None


@router.post("/confirm", response_model=FieldMapping)
async def confirm(request: ConfirmRequest) -> FieldMapping:
    return confirm_candidate(request.candidate, request.tables)


@router.post("/manual", response_model=FieldMapping)
async def manual(request: ManualSelectionRequest) -> FieldMapping:
    try:
        return select_manual_column(request.tables, request.filename, request.column)
    except ColumnNotFoundError as exc:
        raise http_error(exc) from exc


@router.post("/relocate", response_model=RelocateResponse)
async def relocate(
    request: RelocateRequest, settings: AppSettings = Depends(get_settings)
) -> RelocateResponse:
    """Find a previously confirmed column in a new set of tables."""
    match = relocate_mapping(
        request.mapping, request.tables, settings.matching.acceptance_threshold
    )
    return RelocateResponse(match=match)
