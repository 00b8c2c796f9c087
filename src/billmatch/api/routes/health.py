"""Health check endpoints."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from billmatch.api.dependencies import get_model, get_settings
from billmatch.core.config import AppSettings
from billmatch.core.protocols import IModelProvider
from billmatch.services.candidate_analyzer import CandidateAnalyzer

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "healthy"}


@router.get("/ready")
async def ready(
    settings: AppSettings = Depends(get_settings),
    model: IModelProvider = Depends(get_model),
) -> dict[str, Any]:
    analyzer = CandidateAnalyzer(settings=settings, model=model)
    return {"status": "ready", "services": [await analyzer.health_check()]}
