"""Request-scoped accessors for application state and error translation."""

from __future__ import annotations

from fastapi import HTTPException, Request

from billmatch.core.config import AppSettings
from billmatch.core.exceptions import (
    BillMatchError,
    ColumnNotFoundError,
    DeploymentNotFoundError,
    InvalidModelResponseError,
    ModelAuthenticationError,
    ModelProviderError,
    NoTablesError,
    TableParseError,
)
from billmatch.core.protocols import IModelProvider


def get_settings(request: Request) -> AppSettings:
    return request.app.state.settings


def get_model(request: Request) -> IModelProvider:
    return request.app.state.model


def http_error(exc: BillMatchError) -> HTTPException:
    """Translate a BillMatch error into an HTTP error with a JSON detail body."""
    if isinstance(exc, (TableParseError, NoTablesError)):
        status, error = 400, str(exc)
    elif isinstance(exc, ColumnNotFoundError):
        status, error = 404, str(exc)
    elif isinstance(exc, DeploymentNotFoundError):
        status, error = 400, "Model deployment not found; check BILLMATCH_LLM_DEPLOYMENT"
    elif isinstance(exc, ModelAuthenticationError):
        status, error = 401, "Model provider authentication failed; check API key and endpoint"
    elif isinstance(exc, InvalidModelResponseError):
        status, error = 502, "Invalid response format from model provider"
    elif isinstance(exc, ModelProviderError):
        status, error = 502, "Model provider request failed"
    else:
        status, error = 500, "Failed to analyze CSV files"
    return HTTPException(status_code=status, detail={"error": error, "details": str(exc)})
