"""FastAPI application with lifespan and router mounting."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from billmatch.api.routes import analysis, fingerprints, health, mappings
from billmatch.core.config import AppSettings
from billmatch.core.logging_config import configure_logging
from billmatch.core.protocols import IModelProvider
from billmatch.model_providers import create_model_provider


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Initialize and tear down application resources."""
    if app.state.settings is None:
        app.state.settings = AppSettings()
    configure_logging(app.state.settings.log_level)
    if app.state.model is None:
        app.state.model = create_model_provider(app.state.settings)
    yield


def create_app(
    settings: AppSettings | None = None, model: IModelProvider | None = None
) -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="BillMatch Billing Field Detection",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.model = model
    app.include_router(health.router)
    app.include_router(fingerprints.router)
    app.include_router(analysis.router)
    app.include_router(mappings.router, prefix="/mappings")
    return app
