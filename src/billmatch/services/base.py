"""Base service with common dependency wiring."""

from __future__ import annotations

from typing import Any

from billmatch.core.config import AppSettings
from billmatch.core.protocols import IModelProvider


class BaseService:
    """Common base for BillMatch services.

    Settings and the model provider are injected at construction time.
    """

    def __init__(self, *, settings: AppSettings, model: IModelProvider) -> None:
        self._settings = settings
        self._model = model

    async def health_check(self) -> dict[str, Any]:
        """Return service health status."""
        return {
            "service": self.__class__.__name__,
            "status": "healthy",
            "environment": self._settings.environment,
            "model_provider": self._model.__class__.__name__,
        }
