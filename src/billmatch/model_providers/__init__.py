"""Pluggable LLM providers behind the IModelProvider protocol."""

from __future__ import annotations

from billmatch.core.config import AppSettings
from billmatch.core.protocols import IModelProvider
from billmatch.model_providers.mock_provider import MockModelProvider


def create_model_provider(settings: AppSettings | None = None) -> IModelProvider:
    """Create the model provider selected by ``settings.llm.provider``."""
    if settings is None:
        settings = AppSettings()

    if settings.llm.provider == "azure_openai":
        from billmatch.model_providers.azure_openai_provider import AzureOpenAIProvider

        return AzureOpenAIProvider(settings.llm)

    return MockModelProvider()
