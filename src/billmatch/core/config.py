"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings


class LLMConfig(BaseSettings):
    """LLM provider configuration."""

    model_config = {"env_prefix": "BILLMATCH_LLM_"}

    provider: Literal["mock", "azure_openai"] = "mock"
    azure_endpoint: str = ""
    api_key: str = ""
    api_version: str = "2024-08-01-preview"
    deployment: str = "gpt-4o-mini"
    temperature: float = 0.1
    max_tokens: int = 2000


class MatchingConfig(BaseSettings):
    """Thresholds for column matching and candidate ranking."""

    model_config = {"env_prefix": "BILLMATCH_MATCHING_"}

    acceptance_threshold: float = 0.7  # fingerprint match score must exceed this
    confidence_floor: float = 0.5  # LLM candidates below this are discarded
    max_candidates: int = 4
    llm_sample_rows: int = 5
    preview_rows: int = 10


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "BILLMATCH_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"

    llm: LLMConfig = LLMConfig()
    matching: MatchingConfig = MatchingConfig()
