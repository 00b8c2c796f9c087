"""Tests for configuration defaults and env overrides."""

from __future__ import annotations

from billmatch.core.config import AppSettings, LLMConfig, MatchingConfig


def test_default_settings():
    settings = AppSettings()
    assert settings.environment == "dev"
    assert settings.llm.provider == "mock"


def test_llm_config_defaults():
    config = LLMConfig()
    assert config.provider == "mock"
    assert config.temperature == 0.1
    assert config.max_tokens == 2000


def test_matching_config_defaults():
    config = MatchingConfig()
    assert config.acceptance_threshold == 0.7
    assert config.confidence_floor == 0.5
    assert config.max_candidates == 4
    assert config.llm_sample_rows == 5


def test_env_override(monkeypatch):
    monkeypatch.setenv("BILLMATCH_LLM_PROVIDER", "azure_openai")
    monkeypatch.setenv("BILLMATCH_MATCHING_ACCEPTANCE_THRESHOLD", "0.8")
    assert LLMConfig().provider == "azure_openai"
    assert MatchingConfig().acceptance_threshold == 0.8
