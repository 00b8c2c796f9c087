"""Shared test doubles — re-export the mock model provider."""

from __future__ import annotations

from billmatch.model_providers.mock_provider import MockModelProvider

__all__ = ["MockModelProvider"]
