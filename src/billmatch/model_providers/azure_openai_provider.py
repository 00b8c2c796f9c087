"""Azure OpenAI model provider.

Chat completions against a named deployment, JSON response format for
structured output.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

import openai
from openai import AzureOpenAI
from pydantic import BaseModel, ValidationError

from billmatch.core.config import LLMConfig
from billmatch.core.exceptions import (
    DeploymentNotFoundError,
    InvalidModelResponseError,
    ModelAuthenticationError,
    ModelProviderError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class AzureOpenAIProvider:
    """Production IModelProvider backed by an Azure OpenAI deployment."""

    def __init__(self, config: LLMConfig, client: Any = None) -> None:
        self._config = config
        logger.info(
            "Azure OpenAI config: endpoint=%s api_key=%s api_version=%s deployment=%s",
            "Set" if config.azure_endpoint else "Missing",
            "Set" if config.api_key else "Missing",
            config.api_version or "Missing",
            config.deployment or "Missing",
        )
        self._client = client or AzureOpenAI(
            api_key=config.api_key,
            azure_endpoint=config.azure_endpoint,
            api_version=config.api_version,
        )

    def chat(self, messages: list[dict[str, str]], **kwargs: Any) -> str:
        params: dict[str, Any] = {
            "model": self._config.deployment,
            "messages": messages,
            "temperature": kwargs.pop("temperature", self._config.temperature),
            "max_tokens": kwargs.pop("max_tokens", self._config.max_tokens),
        }
        params.update(kwargs)
        try:
            completion = self._client.chat.completions.create(**params)
        except openai.AuthenticationError as exc:
            raise ModelAuthenticationError(
                "Azure OpenAI authentication failed; check the API key and endpoint"
            ) from exc
        except openai.NotFoundError as exc:
            raise DeploymentNotFoundError(self._config.deployment) from exc
        except openai.OpenAIError as exc:
            raise ModelProviderError(f"Azure OpenAI request failed: {exc}") from exc

        content = completion.choices[0].message.content if completion.choices else None
        if not content:
            raise ModelProviderError("No response content from Azure OpenAI")
        return content

    def structured_output(
        self, messages: list[dict[str, str]], response_model: type[T], **kwargs: Any
    ) -> T:
        if not issubclass(response_model, BaseModel):
            raise TypeError(f"{response_model!r} is not a pydantic model")
        content = self.chat(messages, response_format={"type": "json_object"}, **kwargs)
        try:
            return response_model.model_validate_json(content)  # type: ignore[return-value]
        except ValidationError as exc:
            logger.error("Failed to parse model response: %s", content)
            raise InvalidModelResponseError(
                f"Invalid response format from Azure OpenAI: {exc.error_count()} error(s)",
                content,
            ) from exc
