"""Mock model provider for local development and testing.

Returns canned responses. No real LLM calls.
"""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from billmatch.core.exceptions import InvalidModelResponseError

T = TypeVar("T")


class MockModelProvider:
    """IModelProvider implementation that returns deterministic mock responses."""

    def __init__(self, default_response: str = "Mock LLM response") -> None:
        self._default_response = default_response
        self._canned_responses: dict[str, str] = {}
        self.calls: list[list[dict[str, str]]] = []

    def set_response(self, prompt_contains: str, response: str) -> None:
        """Register a canned response for prompts containing a keyword."""
        self._canned_responses[prompt_contains] = response

    def _lookup(self, messages: list[dict[str, str]]) -> str | None:
        last_content = messages[-1].get("content", "") if messages else ""
        for keyword, response in self._canned_responses.items():
            if keyword in last_content:
                return response
        return None

    def chat(self, messages: list[dict[str, str]], **kwargs: Any) -> str:
        self.calls.append(messages)
        response = self._lookup(messages)
        return self._default_response if response is None else response

    def structured_output(
        self, messages: list[dict[str, str]], response_model: type[T], **kwargs: Any
    ) -> T:
        """Validate the canned response into the model, or return a default instance."""
        self.calls.append(messages)
        response = self._lookup(messages)
        if response is None:
            return response_model()  # type: ignore[call-arg]
        if not issubclass(response_model, BaseModel):
            raise TypeError(f"{response_model!r} is not a pydantic model")
        try:
            return response_model.model_validate_json(response)  # type: ignore[return-value]
        except ValidationError as exc:
            raise InvalidModelResponseError(
                f"Canned response does not fit {response_model.__name__}: {exc}", response
            ) from exc
