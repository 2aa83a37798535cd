from __future__ import annotations

import logging
from typing import Any, Dict

import httpx

from highlight_qa.providers.base import LLMProvider, ProviderConfig
from highlight_qa.providers.errors import InvalidResponseError, TransportError, UpstreamError
from highlight_qa.utils.prompt_builder import build_local_prompt

logger = logging.getLogger(__name__)

DEFAULT_LOCAL_LLM_URL = "http://localhost:11434/api/generate"
DEFAULT_LOCAL_LLM_MODEL = "llama3"


class OllamaProvider(LLMProvider):
    """LLM provider that calls a local Ollama-compatible /api/generate endpoint."""

    def __init__(self, config: ProviderConfig, client: httpx.AsyncClient | None = None) -> None:
        super().__init__(config)
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=config.timeout_seconds)

    async def close(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def generate(self, instruction: str, prompt: str) -> str:
        payload: Dict[str, Any] = {
            "model": self.config.model,
            "prompt": build_local_prompt(instruction, prompt),
            "stream": False,
            "options": {
                "temperature": self.config.temperature,
                "num_predict": self.config.max_tokens,
            },
        }
        logger.info("Calling local LLM at: %s", self.config.api_url)
        try:
            response = await self._client.post(self.config.api_url, json=payload)
        except httpx.RequestError as exc:
            raise TransportError(f"{type(exc).__name__}: {exc}") from exc

        if not response.is_success:
            logger.error("Local LLM API error: %s", response.text)
            raise UpstreamError(
                response.text,
                status_code=response.status_code,
                label="Local LLM API error",
            )

        try:
            data = response.json()
        except ValueError as exc:
            raise InvalidResponseError(f"Invalid response from LLM API: {exc}") from exc

        raw_output = data.get("response") if isinstance(data, dict) else None
        if not isinstance(raw_output, str):
            raise InvalidResponseError("Invalid response from LLM API: missing field `response`")
        return raw_output
