from __future__ import annotations

import logging
from typing import Optional

import httpx
from openai import APIConnectionError, APIResponseValidationError, APIStatusError, AsyncOpenAI

from highlight_qa.providers.base import LLMProvider, ProviderConfig
from highlight_qa.providers.errors import InvalidResponseError, TransportError, UpstreamError


logger = logging.getLogger(__name__)

CHAT_COMPLETIONS_URL = "https://api.openai.com/v1/chat/completions"
OPENAI_MODEL = "gpt-4o"

# Sent in place of an unset key so the SDK still builds a client; the upstream answers 401.
MISSING_API_KEY = "missing-api-key"


def _base_url(api_url: str) -> str:
    """The SDK appends /chat/completions itself; strip it from the configured endpoint."""
    suffix = "/chat/completions"
    if api_url.endswith(suffix):
        return api_url[: -len(suffix)]
    return api_url


class OpenAIProvider(LLMProvider):
    """
    LLM provider that calls the OpenAI Chat Completions API.

    The instruction goes out as the "system" message and the prompt as the
    "user" message. A missing API key is not rejected here: the request is
    sent and the upstream 401 is reported like any other status error.
    """

    def __init__(
        self,
        config: ProviderConfig,
        http_client: Optional[httpx.AsyncClient] = None,
        client: Optional[AsyncOpenAI] = None,
    ) -> None:
        super().__init__(config)
        self._owns_client = client is None and http_client is None
        if client is not None:
            self._client = client
        else:
            self._client = AsyncOpenAI(
                api_key=config.api_key or MISSING_API_KEY,
                base_url=_base_url(config.api_url),
                timeout=config.timeout_seconds,
                max_retries=0,
                http_client=http_client,
            )

    async def close(self) -> None:
        if self._owns_client:
            await self._client.close()

    async def generate(self, instruction: str, prompt: str) -> str:
        logger.info(
            "OpenAI request: model=%s max_tokens=%s",
            self.config.model,
            self.config.max_tokens,
        )
        try:
            completion = await self._client.chat.completions.create(
                model=self.config.model,
                messages=[
                    {"role": "system", "content": instruction},
                    {"role": "user", "content": prompt},
                ],
                temperature=self.config.temperature,
                max_tokens=self.config.max_tokens,
            )
        except APIStatusError as exc:
            body = exc.response.text
            logger.error("API error: %s", body)
            raise UpstreamError(body, status_code=exc.status_code) from exc
        except APIConnectionError as exc:
            raise TransportError(str(exc)) from exc
        except (APIResponseValidationError, ValueError) as exc:
            raise InvalidResponseError(f"Invalid response from LLM API: {exc}") from exc

        # A non-JSON 2xx body comes back from the SDK as plain text.
        choices = getattr(completion, "choices", None)
        if not choices:
            raise InvalidResponseError("Invalid response from LLM API: no choices returned")

        message = getattr(choices[0], "message", None)
        content = getattr(message, "content", None)
        if not isinstance(content, str):
            raise InvalidResponseError("Invalid response from LLM API: choice has no message content")
        return content
