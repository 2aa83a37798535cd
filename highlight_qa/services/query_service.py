from __future__ import annotations

import logging

from highlight_qa.providers.base import LLMProvider
from highlight_qa.providers.errors import ProviderError
from highlight_qa.schemas.query import AdapterResult
from highlight_qa.utils.prompt_builder import SYSTEM_INSTRUCTION, build_prompt


logger = logging.getLogger(__name__)

ERROR_PREFIX = "Error calling LLM API: "


class QueryService:
    """
    Relays highlighted text to the active provider and normalizes the outcome.

    Holds no per-request state; one instance serves all concurrent requests.
    """

    def __init__(self, provider: LLMProvider) -> None:
        self._provider = provider

    async def dispatch(self, query: str) -> AdapterResult:
        prompt = build_prompt(query)
        try:
            answer = await self._provider.generate(SYSTEM_INSTRUCTION, prompt)
        except ProviderError as exc:
            error_msg = f"{ERROR_PREFIX}{exc}"
            logger.error(
                error_msg,
                extra={"error_kind": exc.kind, "provider": self._provider.config.kind.value},
            )
            return AdapterResult.failed(error_msg)
        return AdapterResult.ok(answer)


async def dispatch(query: str, provider: LLMProvider) -> AdapterResult:
    """Dispatch a single query through the given provider."""
    return await QueryService(provider).dispatch(query)
