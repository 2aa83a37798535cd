from __future__ import annotations

import logging
from typing import Optional

import httpx

from highlight_qa.core.config import Settings
from highlight_qa.providers.base import LLMProvider, ProviderConfig, ProviderKind
from highlight_qa.providers.errors import ConfigurationWarning
from highlight_qa.providers.ollama_provider import (
    DEFAULT_LOCAL_LLM_MODEL,
    DEFAULT_LOCAL_LLM_URL,
    OllamaProvider,
)
from highlight_qa.providers.openai_provider import (
    CHAT_COMPLETIONS_URL,
    OPENAI_MODEL,
    OpenAIProvider,
)

logger = logging.getLogger(__name__)

LOCAL_PROVIDER_NAMES: frozenset[str] = frozenset({"local", "llama"})


def resolve_provider_kind(provider_name: Optional[str]) -> ProviderKind:
    """Map a provider name to its kind. Unknown or empty names fall back to OpenAI."""
    name = (provider_name or "").strip().lower()
    if name in LOCAL_PROVIDER_NAMES:
        return ProviderKind.LOCAL
    return ProviderKind.OPENAI


def build_provider_config(settings: Settings) -> ProviderConfig:
    """
    Resolve the backend for the lifetime of the process.

    A missing OpenAI key is logged and tolerated; calls fail upstream later.
    """
    kind = resolve_provider_kind(settings.llm_provider)

    if kind is ProviderKind.LOCAL:
        logger.info("Using local Llama model")
        api_url = settings.local_llm_url
        if not api_url:
            logger.info("LOCAL_LLM_URL not set, using default (%s)", DEFAULT_LOCAL_LLM_URL)
            api_url = DEFAULT_LOCAL_LLM_URL
        return ProviderConfig(
            kind=kind,
            api_url=api_url,
            model=settings.local_llm_model or DEFAULT_LOCAL_LLM_MODEL,
            timeout_seconds=settings.request_timeout_seconds,
        )

    logger.info("Using OpenAI API")
    if not settings.openai_api_key:
        logger.warning(
            "OPENAI_API_KEY not set but using OpenAI provider. Please add it to your .env file.",
            extra={"category": ConfigurationWarning.__name__},
        )
    return ProviderConfig(
        kind=kind,
        api_url=CHAT_COMPLETIONS_URL,
        model=OPENAI_MODEL,
        api_key=settings.openai_api_key or "",
        timeout_seconds=settings.request_timeout_seconds,
    )


def get_provider(config: ProviderConfig, client: httpx.AsyncClient | None = None) -> LLMProvider:
    """Return the provider for the configured kind, sharing the given HTTP client."""
    if config.kind is ProviderKind.LOCAL:
        return OllamaProvider(config, client=client)
    return OpenAIProvider(config, http_client=client)
