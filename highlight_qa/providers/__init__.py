"""
LLM provider abstraction layer.

All backend-specific wire formats live in provider implementations.
The query service depends only on the LLMProvider interface.
"""

from highlight_qa.providers.base import LLMProvider, ProviderConfig, ProviderKind
from highlight_qa.providers.errors import (
    ConfigurationWarning,
    InvalidResponseError,
    ProviderError,
    TransportError,
    UpstreamError,
)
from highlight_qa.providers.factory import (
    build_provider_config,
    get_provider,
    resolve_provider_kind,
)

__all__ = [
    "ConfigurationWarning",
    "InvalidResponseError",
    "LLMProvider",
    "ProviderConfig",
    "ProviderError",
    "ProviderKind",
    "TransportError",
    "UpstreamError",
    "build_provider_config",
    "get_provider",
    "resolve_provider_kind",
]
