from __future__ import annotations

from typing import Optional


class ConfigurationWarning(UserWarning):
    """Startup configuration is incomplete but the process can still serve."""


class ProviderError(RuntimeError):
    """Base class for every failure raised by an LLM provider."""

    kind = "provider"


class UpstreamError(ProviderError):
    """The backend answered with a non-success HTTP status."""

    kind = "upstream"

    def __init__(
        self,
        body: str,
        status_code: Optional[int] = None,
        label: str = "API error",
    ) -> None:
        super().__init__(f"{label}: {body}")
        self.body = body
        self.label = label
        self.status_code = status_code


class InvalidResponseError(ProviderError):
    """The backend answered 2xx but the body did not have the expected shape."""

    kind = "invalid_response"


class TransportError(ProviderError):
    """The outbound request could not be completed (connect, DNS, timeout)."""

    kind = "transport"
