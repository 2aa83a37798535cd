from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass


class ProviderKind(str, enum.Enum):
    OPENAI = "openai"
    LOCAL = "local"


@dataclass(frozen=True)
class ProviderConfig:
    """
    Process-wide backend settings, resolved once at startup.

    Shared read-only by every request handler.
    """

    kind: ProviderKind
    api_url: str
    model: str
    api_key: str = ""
    temperature: float = 0.7
    max_tokens: int = 500
    timeout_seconds: float = 120.0


class LLMProvider(ABC):
    """
    Interface for the backends a query can be relayed to.

    Implementations own the wire format of one upstream API: how the
    instruction and prompt are laid out in the request, whether it is
    authenticated, and where the answer sits in the response.
    """

    def __init__(self, config: ProviderConfig) -> None:
        self.config = config

    @abstractmethod
    async def generate(self, instruction: str, prompt: str) -> str:
        """
        Send one instruction/prompt pair upstream and return the answer text.

        Raises a ProviderError subclass on any failure; never returns an
        empty placeholder in place of an error.
        """
        ...

    async def close(self) -> None:
        """Release provider-owned resources. The shared HTTP client is not owned."""
        return None
