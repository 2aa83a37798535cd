import json
from typing import Callable, List

import httpx
import pytest

from highlight_qa.core.config import Settings
from highlight_qa.providers.base import ProviderConfig, ProviderKind


def make_settings(**overrides) -> Settings:
    values = {
        "llm_provider": "openai",
        "openai_api_key": "sk-test",
        "local_llm_url": None,
        "local_llm_model": None,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def chat_completion(content: str) -> dict:
    return {
        "id": "chatcmpl-1",
        "object": "chat.completion",
        "created": 0,
        "model": "gpt-4o",
        "choices": [
            {
                "index": 0,
                "finish_reason": "stop",
                "message": {"role": "assistant", "content": content},
            }
        ],
    }


class Upstream:
    """Simulated backend: records every request and replies with a fixed response."""

    def __init__(self, reply: Callable[[httpx.Request], httpx.Response]) -> None:
        self._reply = reply
        self.requests: List[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._reply(request)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))

    @property
    def last_json(self) -> dict:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def openai_config() -> ProviderConfig:
    return ProviderConfig(
        kind=ProviderKind.OPENAI,
        api_url="https://api.openai.com/v1/chat/completions",
        model="gpt-4o",
        api_key="sk-test",
    )


@pytest.fixture
def local_config() -> ProviderConfig:
    return ProviderConfig(
        kind=ProviderKind.LOCAL,
        api_url="http://localhost:11434/api/generate",
        model="llama3",
    )
