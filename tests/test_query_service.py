import asyncio

import httpx

from highlight_qa.providers.errors import InvalidResponseError
from highlight_qa.providers.base import LLMProvider
from highlight_qa.providers.ollama_provider import OllamaProvider
from highlight_qa.providers.openai_provider import OpenAIProvider
from highlight_qa.schemas.query import AdapterResult
from highlight_qa.services.query_service import QueryService, dispatch
from highlight_qa.utils.prompt_builder import SYSTEM_INSTRUCTION

from conftest import Upstream, chat_completion


class RecordingProvider(LLMProvider):
    def __init__(self, config, answer="fine", error=None):
        super().__init__(config)
        self.answer = answer
        self.error = error
        self.calls = []

    async def generate(self, instruction, prompt):
        self.calls.append((instruction, prompt))
        if self.error is not None:
            raise self.error
        return self.answer


def _dispatch_openai(config, upstream, text):
    async def run():
        async with upstream.client() as client:
            return await dispatch(text, OpenAIProvider(config, http_client=client))

    return asyncio.run(run())


def _dispatch_local(config, upstream, text):
    async def run():
        async with upstream.client() as client:
            return await dispatch(text, OllamaProvider(config, client=client))

    return asyncio.run(run())


def test_prompt_and_instruction_passed_to_provider(openai_config, local_config):
    for config in (openai_config, local_config):
        provider = RecordingProvider(config)
        asyncio.run(QueryService(provider).dispatch("Why is the sky blue?"))
        assert provider.calls == [(SYSTEM_INSTRUCTION, "Questions:\nWhy is the sky blue?")]


def test_chat_success(openai_config):
    upstream = Upstream(lambda r: httpx.Response(200, json=chat_completion("Paris is the capital of France.")))
    result = _dispatch_openai(openai_config, upstream, "Capital of France?")
    assert result == AdapterResult.ok("Paris is the capital of France.")
    assert result.to_payload() == {"response": "Paris is the capital of France."}


def test_chat_empty_choices(openai_config):
    upstream = Upstream(lambda r: httpx.Response(200, json={"choices": []}))
    result = _dispatch_openai(openai_config, upstream, "anything")
    assert result.response is None
    assert result.error.startswith("Error calling LLM API: ")
    assert "Invalid response" in result.error


def test_chat_unauthorized(openai_config):
    upstream = Upstream(lambda r: httpx.Response(401, text="invalid_api_key"))
    result = _dispatch_openai(openai_config, upstream, "anything")
    assert not result.is_success
    assert "Error calling LLM API" in result.error
    assert "invalid_api_key" in result.error
    assert result.to_payload() == {"error": result.error}


def test_local_success(local_config):
    upstream = Upstream(lambda r: httpx.Response(200, json={"model": "llama3", "response": "42"}))
    result = _dispatch_local(local_config, upstream, "meaning of life")
    assert result == AdapterResult.ok("42")


def test_local_transport_failure(local_config):
    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    result = _dispatch_local(local_config, Upstream(refuse), "hi")
    assert result.error.startswith("Error calling LLM API: ")


def test_failure_kinds_collapse_to_one_message(openai_config):
    provider = RecordingProvider(openai_config, error=InvalidResponseError("bad body"))
    result = asyncio.run(QueryService(provider).dispatch("x"))
    assert result == AdapterResult.failed("Error calling LLM API: bad body")


def test_same_query_gives_same_result(local_config):
    upstream = Upstream(lambda r: httpx.Response(200, json={"model": "llama3", "response": "same"}))

    async def run():
        async with upstream.client() as client:
            service = QueryService(OllamaProvider(local_config, client=client))
            return [await service.dispatch("q") for _ in range(3)]

    results = asyncio.run(run())
    assert results == [AdapterResult.ok("same")] * 3
    assert len({r.content for r in upstream.requests}) == 1
