"""
Single entrypoint for the highlight Q&A relay.

Run: uvicorn highlight_qa.main:app --port 5000
"""
from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from highlight_qa.api import register_routes
from highlight_qa.core.config import Settings, get_settings
from highlight_qa.core.logging_config import configure_logging
from highlight_qa.providers.factory import build_provider_config, get_provider
from highlight_qa.services.query_service import QueryService


def create_app(
    settings: Optional[Settings] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> FastAPI:
    """
    Application factory for the FastAPI app.

    The provider is resolved here, once, and never switched afterwards.
    An injected client is left open on shutdown; one created here is closed.
    """
    configure_logging()

    settings = settings or get_settings()
    config = build_provider_config(settings)
    owns_client = client is None
    http_client = client or httpx.AsyncClient(timeout=config.timeout_seconds)
    provider = get_provider(config, http_client)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await provider.close()
        if owns_client:
            await http_client.aclose()

    app = FastAPI(
        title="Highlight Q&A",
        description=(
            "Relays highlighted text from PDFs and web pages to an LLM "
            "(OpenAI or a local Ollama server) and returns the answer."
        ),
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.provider_config = config
    app.state.query_service = QueryService(provider)

    register_routes(app)

    return app


app = create_app()
