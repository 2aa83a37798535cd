from fastapi import APIRouter, FastAPI

from . import health, query


def get_api_router() -> APIRouter:
    """
    Aggregate and return the root API router.
    """
    root_router = APIRouter()

    root_router.include_router(health.router, tags=["health"])
    root_router.include_router(query.router, tags=["query"])

    return root_router


def register_routes(app: FastAPI) -> None:
    """
    Attach all API routes to the FastAPI application.

    Routes are served at the root; the browser extension calls /status and /query directly.
    """
    app.include_router(get_api_router())
