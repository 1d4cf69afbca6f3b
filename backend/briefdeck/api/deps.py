"""
Shared FastAPI dependencies, single source of truth for DI.

Upstream clients are built once in the app lifespan and kept on
``app.state``; routers ask for them through these functions so tests can
swap them with ``app.dependency_overrides``.
"""

import httpx
from fastapi import Depends, Request
from pydantic_ai import Agent

from briefdeck.core.config import Settings, settings
from briefdeck.core.image_search import PexelsImageSearch

__all__ = ["get_settings", "get_http_client", "get_deck_agent", "get_image_search"]


def get_settings() -> Settings:
    return settings


def get_http_client(request: Request) -> httpx.AsyncClient | None:
    return getattr(request.app.state, "http_client", None)


def get_deck_agent(request: Request) -> Agent[None, str] | None:
    """The deck agent, or ``None`` when no OpenAI key was configured at startup."""
    return getattr(request.app.state, "deck_agent", None)


def get_image_search(
    client: httpx.AsyncClient | None = Depends(get_http_client),
    config: Settings = Depends(get_settings),
) -> PexelsImageSearch | None:
    if client is None:
        return None
    return PexelsImageSearch.from_settings(client, config)
