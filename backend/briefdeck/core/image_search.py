"""
Stock-photo lookup against the Pexels search API.

A lookup never raises: a non-success status, an unreadable body, no results
or a transport failure all resolve to ``None`` so one bad keyword cannot
fail the whole deck.
"""

import logging

import httpx

from briefdeck.core.config import Settings

logger = logging.getLogger(__name__)


class PexelsImageSearch:
    """Resolve a keyword to a single image URL."""

    def __init__(self, client: httpx.AsyncClient, api_key: str, base_url: str) -> None:
        self._client = client
        self._api_key = api_key
        self._search_url = base_url.rstrip("/") + "/search"

    @classmethod
    def from_settings(cls, client: httpx.AsyncClient, config: Settings) -> "PexelsImageSearch":
        return cls(client, api_key=config.PEXELS_API_KEY, base_url=config.PEXELS_API_URL)

    async def find_image(self, query: str) -> str | None:
        """Return the landscape variant of the top hit, else the large one, else ``None``."""
        try:
            response = await self._client.get(
                self._search_url,
                params={"query": query, "per_page": "1"},
                headers={"Authorization": self._api_key},
            )
        except httpx.HTTPError as exc:
            logger.warning("Image search for %r failed: %s", query, exc)
            return None

        if not response.is_success:
            logger.warning("Image search for %r returned HTTP %s", query, response.status_code)
            return None

        try:
            payload = response.json()
        except ValueError:
            logger.warning("Image search for %r returned a non-JSON body", query)
            return None

        photos = payload.get("photos") if isinstance(payload, dict) else None
        if not isinstance(photos, list) or not photos or not isinstance(photos[0], dict):
            return None

        src = photos[0].get("src") or {}
        if not isinstance(src, dict):
            return None
        return src.get("landscape") or src.get("large") or None
