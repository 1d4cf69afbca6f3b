"""
Client-side presentation state for the generator API.

Mirrors what the browser page does: hold the brief, a loading flag and the
current deck; submit the brief; keep the previous deck and raise an alert
when generation fails; render or export the deck as reveal.js markup.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

import httpx

from briefdeck.core.config import settings
from briefdeck.core.deck_normalizer import normalize_deck
from briefdeck.core.deck_template import (
    render_sections,
    render_standalone_deck,
    reveal_options,
    theme_stylesheet_href,
)
from briefdeck.schemas.deck import Deck

logger = logging.getLogger(__name__)

ALERT_TEXT = "Generation failed. Check API keys and try again."


def _log_alert(message: str) -> None:
    logger.warning(message)


class PresentationSession:
    """One user's view of the generator: brief in, current deck out."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        *,
        generate_path: str = "/api/generate",
        alert: Callable[[str], None] | None = None,
        reveal_cdn_url: str | None = None,
    ) -> None:
        self._client = client
        self._generate_path = generate_path
        self._alert = alert if alert is not None else _log_alert
        self._cdn_url = reveal_cdn_url or settings.REVEAL_CDN_URL

        self.brief: str = ""
        self.loading: bool = False
        self.deck: Deck = Deck()

    async def generate(self) -> Deck:
        """Submit the current brief and return the deck that is now shown.

        An empty brief is a no-op. On failure the previous deck is kept and
        the alert callback fires; ``loading`` is always reset.
        """
        if not self.brief.strip():
            return self.deck

        self.loading = True
        try:
            response = await self._client.post(self._generate_path, json={"brief": self.brief})
            response.raise_for_status()
            self.deck = normalize_deck(response.json().get("deck"))
        except (httpx.HTTPError, ValueError, AttributeError) as exc:
            logger.info("Deck generation request failed: %s", exc)
            self._alert(ALERT_TEXT)
        finally:
            self.loading = False
        return self.deck

    @property
    def theme_href(self) -> str:
        return theme_stylesheet_href(self.deck.theme, self._cdn_url)

    @property
    def reveal_options(self) -> dict:
        return reveal_options(self.deck.ratio)

    def render(self) -> str:
        return render_sections(self.deck)

    def export_html(self, path: str | Path, title: str = "Presentation") -> Path:
        """Write the current deck as a standalone reveal.js page ready to print to PDF."""
        target = Path(path)
        target.write_text(render_standalone_deck(self.deck, title, self._cdn_url), encoding="utf-8")
        return target
