from typing import Any

from briefdeck.core.config import Settings
from briefdeck.core.deck_normalizer import normalize_deck
from briefdeck.core.deck_template import (
    render_app_page,
    render_sections,
    reveal_options,
    theme_stylesheet_href,
)
from briefdeck.schemas.deck import RenderedDeck


def render_presentation(deck_in: Any, config: Settings) -> RenderedDeck:
    """Sanitized reveal.js markup plus theme and Reveal options for a client-held deck."""
    deck = normalize_deck(deck_in)
    return RenderedDeck(
        html=render_sections(deck),
        theme_href=theme_stylesheet_href(deck.theme, config.REVEAL_CDN_URL),
        options=reveal_options(deck.ratio),
    )


def render_home_page(config: Settings) -> str:
    return render_app_page(config.PROJECT_NAME, config.API_PREFIX, config.REVEAL_CDN_URL)
