"""
Coerce loosely-typed deck JSON into a validated :class:`Deck`.

Every field is checked individually rather than trusting the prompt: wrong
types are dropped, unknown theme/ratio values fall back to the defaults, and
a non-object slide entry becomes an empty slide so slide positions survive.
"""

from __future__ import annotations

from typing import Any

from briefdeck.schemas.deck import (
    DEFAULT_RATIO,
    DEFAULT_THEME,
    RATIOS,
    THEMES,
    Deck,
    Slide,
)

_TEXT_FIELDS = {
    "title": "title",
    "subtitle": "subtitle",
    "imageQuery": "image_query",
    "notes": "notes",
}


def _text(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def normalize_slide(node: Any) -> Slide:
    if not isinstance(node, dict):
        return Slide()

    fields: dict[str, Any] = {attr: _text(node.get(key)) for key, attr in _TEXT_FIELDS.items()}

    bullets_in = node.get("bullets")
    if isinstance(bullets_in, list):
        fields["bullets"] = [b for b in bullets_in if isinstance(b, str)]

    # imageUrl is only honoured for decks coming back from a client
    fields["image_url"] = _text(node.get("imageUrl"))
    return Slide(**fields)


def normalize_deck(deck_in: Any) -> Deck:
    """Build a :class:`Deck` from an untrusted ``deck`` object."""
    if not isinstance(deck_in, dict):
        deck_in = {}

    theme = deck_in.get("theme")
    ratio = deck_in.get("ratio")
    slides_in = deck_in.get("slides")
    if not isinstance(slides_in, list):
        slides_in = []

    return Deck(
        theme=theme if theme in THEMES else DEFAULT_THEME,
        ratio=ratio if ratio in RATIOS else DEFAULT_RATIO,
        slides=[normalize_slide(s) for s in slides_in],
    )


def deck_from_model_output(raw: dict[str, Any]) -> Deck:
    """Normalize the parsed completion ``{"deck": {...}}`` envelope.

    Slides coming from the model never carry an image yet; enrichment sets it.
    """
    deck = normalize_deck((raw or {}).get("deck"))
    for slide in deck.slides:
        slide.image_url = None
    return deck
