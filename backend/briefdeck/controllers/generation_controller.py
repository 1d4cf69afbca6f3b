import asyncio
import logging

from pydantic_ai import Agent

from briefdeck.core.ai_generators import generate_deck_json
from briefdeck.core.config import Settings
from briefdeck.core.deck_normalizer import deck_from_model_output
from briefdeck.core.exceptions import DeckGenerationError, MissingBriefError
from briefdeck.core.image_search import PexelsImageSearch
from briefdeck.schemas.deck import Deck, Slide

logger = logging.getLogger(__name__)


async def _enrich_slide(slide: Slide, images: PexelsImageSearch) -> Slide:
    query = slide.image_query
    if query and query.strip():
        slide.image_url = await images.find_image(query)
    else:
        slide.image_url = None
    return slide


async def enrich_slides(slides: list[Slide], images: PexelsImageSearch) -> list[Slide]:
    """Resolve every slide's image concurrently, keeping slide order."""
    return list(await asyncio.gather(*[_enrich_slide(s, images) for s in slides]))


async def generate_deck(
    brief: str,
    config: Settings,
    agent: Agent[None, str] | None,
    images: PexelsImageSearch | None,
) -> Deck:
    """Turn *brief* into an image-enriched deck.

    validate → generate → parse-or-empty → enrich (parallel) → respond.
    """
    brief = (brief or "").strip()
    if not brief or not config.has_credentials or agent is None or images is None:
        raise MissingBriefError()

    try:
        raw = await generate_deck_json(agent, brief)
        deck = deck_from_model_output(raw)
        deck.slides = await enrich_slides(deck.slides, images)
    except Exception as e:
        logger.error("Deck generation failed: %s", e, exc_info=True)
        raise DeckGenerationError() from e

    logger.info(
        "Generated deck: %d slides, theme=%s, ratio=%s, %d images",
        len(deck.slides),
        deck.theme,
        deck.ratio,
        sum(1 for s in deck.slides if s.image_url),
    )
    return deck
