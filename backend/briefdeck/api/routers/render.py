from typing import Any

from fastapi import APIRouter, Body, Depends

from briefdeck.api.deps import get_settings
from briefdeck.controllers import presentation_controller
from briefdeck.core.config import Settings
from briefdeck.schemas.deck import RenderedDeck

router = APIRouter(tags=["render"])


@router.post("/render", response_model=RenderedDeck)
async def render_deck(
    deck: Any = Body(...),
    config: Settings = Depends(get_settings),
):
    """Turn a deck into sanitized reveal.js sections, theme stylesheet and Reveal options."""
    return presentation_controller.render_presentation(deck, config)
