"""Generate router: thin HTTP layer, delegates all logic to generation_controller."""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic_ai import Agent

from briefdeck.api.deps import get_deck_agent, get_image_search, get_settings
from briefdeck.controllers import generation_controller
from briefdeck.core.config import Settings
from briefdeck.core.image_search import PexelsImageSearch
from briefdeck.schemas.generation import ErrorResponse, GenerateRequest

router = APIRouter(tags=["generate"])


@router.post(
    "/generate",
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def generate(
    payload: GenerateRequest,
    config: Settings = Depends(get_settings),
    agent: Agent | None = Depends(get_deck_agent),
    images: PexelsImageSearch | None = Depends(get_image_search),
):
    """Generate an image-enriched slide deck from a free-text brief."""
    deck = await generation_controller.generate_deck(payload.brief, config, agent, images)
    return JSONResponse(status_code=200, content={"deck": deck.to_payload()})
