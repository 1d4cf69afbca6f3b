"""API: aggregates all routers under a single prefix."""

from fastapi import APIRouter

from briefdeck.api.routers import generate, render

router = APIRouter()
router.include_router(generate.router)
router.include_router(render.router)
