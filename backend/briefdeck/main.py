import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse, JSONResponse
from starlette.middleware.cors import CORSMiddleware

from briefdeck.api.api import router
from briefdeck.api.deps import get_settings
from briefdeck.controllers import presentation_controller
from briefdeck.core.ai_generators import build_deck_agent
from briefdeck.core.config import Settings, settings
from briefdeck.core.exceptions import (
    GENERATION_FAILED_MESSAGE,
    MISSING_BRIEF_MESSAGE,
    DeckError,
)

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: check credentials, open the shared HTTP client, build the agent."""
    if settings.missing_credentials:
        logger.warning(
            "Missing credentials: %s. /generate will answer 400 until they are set.",
            ", ".join(settings.missing_credentials),
        )

    app.state.http_client = httpx.AsyncClient(timeout=settings.IMAGE_SEARCH_TIMEOUT)
    app.state.deck_agent = build_deck_agent(settings) if settings.OPENAI_API_KEY else None
    yield
    await app.state.http_client.aclose()


app = FastAPI(
    title=settings.PROJECT_NAME,
    openapi_url=f"{settings.API_PREFIX}/openapi.json",
    lifespan=lifespan,
)


# ── Exception Handlers ───────────────────────────────────────

@app.exception_handler(DeckError)
async def deck_error_handler(request: Request, exc: DeckError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # An unreadable body on /generate counts as a missing brief
    if request.url.path == f"{settings.API_PREFIX}/generate":
        return JSONResponse(status_code=400, content={"error": MISSING_BRIEF_MESSAGE})
    return JSONResponse(status_code=422, content={"error": "Invalid request body"})


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error("Unhandled exception: %s", exc, exc_info=True)
    return JSONResponse(status_code=500, content={"error": GENERATION_FAILED_MESSAGE})


# ── Middleware ────────────────────────────────────────────────

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ── Routers ───────────────────────────────────────────────────

app.include_router(router, prefix=settings.API_PREFIX)


# ── Page / Health ─────────────────────────────────────────────

@app.get("/", response_class=HTMLResponse)
def read_root(config: Settings = Depends(get_settings)):
    return presentation_controller.render_home_page(config)


@app.get("/healthz", tags=["meta"])
def healthz():
    return {"status": "ok"}
