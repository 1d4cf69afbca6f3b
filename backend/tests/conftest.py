"""
Shared fixtures: a scripted LLM (pydantic-ai ``FunctionModel``), a scripted
Pexels API (``httpx.MockTransport``) and the FastAPI app wired to both.
"""

import json

import httpx
import pytest
from httpx import ASGITransport, AsyncClient
from pydantic_ai.messages import ModelRequest, ModelResponse, TextPart, UserPromptPart
from pydantic_ai.models.function import AgentInfo, FunctionModel

from briefdeck.api.deps import get_deck_agent, get_image_search, get_settings
from briefdeck.core.ai_generators import make_deck_agent
from briefdeck.core.config import Settings
from briefdeck.core.image_search import PexelsImageSearch
from briefdeck.main import app as fastapi_app

PEXELS_URL = "https://api.pexels.test/v1"


class FakeLLM:
    """Scripted completion text (or error) plus a record of every prompt.

    ``text = None`` makes the model answer with no content at all.
    """

    def __init__(self) -> None:
        self.text: str | None = "{}"
        self.error: Exception | None = None
        self.prompts: list[str] = []

    @property
    def calls(self) -> int:
        return len(self.prompts)

    def reply_with_deck(self, deck: dict) -> None:
        self.text = json.dumps({"deck": deck})

    def agent(self):
        def deck_completion(messages, info: AgentInfo) -> ModelResponse:
            for message in messages:
                if isinstance(message, ModelRequest):
                    for part in message.parts:
                        if isinstance(part, UserPromptPart):
                            self.prompts.append(str(part.content))
            if self.error is not None:
                raise self.error
            if self.text is None:
                return ModelResponse(parts=[])
            return ModelResponse(parts=[TextPart(self.text)])

        return make_deck_agent(FunctionModel(deck_completion))


class FakePexels:
    """Answers ``/search`` from a ``query -> photo src`` table."""

    def __init__(self) -> None:
        self.photos: dict[str, dict] = {}
        self.status_for: dict[str, int] = {}
        self.fail_for: set[str] = set()
        self.requests: list[httpx.Request] = []

    @property
    def queries(self) -> list[str]:
        return [r.url.params.get("query") for r in self.requests]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        query = request.url.params.get("query")
        if query in self.fail_for:
            raise httpx.ConnectError("connection refused", request=request)
        if query in self.status_for:
            return httpx.Response(self.status_for[query], json={"error": "nope"})
        src = self.photos.get(query)
        photos = [{"id": 1, "src": src}] if src is not None else []
        return httpx.Response(200, json={"page": 1, "per_page": 1, "photos": photos})

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))


@pytest.fixture
def config() -> Settings:
    return Settings(
        _env_file=None,
        OPENAI_API_KEY="sk-test",
        PEXELS_API_KEY="px-test",
        PEXELS_API_URL=PEXELS_URL,
    )


@pytest.fixture
def llm() -> FakeLLM:
    return FakeLLM()


@pytest.fixture
def pexels() -> FakePexels:
    return FakePexels()


@pytest.fixture
async def pexels_client(pexels):
    async with pexels.client() as client:
        yield client


@pytest.fixture
def image_search(pexels_client, config) -> PexelsImageSearch:
    return PexelsImageSearch.from_settings(pexels_client, config)


@pytest.fixture
def app(config, llm, image_search):
    agent = llm.agent()
    fastapi_app.dependency_overrides[get_settings] = lambda: config
    fastapi_app.dependency_overrides[get_deck_agent] = lambda: agent
    fastapi_app.dependency_overrides[get_image_search] = lambda: image_search
    yield fastapi_app
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
