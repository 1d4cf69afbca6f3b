import httpx
import pytest

from briefdeck.core.image_search import PexelsImageSearch


def search_with(handler) -> tuple[PexelsImageSearch, httpx.AsyncClient]:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return PexelsImageSearch(client, api_key="px-key", base_url="https://api.pexels.test/v1/"), client


class TestPexelsImageSearch:

    @pytest.mark.asyncio
    async def test_request_shape(self, image_search, pexels):
        pexels.photos["cloud lock"] = {"landscape": "https://img/cloud-lock"}

        url = await image_search.find_image("cloud lock")

        assert url == "https://img/cloud-lock"
        request = pexels.requests[0]
        assert request.method == "GET"
        assert request.url.path == "/v1/search"
        assert request.url.params["query"] == "cloud lock"
        assert request.url.params["per_page"] == "1"
        assert request.headers["Authorization"] == "px-test"

    @pytest.mark.asyncio
    async def test_large_used_when_landscape_missing(self, image_search, pexels):
        pexels.photos["desk"] = {"landscape": "", "large": "https://img/desk-large"}
        assert await image_search.find_image("desk") == "https://img/desk-large"

    @pytest.mark.asyncio
    async def test_no_variant_is_none(self, image_search, pexels):
        pexels.photos["desk"] = {"original": "https://img/original"}
        assert await image_search.find_image("desk") is None

    @pytest.mark.asyncio
    async def test_no_results_is_none(self, image_search):
        assert await image_search.find_image("nothing matches") is None

    @pytest.mark.asyncio
    async def test_error_status_is_none(self, image_search, pexels):
        pexels.status_for["desk"] = 401
        assert await image_search.find_image("desk") is None

    @pytest.mark.asyncio
    async def test_transport_error_is_none(self, image_search, pexels):
        pexels.fail_for.add("desk")
        assert await image_search.find_image("desk") is None

    @pytest.mark.asyncio
    async def test_non_json_body_is_none(self):
        search, client = search_with(lambda request: httpx.Response(200, text="<html>"))
        async with client:
            assert await search.find_image("desk") is None

    @pytest.mark.asyncio
    async def test_unexpected_shape_is_none(self):
        search, client = search_with(lambda request: httpx.Response(200, json={"photos": {"0": {}}}))
        async with client:
            assert await search.find_image("desk") is None

    @pytest.mark.asyncio
    async def test_trailing_slash_in_base_url(self):
        seen = []

        def handler(request):
            seen.append(request.url)
            return httpx.Response(200, json={"photos": []})

        search, client = search_with(handler)
        async with client:
            await search.find_image("desk")

        assert str(seen[0]).startswith("https://api.pexels.test/v1/search?")
