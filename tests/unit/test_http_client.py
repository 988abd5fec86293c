"""Unit tests for the HTTP client and exercise fetcher."""

import httpx
import pytest

from domain.exceptions import FetchError
from domain.models import ExerciseIdentifier
from infrastructure.fetcher import ExercismFetcher
from infrastructure.http_client import AsyncHTTPClient


def client_for(handler) -> AsyncHTTPClient:
    return AsyncHTTPClient(timeout=1.0, transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_returns_text_and_url_with_query():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.params["page"] == "3"
        return httpx.Response(200, text="<html>page 3</html>")

    async with client_for(handler) as client:
        text, url = await client.get_text("https://exercism.io/solutions", params={"page": "3"})

    assert text == "<html>page 3</html>"
    assert url == "https://exercism.io/solutions?page=3"


@pytest.mark.asyncio
async def test_non_success_status_is_fetch_error():
    async with client_for(lambda request: httpx.Response(404)) as client:
        with pytest.raises(FetchError) as exc_info:
            await client.get_text("https://exercism.io/missing")

    assert exc_info.value.url == "https://exercism.io/missing"
    assert "404" in str(exc_info.value)


@pytest.mark.asyncio
async def test_timeout_is_fetch_error():
    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    async with client_for(handler) as client:
        with pytest.raises(FetchError, match="timed out"):
            await client.get_text("https://exercism.io/slow")


@pytest.mark.asyncio
async def test_network_failure_is_fetch_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    async with client_for(handler) as client:
        with pytest.raises(FetchError, match="connection refused"):
            await client.get_text("https://exercism.io/down")


@pytest.mark.asyncio
async def test_fetcher_builds_exercise_urls():
    requested = []

    def handler(request):
        requested.append(str(request.url))
        return httpx.Response(200, text="ok")

    async with client_for(handler) as client:
        fetcher = ExercismFetcher(
            client, ExerciseIdentifier("go", "two-fer"), "https://exercism.io/"
        )
        await fetcher.fetch("solutions")
        await fetcher.fetch("solutions", {"page": "2"})

    assert requested == [
        "https://exercism.io/tracks/go/exercises/two-fer/solutions",
        "https://exercism.io/tracks/go/exercises/two-fer/solutions?page=2",
    ]
