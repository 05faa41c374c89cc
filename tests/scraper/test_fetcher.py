"""Tests for HttpxFetcher."""

from __future__ import annotations

import logging

import httpx
import pytest
import respx

from eztv.scraper.document import SoupDocument
from eztv.scraper.fetcher import HttpxFetcher
from eztv.shared.exceptions import FetchError

BASE_URL = "https://eztv.test/"


@pytest.fixture
def fetcher() -> HttpxFetcher:
    return HttpxFetcher(BASE_URL, timeout=5)


class TestHttpxFetcher:
    @respx.mock
    async def test_fetch_returns_document(self, fetcher: HttpxFetcher) -> None:
        respx.get("https://eztv.test/showlist/").mock(
            return_value=httpx.Response(200, text='<html><body><a class="thread_link">A</a></body></html>')
        )

        doc = await fetcher.fetch("showlist/")

        assert isinstance(doc, SoupDocument)
        assert doc.select_one(".thread_link").text() == "A"

    @respx.mock
    async def test_fetch_raw_returns_json(self, fetcher: HttpxFetcher) -> None:
        payload = {"imdb_id": "1234567", "torrents_count": 0, "limit": 30, "page": 1, "torrents": []}
        respx.get("https://eztv.test/api/get-torrents").mock(return_value=httpx.Response(200, json=payload))

        assert await fetcher.fetch("api/get-torrents", {"page": 1}, raw=True) == payload

    @respx.mock
    async def test_fetch_drops_none_query_values(self, fetcher: HttpxFetcher) -> None:
        route = respx.get("https://eztv.test/api/get-torrents").mock(return_value=httpx.Response(200, json={}))

        await fetcher.fetch("api/get-torrents", {"page": 2, "limit": 10, "imdb_id": None}, raw=True)

        params = route.calls.last.request.url.params
        assert params["page"] == "2"
        assert params["limit"] == "10"
        assert "imdb_id" not in params

    @respx.mock
    async def test_fetch_sends_user_agent(self) -> None:
        route = respx.get("https://eztv.test/search/").mock(return_value=httpx.Response(200, text="<html></html>"))

        await HttpxFetcher(BASE_URL, user_agent="eztv-tests").fetch("search/")

        assert route.calls.last.request.headers["User-Agent"] == "eztv-tests"

    @respx.mock
    async def test_fetch_raises_on_http_error(self, fetcher: HttpxFetcher) -> None:
        respx.get("https://eztv.test/showlist/").mock(return_value=httpx.Response(503, text="Unavailable"))

        with pytest.raises(FetchError, match="EZTV returned 503"):
            await fetcher.fetch("showlist/")

    @respx.mock
    async def test_fetch_raises_on_connection_error(self, fetcher: HttpxFetcher) -> None:
        respx.get("https://eztv.test/showlist/").mock(side_effect=httpx.ConnectError("Connection refused"))

        with pytest.raises(FetchError, match="EZTV request failed"):
            await fetcher.fetch("showlist/")

    @respx.mock
    async def test_fetch_raises_on_invalid_json(self, fetcher: HttpxFetcher) -> None:
        respx.get("https://eztv.test/api/get-torrents").mock(return_value=httpx.Response(200, text="<html>"))

        with pytest.raises(FetchError, match="invalid JSON"):
            await fetcher.fetch("api/get-torrents", raw=True)

    @respx.mock
    async def test_fetch_logs_request_url(self, fetcher: HttpxFetcher, caplog: pytest.LogCaptureFixture) -> None:
        respx.get("https://eztv.test/api/get-torrents").mock(return_value=httpx.Response(200, json={}))

        with caplog.at_level(logging.DEBUG, logger="eztv.scraper.fetcher"):
            await fetcher.fetch("api/get-torrents", {"page": 1, "limit": 30, "imdb_id": None}, raw=True)

        assert "Making request to: 'https://eztv.test/api/get-torrents?page=1&limit=30'" in caplog.messages

    def test_from_settings(self, settings) -> None:
        fetcher = HttpxFetcher.from_settings(settings)
        assert fetcher.base_url == settings.base_url
