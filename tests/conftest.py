"""Shared pytest fixtures for the EZTV scraper test suite."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from eztv.config import Settings
from eztv.scraper.document import SoupDocument
from eztv.shared.models import ShowStub

BASE_URL = "https://eztv.test/"


def _listing_row(title: str, magnet: str | None = "magnet:?xt=urn:btih:abc") -> str:
    """Render one ``forum_header_border`` listing row."""
    magnet_cell = f'<a href="{magnet}" class="magnet" title="Magnet Link"></a>' if magnet else ""
    return (
        '<tr name="hover" class="forum_header_border">'
        '<td class="forum_thread_post"><a href="/shows/1/x/"><img src="x.png"></a></td>'
        f'<td class="forum_thread_post"><a href="/ep/1/" class="epinfo">{title}</a></td>'
        f'<td class="forum_thread_post">{magnet_cell}<a href="/x.torrent" class="download_1"></a></td>'
        '<td class="forum_thread_post">350.2 MB</td>'
        "</tr>"
    )


def _show_page(*rows: str, imdb_href: str | None = None) -> str:
    """Render a show/search page with optional rating block."""
    rating = ""
    if imdb_href is not None:
        rating = (
            '<div itemscope itemtype="http://schema.org/AggregateRating">'
            f'<a href="{imdb_href}" target="_blank">IMDb</a>'
            "</div>"
        )
    return f"<html><body>{rating}<table>{''.join(rows)}</table></body></html>"


def _catalog_page(*links: tuple[str, str]) -> str:
    """Render the ``showlist/`` page from ``(href, name)`` pairs."""
    cells = "".join(
        f'<tr name="hover"><td class="forum_thread_post"><a href="{href}" class="thread_link">{name}</a></td></tr>'
        for href, name in links
    )
    return f"<html><body><table>{cells}</table></body></html>"


@pytest.fixture()
def settings() -> Settings:
    """Return a Settings instance with test defaults."""
    return Settings(base_url=BASE_URL, request_timeout=5, search_endpoint="search/")


@pytest.fixture()
def sample_stub() -> ShowStub:
    return ShowStub(name="Show Name", id=123, slug="show-name")


@pytest.fixture()
def mock_fetcher() -> AsyncMock:
    """Fetcher returning an empty page unless a test overrides it."""
    fetcher = AsyncMock()
    fetcher.fetch.return_value = SoupDocument.parse("<html><body></body></html>")
    return fetcher


@pytest.fixture()
def listing_row():
    return _listing_row


@pytest.fixture()
def show_page():
    return _show_page


@pytest.fixture()
def catalog_page():
    return _catalog_page
