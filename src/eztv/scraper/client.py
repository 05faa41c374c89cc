"""EZTV API facade composing the fetcher and the extractors."""

from __future__ import annotations

import logging
from typing import Any

from eztv.config import Settings
from eztv.scraper.catalog import CatalogExtractor
from eztv.scraper.episodes import EpisodeExtractor
from eztv.scraper.fetcher import HttpxFetcher
from eztv.scraper.interfaces import DocumentFetcher
from eztv.scraper.query import DEFAULT_LIMIT, DEFAULT_PAGE, build_torrent_query
from eztv.shared.models import Show, ShowStub

logger = logging.getLogger(__name__)


class EztvApi:
    """Read the EZTV show catalog, episode listings and torrent API.

    Four operations:

    1. **list_shows**: every show on the catalog page
    2. **fetch_show_episodes**: a show's episodes from its detail page
    3. **search_show_episodes**: a show's episodes from the search page
    4. **fetch_torrent_page**: one raw page of the JSON torrent API

    Calls share no mutable state and may run concurrently. Fetch and markup
    errors propagate to the caller unchanged.
    """

    def __init__(
        self,
        fetcher: DocumentFetcher,
        *,
        search_endpoint: str = "search/",
        catalog: CatalogExtractor | None = None,
        episodes: EpisodeExtractor | None = None,
    ) -> None:
        self._fetcher = fetcher
        self._search_endpoint = search_endpoint
        self._catalog = catalog or CatalogExtractor()
        self._episodes = episodes or EpisodeExtractor()

    @classmethod
    def from_settings(cls, settings: Settings) -> EztvApi:
        return cls(HttpxFetcher.from_settings(settings), search_endpoint=settings.search_endpoint)

    async def list_shows(self) -> list[ShowStub]:
        """Return every show listed on the catalog page."""
        document = await self._fetcher.fetch("showlist/")
        return self._catalog.extract(document)

    async def fetch_show_episodes(self, show: ShowStub | Show) -> Show:
        """Return ``show`` extended with the episodes on its detail page."""
        logger.info("fetching episodes for %s (id=%d)", show.slug, show.id)
        document = await self._fetcher.fetch(f"shows/{show.id}/{show.slug}/")
        return self._episodes.extract(show, document)

    async def search_show_episodes(self, show: ShowStub | Show) -> Show:
        """Return ``show`` extended with the episodes on the search page."""
        logger.info("searching episodes for %s (id=%d)", show.slug, show.id)
        document = await self._fetcher.fetch(self._search_endpoint)
        return self._episodes.extract(show, document)

    async def fetch_torrent_page(
        self,
        page: int = DEFAULT_PAGE,
        limit: int = DEFAULT_LIMIT,
        imdb: str | int | None = None,
    ) -> dict[str, Any]:
        """Return one page of the JSON torrent API exactly as received."""
        query = build_torrent_query(page=page, limit=limit, imdb=imdb)
        return await self._fetcher.fetch("api/get-torrents", query, raw=True)
