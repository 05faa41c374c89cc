"""Tracker page and API fetching using httpx."""

from __future__ import annotations

import logging
from typing import Any, Mapping
from urllib.parse import urlencode

import httpx

from eztv.config import Settings
from eztv.scraper.document import SoupDocument
from eztv.shared.exceptions import FetchError

logger = logging.getLogger(__name__)


class HttpxFetcher:
    """GET pages from the tracker and hand back parsed documents or JSON.

    Implements the ``DocumentFetcher`` protocol. Each call opens its own
    client; there are no retries.
    """

    def __init__(
        self,
        base_url: str = "https://eztv.ag/",
        *,
        timeout: int = 30,
        user_agent: str = "Mozilla/5.0",
    ) -> None:
        self._base_url = base_url
        self._timeout = timeout
        self._headers = {"User-Agent": user_agent}

    @classmethod
    def from_settings(cls, settings: Settings) -> HttpxFetcher:
        return cls(
            settings.base_url,
            timeout=settings.request_timeout,
            user_agent=settings.user_agent,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    async def fetch(
        self,
        endpoint: str,
        query: Mapping[str, Any] | None = None,
        *,
        raw: bool = False,
    ) -> SoupDocument | Any:
        """Fetch ``base_url + endpoint``.

        Args:
            endpoint: Path relative to the base URL.
            query: Optional query parameters; ``None`` values are dropped.
            raw: Decode the body as JSON instead of parsing it as HTML.

        Returns:
            A ``SoupDocument``, or the decoded JSON payload when ``raw`` is set.

        Raises:
            FetchError: On network failure, a non-2xx status or invalid JSON.
        """
        url = f"{self._base_url}{endpoint}"
        params = {k: v for k, v in (query or {}).items() if v is not None}
        logger.debug("Making request to: '%s?%s'", url, urlencode(params))

        try:
            async with httpx.AsyncClient(
                timeout=self._timeout,
                follow_redirects=True,
                headers=self._headers,
            ) as client:
                resp = await client.get(url, params=params)
                resp.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise FetchError(f"EZTV returned {exc.response.status_code}: {exc.response.text[:200]}") from exc
        except httpx.HTTPError as exc:
            raise FetchError(f"EZTV request failed: {exc}") from exc

        if raw:
            try:
                return resp.json()
            except ValueError as exc:
                raise FetchError(f"EZTV returned invalid JSON from {url}: {exc}") from exc

        return SoupDocument.parse(resp.text)
