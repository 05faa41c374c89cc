"""Query construction for the JSON torrent API."""

from __future__ import annotations

from typing import Any

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 30


def normalize_imdb_id(imdb: Any) -> Any:
    """Strip a leading ``tt`` from an IMDb id; anything else passes through."""
    if isinstance(imdb, str) and imdb.startswith("tt"):
        return imdb[2:]
    return imdb


def build_torrent_query(
    page: int = DEFAULT_PAGE,
    limit: int = DEFAULT_LIMIT,
    imdb: str | int | None = None,
) -> dict[str, Any]:
    """Build ``api/get-torrents`` query parameters.

    ``page`` and ``limit`` are not range-checked; the API enforces its own
    bounds.
    """
    return {
        "page": page,
        "limit": limit,
        "imdb_id": normalize_imdb_id(imdb),
    }
