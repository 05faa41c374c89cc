"""Command-line entry point printing scraped data as JSON."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import Any

from eztv.config import Settings, get_settings
from eztv.scraper.client import EztvApi
from eztv.shared.exceptions import EztvError
from eztv.shared.models import ShowStub

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="eztv", description="Scrape the EZTV catalog.")
    parser.add_argument("--base-url", help="override EZTV_BASE_URL")
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("shows", help="list every show in the catalog")
    for name, help_text in (("show", "episodes from a show's page"), ("search", "episodes from the search page")):
        sub = commands.add_parser(name, help=help_text)
        sub.add_argument("id", type=int)
        sub.add_argument("slug")
        sub.add_argument("--name", default="", help="display name to attach")

    torrents = commands.add_parser("torrents", help="one page of the torrent API")
    torrents.add_argument("--page", type=int, default=1)
    torrents.add_argument("--limit", type=int, default=30)
    torrents.add_argument("--imdb")
    return parser


async def run(args: argparse.Namespace, settings: Settings) -> Any:
    """Execute one CLI command and return a JSON-serialisable result."""
    if args.base_url:
        settings = settings.model_copy(update={"base_url": args.base_url})
    api = EztvApi.from_settings(settings)

    if args.command == "shows":
        shows = await api.list_shows()
        return [show.model_dump(mode="json") for show in shows]
    if args.command in ("show", "search"):
        stub = ShowStub(name=args.name or args.slug, id=args.id, slug=args.slug)
        if args.command == "show":
            show = await api.fetch_show_episodes(stub)
        else:
            show = await api.search_show_episodes(stub)
        return show.model_dump(mode="json")
    return await api.fetch_torrent_page(page=args.page, limit=args.limit, imdb=args.imdb)


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``eztv`` console script."""
    args = _build_parser().parse_args(argv)
    settings = get_settings()

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        result = asyncio.run(run(args, settings))
    except EztvError as exc:
        logger.error("%s failed: %s", args.command, exc)
        return 1

    json.dump(result, sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
