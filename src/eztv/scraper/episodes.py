"""Episode table extraction from show and search pages.

Listing titles are free text written by uploaders. Each row is classified
by its episode address (``S01E02`` style or ``2020.04.15`` style), tagged
with a resolution, and merged into the show's episode table where the first
torrent for a slot wins unless a later one is a repack.
"""

from __future__ import annotations

import logging
import re

from eztv.scraper.interfaces import Document, Element
from eztv.shared.enums import AddressingMode
from eztv.shared.exceptions import MarkupError
from eztv.shared.models import (
    AirDate,
    EpisodeAddress,
    EpisodeExtraction,
    EpisodeSlot,
    SeasonEpisode,
    Show,
    ShowStub,
    TorrentRef,
)

logger = logging.getLogger(__name__)

_SEASON_BASED_RE = re.compile(r"S?0*(\d+)[xE]0*(\d+)", re.IGNORECASE)
_DATE_BASED_RE = re.compile(r"(\d{4}).(\d{2}.\d{2})")
_QUALITY_RE = re.compile(r"\d{3,4}p")
_IMDB_HREF_RE = re.compile(r"/title/([^/]+)/")

DEFAULT_QUALITY = "480p"


def classify_title(title: str) -> EpisodeAddress | None:
    """Detect how a listing title addresses its episode.

    Season-based numbering is tried first, so a title carrying both forms is
    always season-based. Returns ``None`` when neither pattern matches.
    """
    match = _SEASON_BASED_RE.search(title)
    if match:
        return SeasonEpisode(season=int(match.group(1)), episode=int(match.group(2)))

    match = _DATE_BASED_RE.search(title)
    if match:
        # "04.15", "04 15" and "04-15" all key as "04-15"
        month_day = re.sub(r"\D+", "-", match.group(2))
        return AirDate(year=match.group(1), month_day=month_day)

    return None


def detect_quality(title: str) -> str:
    """Return the first resolution tag in a title, e.g. ``"720p"``."""
    match = _QUALITY_RE.search(title)
    return match.group(0) if match else DEFAULT_QUALITY


def merge_episodes(show: Show, extraction: EpisodeExtraction) -> Show:
    """Fold an extraction into a show and return the updated copy.

    Existing episodes are never removed. A slot is written when it is still
    empty or when the incoming torrent is a repack; among several repacks
    the last one applied wins.
    """
    episodes = {
        season: {episode: dict(qualities) for episode, qualities in by_episode.items()}
        for season, by_episode in show.episodes.items()
    }

    for slot in extraction.slots:
        season, episode = slot.address.key
        qualities = episodes.setdefault(season, {}).setdefault(episode, {})
        if slot.quality not in qualities or slot.repack:
            qualities[slot.quality] = slot.torrent

    update: dict[str, object] = {"episodes": episodes}
    if extraction.imdb:
        update["imdb"] = extraction.imdb
    if extraction.date_based is not None:
        update["date_based"] = extraction.date_based
    return show.model_copy(update=update)


class EpisodeExtractor:
    """Parse a show detail page or a search results page into episodes."""

    imdb_selector = 'div[itemtype="http://schema.org/AggregateRating"] a[target="_blank"]'
    row_selector = 'tr.forum_header_border[name="hover"]'

    def extract(self, show: ShowStub | Show, document: Document) -> Show:
        """Return ``show`` extended with everything found in ``document``."""
        return merge_episodes(Show.from_stub(show), self.parse(document))

    def parse(self, document: Document) -> EpisodeExtraction:
        """Extract the IMDb code and all usable listing rows.

        Raises:
            MarkupError: If the rating block links somewhere other than an
                IMDb ``/title/<id>/`` page.
        """
        date_based: bool | None = None
        slots: list[EpisodeSlot] = []

        rows = document.select(self.row_selector)
        for row in rows:
            parsed = self._parse_row(row)
            if parsed is None:
                continue
            address, slot = parsed
            date_based = address.mode is AddressingMode.DATE
            if slot is not None:
                slots.append(slot)

        logger.info("extracted %d episode slot(s) from %d row(s)", len(slots), len(rows))
        return EpisodeExtraction(imdb=self._parse_imdb(document), date_based=date_based, slots=slots)

    def _parse_imdb(self, document: Document) -> str | None:
        link = document.select_one(self.imdb_selector)
        href = link.attr("href") if link is not None else None
        if not href:
            return None

        match = _IMDB_HREF_RE.search(href)
        if match is None:
            raise MarkupError(f"rating link is not an IMDb title: {href!r}")
        return match.group(1)

    def _parse_row(self, row: Element) -> tuple[EpisodeAddress, EpisodeSlot | None] | None:
        """Return the row's address and, if it is recordable, its slot.

        Rows without a magnet link or without a recognisable address
        return ``None``.
        """
        cells = row.children("td")
        if len(cells) < 3:
            return None

        magnets = cells[2].children("a", class_="magnet")
        magnet = magnets[0].attr("href") if magnets else None
        if not magnet:
            return None

        title = cells[1].text().replace("x264", "", 1)
        address = classify_title(title)
        if address is None:
            logger.debug("skipping row without episode address: %r", title.strip())
            return None
        if not address.recordable:
            return address, None

        slot = EpisodeSlot(
            address=address,
            quality=detect_quality(title),
            torrent=TorrentRef(url=magnet),
            repack="repack" in title.lower(),
        )
        return address, slot
