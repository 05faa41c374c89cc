"""Show catalog extraction from the ``showlist/`` page."""

from __future__ import annotations

import logging
import re

from eztv.scraper.interfaces import Document
from eztv.shared.exceptions import MarkupError
from eztv.shared.models import ShowStub

logger = logging.getLogger(__name__)

_SHOW_HREF_RE = re.compile(r"/shows/([^/]+)/([^/]+)/")


class CatalogExtractor:
    """Turn the catalog page into a list of ``ShowStub`` entries."""

    selector = ".thread_link"

    def extract(self, document: Document) -> list[ShowStub]:
        """Read every catalog anchor in document order.

        Duplicates on the page produce duplicate stubs.

        Raises:
            MarkupError: If an anchor does not link to ``/shows/<id>/<slug>/``.
        """
        shows: list[ShowStub] = []
        for anchor in document.select(self.selector):
            href = anchor.attr("href")
            match = _SHOW_HREF_RE.search(href) if href else None
            if match is None:
                raise MarkupError(f"catalog link does not match /shows/<id>/<slug>/: {href!r}")

            try:
                show_id = int(match.group(1))
            except ValueError as exc:
                raise MarkupError(f"catalog link has a non-numeric show id: {href!r}") from exc

            shows.append(ShowStub(name=anchor.text(), id=show_id, slug=match.group(2)))

        logger.info("extracted %d show(s) from catalog", len(shows))
        return shows
