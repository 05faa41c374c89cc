"""BeautifulSoup-backed implementation of the ``Document`` protocol."""

from __future__ import annotations

from bs4 import BeautifulSoup, Tag


class SoupElement:
    """Wrap a BeautifulSoup ``Tag`` behind the ``Element`` protocol."""

    def __init__(self, tag: Tag) -> None:
        self._tag = tag

    def select(self, selector: str) -> list[SoupElement]:
        return [SoupElement(tag) for tag in self._tag.select(selector)]

    def select_one(self, selector: str) -> SoupElement | None:
        tag = self._tag.select_one(selector)
        return SoupElement(tag) if tag is not None else None

    def children(self, name: str, *, class_: str | None = None) -> list[SoupElement]:
        if class_ is None:
            found = self._tag.find_all(name, recursive=False)
        else:
            found = self._tag.find_all(name, class_=class_, recursive=False)
        return [SoupElement(tag) for tag in found if isinstance(tag, Tag)]

    def attr(self, name: str) -> str | None:
        value = self._tag.get(name)
        if value is None:
            return None
        # Multi-valued attributes (class, rel) come back as lists
        if isinstance(value, list):
            return " ".join(value)
        return str(value)

    def text(self) -> str:
        return self._tag.get_text()

    def __repr__(self) -> str:
        return f"SoupElement(<{self._tag.name}>)"


class SoupDocument(SoupElement):
    """A parsed HTML page."""

    @classmethod
    def parse(cls, html: str) -> SoupDocument:
        return cls(BeautifulSoup(html, "lxml"))
