"""Interfaces for the scraper module."""

from __future__ import annotations

from typing import Any, Mapping, Protocol, runtime_checkable


@runtime_checkable
class Element(Protocol):
    """A node of a parsed HTML document."""

    def select(self, selector: str) -> list[Element]:
        """Return all descendants matching a CSS selector, in document order."""
        ...

    def select_one(self, selector: str) -> Element | None:
        """Return the first descendant matching a CSS selector, if any."""
        ...

    def children(self, name: str, *, class_: str | None = None) -> list[Element]:
        """Return direct child elements with the given tag name (and class)."""
        ...

    def attr(self, name: str) -> str | None:
        """Return an attribute value, or ``None`` when it is absent."""
        ...

    def text(self) -> str:
        """Return the concatenated text content of the node."""
        ...


@runtime_checkable
class Document(Element, Protocol):
    """The root of a parsed HTML page."""


@runtime_checkable
class DocumentFetcher(Protocol):
    """Protocol for retrieving tracker pages and API payloads."""

    async def fetch(
        self,
        endpoint: str,
        query: Mapping[str, Any] | None = None,
        *,
        raw: bool = False,
    ) -> Any:
        """Fetch an endpoint relative to the tracker's base URL.

        Args:
            endpoint: Path relative to the base URL, e.g. ``"showlist/"``.
            query: Optional query parameters; ``None`` values are dropped.
            raw: Return decoded JSON instead of a parsed ``Document``.

        Returns:
            A ``Document``, or the decoded JSON payload when ``raw`` is set.
        """
        ...
