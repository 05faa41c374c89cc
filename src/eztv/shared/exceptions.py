"""Hierarchical exception types for the EZTV scraper."""

from __future__ import annotations


class EztvError(Exception):
    """Base exception for all EZTV scraper errors."""


# ── Transport ──────────────────────────────────────────────────


class FetchError(EztvError):
    """HTTP request failed or returned an unusable body."""


# ── Extraction ─────────────────────────────────────────────────


class MarkupError(EztvError):
    """A page did not have the shape the extractors rely on."""
