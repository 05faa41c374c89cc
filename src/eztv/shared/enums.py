"""Domain enumerations used across all modules."""

from __future__ import annotations

from enum import Enum, unique


@unique
class Provider(str, Enum):
    """Tracker a torrent reference was scraped from."""

    EZTV = "EZTV"


@unique
class AddressingMode(str, Enum):
    """How a listing title numbers its episode."""

    SEASON = "season"
    DATE = "date"
