"""Frozen Pydantic domain models shared by all modules."""

from __future__ import annotations

from typing import Any, Union

from pydantic import AliasChoices, BaseModel, Field, field_validator

from eztv.shared.enums import AddressingMode, Provider


class TorrentRef(BaseModel):
    """A magnet link retained for one episode/quality slot.

    The listing pages carry no swarm statistics, so ``seeds`` and ``peers``
    stay at zero unless a caller merges them from another source.
    """

    model_config = {"frozen": True}

    url: str
    seeds: int = 0
    peers: int = 0
    provider: Provider = Provider.EZTV


class SeasonEpisode(BaseModel):
    """Ordinal addressing, e.g. ``S01E02`` or ``1x02``."""

    model_config = {"frozen": True}

    season: int
    episode: int

    @property
    def mode(self) -> AddressingMode:
        return AddressingMode.SEASON

    @property
    def key(self) -> tuple[int, int]:
        return self.season, self.episode

    @property
    def recordable(self) -> bool:
        return bool(self.season and self.episode)


class AirDate(BaseModel):
    """Broadcast-date addressing used by dailies, e.g. ``2020.04.15``."""

    model_config = {"frozen": True}

    year: str
    month_day: str

    @property
    def mode(self) -> AddressingMode:
        return AddressingMode.DATE

    @property
    def key(self) -> tuple[str, str]:
        return self.year, self.month_day

    @property
    def recordable(self) -> bool:
        return bool(self.year and self.month_day)


EpisodeAddress = Union[SeasonEpisode, AirDate]

# episodes[season][episode][quality]
EpisodeTable = dict[Union[int, str], dict[Union[int, str], dict[str, TorrentRef]]]


def _is_ordinal(key: Any) -> bool:
    return isinstance(key, int) or (isinstance(key, str) and key.isdigit())


class ShowStub(BaseModel):
    """A catalog entry: enough to address the show's detail page."""

    model_config = {"frozen": True}

    name: str
    id: int
    slug: str


class Show(ShowStub):
    """A show with its IMDb code and scraped episode table."""

    imdb: str | None = None
    date_based: bool | None = None
    episodes: EpisodeTable = Field(default_factory=dict)

    @field_validator("episodes", mode="before")
    @classmethod
    def _restore_season_keys(cls, value: Any) -> Any:
        """Turn ``"1"``/``"2"`` keys from a JSON round-trip back into ints.

        Date-based episode keys ("04-15") are never all digits, so their
        year keys stay strings.
        """
        if not isinstance(value, dict):
            return value
        restored: dict[Any, Any] = {}
        for season, by_episode in value.items():
            if isinstance(by_episode, dict) and _is_ordinal(season) and all(map(_is_ordinal, by_episode)):
                restored[int(season)] = {int(episode): qualities for episode, qualities in by_episode.items()}
            else:
                restored[season] = by_episode
        return restored

    @classmethod
    def from_stub(cls, stub: ShowStub) -> Show:
        if isinstance(stub, Show):
            return stub
        return cls(name=stub.name, id=stub.id, slug=stub.slug)


class EpisodeSlot(BaseModel):
    """One usable listing row, ready to be merged into a show."""

    model_config = {"frozen": True}

    address: EpisodeAddress
    quality: str
    torrent: TorrentRef
    repack: bool = False


class EpisodeExtraction(BaseModel):
    """Everything a single show or search page contributes to a show."""

    model_config = {"frozen": True}

    imdb: str | None = None
    # Mode of the last row that matched an addressing pattern
    date_based: bool | None = None
    slots: list[EpisodeSlot] = Field(default_factory=list)


class Torrent(BaseModel):
    """A torrent as returned by the JSON API."""

    model_config = {"frozen": True, "extra": "allow"}

    id: int
    hash: str = ""
    filename: str = ""
    episode_url: str = ""
    torrent_url: str = ""
    magnet_url: str = ""
    title: str = ""
    imdb_id: str = ""
    season: int | str = 0
    episode: int | str = 0
    small_screenshot: str = ""
    large_screenshot: str = ""
    seeds: int = 0
    peers: int = 0
    date_released_unix: int = 0
    size_bytes: int | str = 0


class ApiTorrentPage(BaseModel):
    """Typed view over a raw ``api/get-torrents`` payload."""

    model_config = {"frozen": True, "extra": "allow"}

    imdb_id: str | None = None
    torrents_count: int = Field(0, validation_alias=AliasChoices("torrents_count", "torrent_count"))
    limit: int = 30
    page: int = 1
    torrents: list[Torrent] = Field(default_factory=list)

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> ApiTorrentPage:
        return cls.model_validate(payload)
