from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, Tuple, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Found(Generic[T]):
    """A successful extractor hit and where it starts in the normalized name."""

    offset: int
    value: T


class NotFound:
    _instance: Optional["NotFound"] = None

    def __new__(cls) -> "NotFound":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NOT_FOUND"


NOT_FOUND = NotFound()

Extracted = Union[Found[T], NotFound]


@dataclass(frozen=True)
class NormalizedName:
    text: str
    size: Optional[str] = None


@dataclass(frozen=True)
class SeasonEpisode:
    """Season/episode hits; combined tiers always fill both."""

    season: Extracted[int] = NOT_FOUND
    episode: Extracted[int] = NOT_FOUND

    @property
    def offsets(self) -> Tuple[int, ...]:
        return tuple(hit.offset for hit in (self.season, self.episode) if isinstance(hit, Found))


@dataclass(frozen=True)
class LinkDetails:
    """Title-less subset of parsed metadata used for download labels."""

    quality: Optional[str] = None
    languages: Tuple[str, ...] = ()
    size: Optional[str] = None
    season: Optional[int] = None
    episode: Optional[int] = None


@dataclass(frozen=True)
class ParsedMetadata:
    title: str
    year: Optional[int] = None
    season: Optional[int] = None
    episode: Optional[int] = None
    quality: Optional[str] = None
    languages: Tuple[str, ...] = ()
    size: Optional[str] = None

    @property
    def details(self) -> LinkDetails:
        return LinkDetails(
            quality=self.quality,
            languages=self.languages,
            size=self.size,
            season=self.season,
            episode=self.episode,
        )

    def to_response(self) -> dict:
        """Payload shape returned by the parse-url endpoint."""
        return {
            "movieName": self.title,
            "year": self.year,
            "languages": list(self.languages),
            "quality": self.quality,
            "size": self.size,
            "season": self.season,
            "episode": self.episode,
        }
