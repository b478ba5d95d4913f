"""Small value objects shared by several AniList entities."""

import datetime
from typing import List, Optional

from pydantic import Field, field_validator

from .base import AniListModel


class Date(AniListModel):
    """A fuzzy date: any of year, month and day may be unknown."""

    year: Optional[int] = None
    month: Optional[int] = None
    day: Optional[int] = None

    @property
    def is_complete(self) -> bool:
        return None not in (self.year, self.month, self.day)

    def as_date(self) -> Optional[datetime.date]:
        """Return a ``datetime.date`` when every part is known and valid."""
        if not self.is_complete:
            return None
        try:
            return datetime.date(self.year, self.month, self.day)
        except ValueError:
            return None

    def __str__(self) -> str:
        parts = [f"{self.year:04d}" if self.year is not None else "????"]
        if self.month is not None:
            parts.append(f"{self.month:02d}")
            if self.day is not None:
                parts.append(f"{self.day:02d}")
        return "-".join(parts)


class Image(AniListModel):
    large: Optional[str] = None
    medium: Optional[str] = None


class Cover(AniListModel):
    """Cover image of a media in several sizes."""

    extra_large: Optional[str] = None
    large: Optional[str] = None
    medium: Optional[str] = None
    color: Optional[str] = None

    @property
    def largest(self) -> Optional[str]:
        return self.extra_large or self.large or self.medium


class Title(AniListModel):
    """Titles of a media in its different scripts."""

    romaji: Optional[str] = None
    english: Optional[str] = None
    native: Optional[str] = None
    user_preferred: Optional[str] = None

    def __str__(self) -> str:
        return (
            self.user_preferred or self.english or self.romaji or self.native or ""
        )


class Name(AniListModel):
    """Names of a character or a person."""

    first: Optional[str] = None
    middle: Optional[str] = None
    last: Optional[str] = None
    full: Optional[str] = None
    native: Optional[str] = None
    alternative: List[str] = Field(default_factory=list)
    alternative_spoiler: Optional[List[str]] = None
    user_preferred: Optional[str] = None

    @field_validator("alternative", mode="before")
    @classmethod
    def _null_alternative(cls, value):
        return [] if value is None else value

    @property
    def spoiler(self) -> Optional[List[str]]:
        """Alternative names that may spoil the story."""
        if self.alternative_spoiler is None:
            return None
        return list(self.alternative_spoiler)

    def __str__(self) -> str:
        return self.user_preferred or self.full or self.native or ""


class Link(AniListModel):
    """An external or streaming link."""

    id: Optional[int] = None
    title: Optional[str] = None
    thumbnail: Optional[str] = None
    url: Optional[str] = None
    site: Optional[str] = None
    site_id: Optional[int] = None
    link_type: Optional[str] = Field(default=None, alias="type")
    language: Optional[str] = None
    color: Optional[str] = None
    icon: Optional[str] = None
    notes: Optional[str] = None
    is_disabled: Optional[bool] = None


class Tag(AniListModel):
    """A descriptive tag attached to a media."""

    id: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    rank: Optional[int] = None
    is_general_spoiler: Optional[bool] = None
    is_media_spoiler: Optional[bool] = None
    is_adult: Optional[bool] = None
    user_id: Optional[int] = None


class AiringSchedule(AniListModel):
    """When an episode airs."""

    id: Optional[int] = None
    airing_at: Optional[int] = None
    time_until_airing: Optional[int] = None
    episode: Optional[int] = None

    @property
    def airs_at(self) -> Optional[datetime.datetime]:
        if self.airing_at is None:
            return None
        return datetime.datetime.fromtimestamp(self.airing_at, tz=datetime.timezone.utc)
