"""Anime media."""

import logging
from typing import Any, ClassVar, List, Optional

from pydantic import Field, ValidationInfo, field_validator

from . import envelopes
from .base import Entity, null_to_default
from .character import Character
from .common import AiringSchedule, Cover, Date, Link, Tag, Title
from .enums import EntityKind, Format, Season, Source, Status
from .person import Person
from .relation import Relation
from .studio import Studio

logger = logging.getLogger(__name__)


class Anime(Entity):
    """An anime.

    ``title``, ``format``, ``status``, ``isAdult`` and ``siteUrl`` are always
    requested and must be present in the payload; everything else may be
    missing depending on the query that produced it.

    ``characters``, ``staff`` and ``studios`` hold partial entities flattened
    from their connections. Relations are kept as the raw connection and
    decoded by ``relations()``.
    """

    kind: ClassVar[EntityKind] = EntityKind.ANIME

    id_mal: Optional[int] = None
    title: Title
    format: Format
    status: Status
    description: Optional[str] = None
    start_date: Optional[Date] = None
    end_date: Optional[Date] = None
    season: Optional[Season] = None
    season_year: Optional[int] = None
    season_int: Optional[int] = None
    episodes: Optional[int] = None
    duration: Optional[int] = None
    country_of_origin: Optional[str] = None
    is_licensed: Optional[bool] = None
    source: Optional[Source] = None
    hashtag: Optional[str] = None
    updated_at: Optional[int] = None
    cover: Cover = Field(default_factory=Cover, alias="coverImage")
    banner: Optional[str] = Field(default=None, alias="bannerImage")
    genres: Optional[List[str]] = None
    synonyms: Optional[List[str]] = None
    average_score: Optional[int] = None
    mean_score: Optional[int] = None
    popularity: Optional[int] = None
    is_locked: Optional[bool] = None
    trending: Optional[int] = None
    favourites: Optional[int] = None
    tags: Optional[List[Tag]] = None
    raw_relations: Optional[Any] = Field(default=None, alias="relations", repr=False)
    characters: Optional[List[Character]] = None
    staff: Optional[List[Person]] = None
    studios: Optional[List[Studio]] = None
    is_favourite: Optional[bool] = None
    is_favourite_blocked: Optional[bool] = None
    is_adult: bool
    next_airing_episode: Optional[AiringSchedule] = None
    external_links: Optional[List[Link]] = None
    streaming_episodes: Optional[List[Link]] = None
    url: str = Field(alias="siteUrl")

    @classmethod
    def placeholder(cls) -> "Anime":
        return cls.model_construct(
            id=0,
            title=Title(),
            format=Format.default(),
            status=Status.default(),
            is_adult=False,
            url="",
        )

    @field_validator("cover", mode="before")
    @classmethod
    def _null_to_default(cls, value: Any, info: ValidationInfo) -> Any:
        return null_to_default(cls, value, info)

    @field_validator("characters", mode="before")
    @classmethod
    def _unwrap_characters(cls, value: Any) -> Any:
        return envelopes.from_connection(
            value, Character, extras={"role": "role", "voiceActors": "voiceActors"}
        )

    @field_validator("staff", mode="before")
    @classmethod
    def _unwrap_staff(cls, value: Any) -> Any:
        return envelopes.from_connection(value, Person, extras={"role": "staffRole"})

    @field_validator("studios", mode="before")
    @classmethod
    def _unwrap_studios(cls, value: Any) -> Any:
        return envelopes.from_connection(value, Studio, extras={"isMain": "isMain"})

    def relations(self) -> List[Relation]:
        """Decode the relations connection.

        Returns an empty list when relations were not requested or are
        malformed. An edge that fails to decode becomes a default ``Relation``.
        """
        if not isinstance(self.raw_relations, dict):
            return []
        edges = self.raw_relations.get("edges")
        if not isinstance(edges, list):
            logger.debug(f"Anime {self.id} relations have no edge list")
            return []
        return envelopes.decode_each(edges, Relation)
