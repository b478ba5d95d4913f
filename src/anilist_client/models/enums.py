"""Enumerations used by AniList models.

Every enum here parses leniently: any string the API might send (or none at
all) resolves to a member, falling back to the enum's default.
"""

from enum import Enum
from typing import Any, Dict

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema


def _normalize(value: str) -> str:
    return value.strip().upper().replace("-", "_").replace(" ", "_")


class AniListEnum(str, Enum):
    """Base for lenient string enums.

    Lookup order for an unknown value: member name, alias table, default.
    Subclasses override ``default()`` and optionally ``_aliases()`` and
    ``_labels()``.
    """

    @classmethod
    def default(cls) -> "AniListEnum":
        return next(iter(cls))

    @classmethod
    def _aliases(cls) -> Dict[str, "AniListEnum"]:
        return {}

    @classmethod
    def _labels(cls) -> Dict["AniListEnum", str]:
        return {}

    @classmethod
    def _missing_(cls, value: object) -> "AniListEnum":
        if not isinstance(value, str) or not value.strip():
            return cls.default()
        key = _normalize(value)
        for member in cls:
            if member.name == key or _normalize(member.value) == key:
                return member
        return cls._aliases().get(key, cls.default())

    @classmethod
    def parse(cls, value: Any) -> "AniListEnum":
        """Resolve ``value`` to a member. Never raises."""
        if isinstance(value, cls):
            return value
        return cls(value)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls.parse,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda member: member.value
            ),
        )

    @property
    def label(self) -> str:
        """Human readable name, e.g. ``Side Story``."""
        return self._labels().get(self, self.name.replace("_", " ").title())

    def __str__(self) -> str:
        return self.label


class EntityKind(AniListEnum):
    """Kinds of entity that can be fetched by id."""

    ANIME = "ANIME"
    CHARACTER = "CHARACTER"
    PERSON = "PERSON"
    STUDIO = "STUDIO"

    @classmethod
    def _aliases(cls) -> Dict[str, "AniListEnum"]:
        return {"MEDIA": cls.ANIME, "STAFF": cls.PERSON}


class MediaType(AniListEnum):
    """Media type classification."""

    ANIME = "ANIME"
    MANGA = "MANGA"


class CharacterRole(AniListEnum):
    """Role of a character within one specific media."""

    BACKGROUND = "BACKGROUND"
    MAIN = "MAIN"
    SUPPORTING = "SUPPORTING"


class Format(AniListEnum):
    """Media format classification."""

    TV = "TV"
    TV_SHORT = "TV_SHORT"
    MOVIE = "MOVIE"
    SPECIAL = "SPECIAL"
    OVA = "OVA"
    ONA = "ONA"
    MUSIC = "MUSIC"
    MANGA = "MANGA"
    NOVEL = "NOVEL"
    ONE_SHOT = "ONE_SHOT"

    @classmethod
    def _labels(cls) -> Dict["AniListEnum", str]:
        return {
            cls.TV: "TV",
            cls.TV_SHORT: "TV Short",
            cls.OVA: "OVA",
            cls.ONA: "ONA",
        }


class Status(AniListEnum):
    """Release status of a media."""

    NOT_YET_RELEASED = "NOT_YET_RELEASED"
    FINISHED = "FINISHED"
    RELEASING = "RELEASING"
    CANCELLED = "CANCELLED"
    HIATUS = "HIATUS"

    @classmethod
    def _aliases(cls) -> Dict[str, "AniListEnum"]:
        return {
            "UPCOMING": cls.NOT_YET_RELEASED,
            "ONGOING": cls.RELEASING,
            "AIRING": cls.RELEASING,
            "CANCELED": cls.CANCELLED,
        }


class Source(AniListEnum):
    """Source material of a media."""

    ORIGINAL = "ORIGINAL"
    MANGA = "MANGA"
    LIGHT_NOVEL = "LIGHT_NOVEL"
    VISUAL_NOVEL = "VISUAL_NOVEL"
    VIDEO_GAME = "VIDEO_GAME"
    OTHER = "OTHER"
    NOVEL = "NOVEL"
    DOUJINSHI = "DOUJINSHI"
    ANIME = "ANIME"
    WEB_NOVEL = "WEB_NOVEL"
    LIVE_ACTION = "LIVE_ACTION"
    GAME = "GAME"
    COMIC = "COMIC"
    MULTIMEDIA_PROJECT = "MULTIMEDIA_PROJECT"
    PICTURE_BOOK = "PICTURE_BOOK"


class Season(AniListEnum):
    """Airing season."""

    WINTER = "WINTER"
    SPRING = "SPRING"
    SUMMER = "SUMMER"
    FALL = "FALL"

    @classmethod
    def _aliases(cls) -> Dict[str, "AniListEnum"]:
        return {"AUTUMN": cls.FALL}


class RelationType(AniListEnum):
    """Relation between two media."""

    ADAPTATION = "ADAPTATION"
    PREQUEL = "PREQUEL"
    SEQUEL = "SEQUEL"
    PARENT = "PARENT"
    SIDE_STORY = "SIDE_STORY"
    CHARACTER = "CHARACTER"
    SUMMARY = "SUMMARY"
    ALTERNATIVE = "ALTERNATIVE"
    SPIN_OFF = "SPIN_OFF"
    OTHER = "OTHER"
    SOURCE = "SOURCE"
    COMPILATION = "COMPILATION"
    CONTAINS = "CONTAINS"

    @classmethod
    def default(cls) -> "AniListEnum":
        return cls.OTHER

    @classmethod
    def _aliases(cls) -> Dict[str, "AniListEnum"]:
        return {"SPINOFF": cls.SPIN_OFF}
