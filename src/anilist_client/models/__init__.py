"""Typed models for AniList API responses."""

from .anime import Anime
from .base import AniListModel, Entity, EntityFetcher
from .character import Character
from .common import AiringSchedule, Cover, Date, Image, Link, Name, Tag, Title
from .enums import (
    AniListEnum,
    CharacterRole,
    EntityKind,
    Format,
    MediaType,
    RelationType,
    Season,
    Source,
    Status,
)
from .gender import Gender, GenderKind
from .language import Language
from .person import Person
from .relation import RelatedMedia, Relation
from .studio import Studio

# Character and Person refer to each other.
Character.model_rebuild()
Person.model_rebuild()
Anime.model_rebuild()

__all__ = [
    "AiringSchedule",
    "AniListEnum",
    "AniListModel",
    "Anime",
    "Character",
    "CharacterRole",
    "Cover",
    "Date",
    "Entity",
    "EntityFetcher",
    "EntityKind",
    "Format",
    "Gender",
    "GenderKind",
    "Image",
    "Language",
    "Link",
    "MediaType",
    "Name",
    "Person",
    "RelatedMedia",
    "Relation",
    "RelationType",
    "Season",
    "Source",
    "Status",
    "Studio",
    "Tag",
    "Title",
]
