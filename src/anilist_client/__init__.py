"""Typed asynchronous client for the AniList GraphQL API."""

from .client import AniListClient
from .config import AniListSettings, get_settings
from .exceptions import (
    AlreadyLoadedError,
    AniListAPIError,
    AniListDecodeError,
    AniListError,
    AniListGraphQLError,
    AniListNetworkError,
    AniListNotFoundError,
    AniListRateLimitError,
    DetachedEntityError,
)
from .models import (
    Anime,
    Character,
    CharacterRole,
    EntityKind,
    Format,
    Gender,
    GenderKind,
    Language,
    Name,
    Person,
    Relation,
    RelationType,
    Season,
    Source,
    Status,
    Studio,
)
from .transport import GraphQLTransport, Transport

__all__ = [
    "AlreadyLoadedError",
    "AniListAPIError",
    "AniListClient",
    "AniListDecodeError",
    "AniListError",
    "AniListGraphQLError",
    "AniListNetworkError",
    "AniListNotFoundError",
    "AniListRateLimitError",
    "AniListSettings",
    "Anime",
    "Character",
    "CharacterRole",
    "DetachedEntityError",
    "EntityKind",
    "Format",
    "Gender",
    "GenderKind",
    "GraphQLTransport",
    "Language",
    "Name",
    "Person",
    "Relation",
    "RelationType",
    "Season",
    "Source",
    "Status",
    "Studio",
    "Transport",
    "get_settings",
]
