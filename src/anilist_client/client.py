"""High level AniList client returning typed models."""

import logging
from types import TracebackType
from typing import Optional, Type, TypeVar

from pydantic import ValidationError

from .config import AniListSettings
from .exceptions import AniListDecodeError
from .models import Anime, Character, Entity, Person, Studio
from .transport import GraphQLTransport, Transport

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Entity)


class AniListClient:
    """Fetches AniList entities by id and turns them into models.

    Every entity returned is marked fully loaded, and the client binds itself
    to it and to every entity nested inside it so that partial entities can
    later ``load_full()`` on their own.

    Example:
        async with AniListClient() as client:
            anime = await client.get_anime(1)
            character = await anime.characters[0].load_full()
    """

    def __init__(
        self,
        transport: Optional[Transport] = None,
        settings: Optional[AniListSettings] = None,
    ) -> None:
        self.transport: Transport = transport or GraphQLTransport(settings)

    async def fetch(self, model: Type[E], entity_id: int) -> E:
        """Fetch the entity of type ``model`` with ``entity_id``.

        Raises:
            AniListAPIError: The transport failed.
            AniListDecodeError: The response does not match ``model``.
        """
        raw = await self.transport.fetch_by_id(model.kind, entity_id)
        try:
            entity = model.model_validate(raw)
        except ValidationError as e:
            logger.error(
                f"Failed to decode {model.__name__} {entity_id}: {e.error_count()} error(s)"
            )
            raise AniListDecodeError(
                f"Could not decode {model.__name__} {entity_id}"
            ) from e
        full = entity.model_copy(update={"is_full_loaded": True})
        full.bind(self)
        return full

    async def get_anime(self, anime_id: int) -> Anime:
        return await self.fetch(Anime, anime_id)

    async def get_character(self, character_id: int) -> Character:
        return await self.fetch(Character, character_id)

    async def get_person(self, person_id: int) -> Person:
        return await self.fetch(Person, person_id)

    async def get_studio(self, studio_id: int) -> Studio:
        return await self.fetch(Studio, studio_id)

    async def close(self) -> None:
        await self.transport.close()

    async def __aenter__(self) -> "AniListClient":
        return self

    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> bool:
        await self.close()
        return False
