"""Base classes shared by every AniList model."""

import logging
from typing import Any, ClassVar, Optional, Protocol, Tuple, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, ValidationInfo
from pydantic.alias_generators import to_camel

from ..exceptions import AlreadyLoadedError, DetachedEntityError
from .enums import EntityKind

logger = logging.getLogger(__name__)

E = TypeVar("E", bound="Entity")


class EntityFetcher(Protocol):
    """Anything able to fetch a fully loaded entity by id."""

    async def fetch(self, model: Type[E], entity_id: int) -> E: ...


def null_to_default(model: Type[BaseModel], value: Any, info: ValidationInfo) -> Any:
    """Replace an explicit ``null`` with the field's default.

    GraphQL sends ``null`` rather than omitting a key, so fields that always
    hold a value use this in a ``mode="before"`` validator.
    """
    if value is None:
        return model.model_fields[info.field_name].get_default(call_default_factory=True)
    return value


class AniListModel(BaseModel):
    """Immutable snapshot of part of an AniList response.

    Field names are snake_case; the camelCase spelling used by the API is
    generated as the alias, and both are accepted on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    @classmethod
    def placeholder(cls) -> "AniListModel":
        """Default-valued instance used in place of an element that failed to decode."""
        return cls.model_construct()


class Entity(AniListModel):
    """A top level AniList object with its own id.

    Entities embedded in another response are partial. ``load_full`` asks the
    bound client for the complete record and returns it as a new object.
    """

    kind: ClassVar[EntityKind]

    id: int
    is_full_loaded: bool = Field(default=False)

    _client: Optional[EntityFetcher] = PrivateAttr(default=None)

    @classmethod
    def placeholder(cls) -> "Entity":
        return cls.model_construct(id=0)

    @property
    def identity(self) -> Tuple[EntityKind, int]:
        return (self.kind, self.id)

    def bind(self, client: EntityFetcher) -> "Entity":
        """Attach ``client`` to this entity and every entity nested inside it."""
        self._client = client
        for name in type(self).model_fields:
            _bind_value(getattr(self, name, None), client)
        return self

    async def load_full(self: E) -> E:
        """Fetch the complete version of this entity.

        Raises:
            AlreadyLoadedError: The entity is already fully loaded. This is a
                caller bug and no request is made.
            DetachedEntityError: No client is bound to the entity.
            AniListError: The request or the decoding of its response failed.
        """
        if self.is_full_loaded:
            raise AlreadyLoadedError(
                f"{type(self).__name__} {self.id} is already fully loaded"
            )
        if self._client is None:
            raise DetachedEntityError(
                f"{type(self).__name__} {self.id} has no client to load from"
            )
        logger.debug(f"Loading full {self.kind.value.lower()} {self.id}")
        return await self._client.fetch(type(self), self.id)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Entity):
            return NotImplemented
        return type(self) is type(other) and self.__dict__ == other.__dict__

    def __hash__(self) -> int:
        return hash(self.identity)


def _bind_value(value: Any, client: EntityFetcher) -> None:
    if isinstance(value, Entity):
        value.bind(client)
    elif isinstance(value, list):
        for item in value:
            if isinstance(item, Entity):
                item.bind(client)
