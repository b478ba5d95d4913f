"""Characters."""

from typing import TYPE_CHECKING, Any, ClassVar, List, Optional, Type

from pydantic import Field, ValidationInfo, field_validator

from . import envelopes
from .base import Entity, null_to_default
from .common import Date, Image, Name
from .enums import CharacterRole, EntityKind
from .gender import Gender

if TYPE_CHECKING:
    from .person import Person


class Character(Entity):
    """A character.

    ``role`` and, usually, ``voice_actors`` come from the edge the character
    was reached through, so they describe the character within that media.
    """

    kind: ClassVar[EntityKind] = EntityKind.CHARACTER

    name: Name = Field(default_factory=Name)
    role: Optional[CharacterRole] = None
    image: Image = Field(default_factory=Image)
    description: Optional[str] = None
    gender: Optional[Gender] = None
    date_of_birth: Optional[Date] = None
    age: Optional[str] = None
    blood_type: Optional[str] = None
    # Media connection kept untyped; its shape depends on the query.
    raw_media: Optional[Any] = Field(default=None, alias="media", repr=False)
    is_favourite: Optional[bool] = None
    is_favourite_blocked: Optional[bool] = None
    url: Optional[str] = Field(default=None, alias="siteUrl")
    favourites: Optional[int] = None
    voice_actors: Optional[List["Person"]] = None
    mod_notes: Optional[str] = None

    @field_validator("name", "image", mode="before")
    @classmethod
    def _null_to_default(cls, value: Any, info: ValidationInfo) -> Any:
        return null_to_default(cls, value, info)

    @field_validator("voice_actors", mode="before")
    @classmethod
    def _unwrap_voice_actors(cls, value: Any) -> Any:
        from .person import Person

        return envelopes.from_connection(value, Person)

    async def get_medias(self, model: Type[Any]) -> List[Any]:
        """Media the character appears in. Not available yet."""
        raise NotImplementedError("Character.get_medias is not implemented")
