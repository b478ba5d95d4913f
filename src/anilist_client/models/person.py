"""Staff members and voice actors."""

from typing import TYPE_CHECKING, Any, ClassVar, List, Optional, Type

from pydantic import Field, ValidationInfo, field_validator

from . import envelopes
from .base import Entity, null_to_default
from .common import Date, Image, Name
from .enums import EntityKind
from .gender import Gender
from .language import Language

if TYPE_CHECKING:
    from .character import Character


class Person(Entity):
    """A person credited on AniList (staff, voice actor, author...).

    ``staff_role`` is edge metadata: it holds the person's credit ("Director",
    "Original Creator", ...) on the media they were reached through.
    """

    kind: ClassVar[EntityKind] = EntityKind.PERSON

    name: Name = Field(default_factory=Name)
    language: Language = Field(default=Language.JAPANESE, alias="languageV2")
    image: Optional[Image] = None
    description: Optional[str] = None
    primary_occupations: Optional[List[str]] = None
    gender: Gender = Field(default_factory=Gender.default)
    date_of_birth: Optional[Date] = None
    date_of_death: Optional[Date] = None
    age: Optional[int] = None
    home_town: Optional[str] = None
    blood_type: Optional[str] = None
    is_favourite: Optional[bool] = None
    is_favourite_blocked: Optional[bool] = None
    url: Optional[str] = Field(default=None, alias="siteUrl")
    characters: Optional[List["Character"]] = None
    favourites: Optional[int] = None
    mod_notes: Optional[str] = None
    staff_role: Optional[str] = None

    @field_validator("name", mode="before")
    @classmethod
    def _null_to_default(cls, value: Any, info: ValidationInfo) -> Any:
        return null_to_default(cls, value, info)

    @field_validator("characters", mode="before")
    @classmethod
    def _unwrap_characters(cls, value: Any) -> Any:
        from .character import Character

        return envelopes.from_connection(value, Character, extras={"role": "role"})

    async def get_medias(self, model: Type[Any]) -> List[Any]:
        """Media the person worked on. Not available yet."""
        raise NotImplementedError("Person.get_medias is not implemented")

    async def get_character_medias(
        self, model: Type[Any], character_id: int
    ) -> List[Any]:
        """Media in which the person voiced ``character_id``. Not available yet."""
        raise NotImplementedError("Person.get_character_medias is not implemented")
