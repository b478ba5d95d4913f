"""Animation studios and producers."""

from typing import Any, ClassVar, List, Optional, Type

from pydantic import Field, ValidationInfo, field_validator

from .base import Entity, null_to_default
from .enums import EntityKind


class Studio(Entity):
    """A studio. ``is_main`` is only set when reached through a media's studio edge."""

    kind: ClassVar[EntityKind] = EntityKind.STUDIO

    name: Optional[str] = None
    is_animation_studio: bool = False
    is_main: Optional[bool] = None
    url: Optional[str] = Field(default=None, alias="siteUrl")
    is_favourite: Optional[bool] = None
    favourites: Optional[int] = None

    @field_validator("is_animation_studio", mode="before")
    @classmethod
    def _null_to_default(cls, value: Any, info: ValidationInfo) -> Any:
        return null_to_default(cls, value, info)

    async def get_medias(self, model: Type[Any]) -> List[Any]:
        """Media produced by the studio. Not available yet."""
        raise NotImplementedError("Studio.get_medias is not implemented")
