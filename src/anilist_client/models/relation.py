"""Relations between media."""

from typing import Any, Optional

from pydantic import Field, ValidationInfo, field_validator

from .base import AniListModel, null_to_default
from .common import Cover, Title
from .enums import Format, MediaType, RelationType, Status


class RelatedMedia(AniListModel):
    """Summary of a media reached through a relation edge."""

    id: int = 0
    media_type: MediaType = Field(default=MediaType.ANIME, alias="type")
    title: Title = Field(default_factory=Title)
    format: Optional[Format] = None
    status: Optional[Status] = None
    cover: Optional[Cover] = Field(default=None, alias="coverImage")
    url: Optional[str] = Field(default=None, alias="siteUrl")

    @field_validator("id", "title", mode="before")
    @classmethod
    def _null_to_default(cls, value: Any, info: ValidationInfo) -> Any:
        return null_to_default(cls, value, info)


class Relation(AniListModel):
    """One edge of a media's ``relations`` connection."""

    id: Optional[int] = None
    relation_type: RelationType = RelationType.OTHER
    is_main_studio: bool = False
    media: Optional[RelatedMedia] = Field(default=None, alias="node")

    @field_validator("is_main_studio", mode="before")
    @classmethod
    def _null_to_default(cls, value: Any, info: ValidationInfo) -> Any:
        return null_to_default(cls, value, info)
