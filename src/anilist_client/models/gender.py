"""Gender of characters and staff."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

NEUTRAL = "Neutral"


class GenderKind(str, Enum):
    """Genders AniList knows by name."""

    MALE = "Male"
    FEMALE = "Female"
    NON_BINARY = "Non-binary"
    OTHER = "Other"


_KNOWN = {
    "MALE": GenderKind.MALE,
    "FEMALE": GenderKind.FEMALE,
    "NON-BINARY": GenderKind.NON_BINARY,
    "NON_BINARY": GenderKind.NON_BINARY,
    "NONBINARY": GenderKind.NON_BINARY,
}


@dataclass(frozen=True)
class Gender:
    """A gender value.

    AniList lets users type free-form genders, so anything outside the known
    set is kept verbatim as ``GenderKind.OTHER`` with ``other`` holding the
    original text. A missing or blank value is ``Other("Neutral")``.
    """

    kind: GenderKind = GenderKind.OTHER
    other: Optional[str] = None

    @classmethod
    def default(cls) -> "Gender":
        return cls(GenderKind.OTHER, NEUTRAL)

    @classmethod
    def parse(cls, value: Any) -> "Gender":
        """Build a ``Gender`` from an API string. Never raises."""
        if isinstance(value, Gender):
            return value
        if isinstance(value, GenderKind):
            return cls.default() if value is GenderKind.OTHER else cls(value, None)
        if not isinstance(value, str) or not value.strip():
            return cls.default()
        kind = _KNOWN.get(value.strip().upper())
        if kind is None:
            return cls(GenderKind.OTHER, value.strip())
        return cls(kind, None)

    @property
    def is_other(self) -> bool:
        return self.kind is GenderKind.OTHER

    def __str__(self) -> str:
        if self.kind is GenderKind.OTHER:
            return self.other or GenderKind.OTHER.value
        return self.kind.value

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls.parse,
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )
