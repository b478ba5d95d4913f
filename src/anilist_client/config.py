"""Configuration for the AniList client."""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AniListSettings(BaseSettings):
    """AniList client settings, loaded from environment and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="ANILIST_",
        case_sensitive=False,
        extra="ignore",
    )

    api_url: str = Field(
        default="https://graphql.anilist.co", description="AniList GraphQL endpoint"
    )
    request_timeout: float | None = Field(
        default=30.0,
        description="Total timeout per request in seconds (None disables it)",
    )
    user_agent: str | None = Field(
        default=None, description="User-Agent header sent with every request"
    )

    @field_validator("request_timeout")
    @classmethod
    def validate_request_timeout(cls, v: float | None) -> float | None:
        """Validate request timeout."""
        if v is not None and v <= 0:
            raise ValueError("request_timeout must be positive")
        return v


@lru_cache
def get_settings() -> AniListSettings:
    """Get cached settings instance."""
    return AniListSettings()
