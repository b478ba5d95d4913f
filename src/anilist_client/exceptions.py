"""Exceptions raised by the AniList client."""

from typing import Any, List, Optional


class AniListError(Exception):
    """Base class for recoverable AniList client errors."""


class AniListAPIError(AniListError):
    """Base exception for errors talking to the AniList API."""


class AniListNetworkError(AniListAPIError):
    """Raised when a request fails due to network, timeout or JSON decode errors."""


class AniListRateLimitError(AniListAPIError):
    """Raised when AniList answers 429 Too Many Requests."""

    def __init__(self, message: str, retry_after: Optional[int] = None) -> None:
        super().__init__(message)
        self.retry_after = retry_after


class AniListGraphQLError(AniListAPIError):
    """Raised when AniList returns GraphQL errors in the response."""

    def __init__(
        self,
        message: str,
        errors: Optional[List[Any]] = None,
        status: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.errors = errors or []
        self.status = status


class AniListNotFoundError(AniListGraphQLError):
    """Raised when the requested entity does not exist."""


class AniListDecodeError(AniListError):
    """Raised when a response cannot be turned into a model."""


class DetachedEntityError(AniListError):
    """Raised when an entity with no client attached is asked to load itself."""


class AlreadyLoadedError(AssertionError):
    """Raised when ``load_full`` is called on an entity that is already fully loaded.

    Signals a bug in the calling code; it is not an ``AniListError``.
    """
