"""Transport layer: the one place that talks HTTP to AniList."""

import asyncio
import json
import logging
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from types import TracebackType
from typing import Any, Dict, Optional, Protocol, Type

import aiohttp

from .config import AniListSettings, get_settings
from .exceptions import (
    AniListGraphQLError,
    AniListNetworkError,
    AniListNotFoundError,
    AniListRateLimitError,
)
from .models.enums import EntityKind
from .queries import QUERIES, ROOT_FIELDS

logger = logging.getLogger(__name__)


def _parse_retry_after(value: Optional[str]) -> Optional[int]:
    """Seconds to wait from a ``Retry-After`` header (delta-seconds or HTTP-date)."""
    if not value:
        return None
    try:
        return max(0, int(value))
    except ValueError:
        pass
    try:
        when = parsedate_to_datetime(value)
    except (TypeError, ValueError):
        logger.debug(f"Ignoring unparseable Retry-After header: {value!r}")
        return None
    if when.tzinfo is None:
        when = when.replace(tzinfo=timezone.utc)
    return max(0, int((when - datetime.now(timezone.utc)).total_seconds()))


class Transport(Protocol):
    """Fetches the raw JSON object of one entity."""

    async def fetch_by_id(self, kind: EntityKind, entity_id: int) -> Dict[str, Any]: ...

    async def close(self) -> None: ...


class GraphQLTransport:
    """Minimal aiohttp transport for the AniList GraphQL endpoint.

    Sends exactly one POST per call. It does not retry, throttle, paginate or
    cache; a 429 answer is surfaced as ``AniListRateLimitError`` carrying the
    server's ``Retry-After`` so callers can decide what to do.
    """

    def __init__(self, settings: Optional[AniListSettings] = None) -> None:
        """
        Create a transport and initialize its internal state.

        Attributes:
            settings (AniListSettings): Endpoint, timeout and header configuration.
            session (Optional[aiohttp.ClientSession]): Per-event-loop HTTP session, created lazily.
            _session_event_loop (Optional[asyncio.AbstractEventLoop]): Event loop associated with the current session.
        """
        self.settings = settings or get_settings()
        self.session: Optional[aiohttp.ClientSession] = None
        self._session_event_loop: Optional[asyncio.AbstractEventLoop] = None

    async def _ensure_session(self) -> aiohttp.ClientSession:
        current_loop = asyncio.get_running_loop()
        if self.session is None or self._session_event_loop != current_loop:
            if self.session is not None:
                try:
                    await self.session.close()
                except Exception:
                    logger.debug("Ignoring error while closing old session", exc_info=True)

            headers = {}
            if self.settings.user_agent:
                headers["User-Agent"] = self.settings.user_agent
            self.session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.settings.request_timeout),
                headers=headers,
            )
            logger.debug("AniList session created for current event loop")
            self._session_event_loop = current_loop
        return self.session

    async def execute(
        self, query: str, variables: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        """
        Send a GraphQL request and return the response's ``data`` object.

        Parameters:
            query (str): GraphQL query string.
            variables (Optional[Dict[str, Any]]): Variables for the query.

        Returns:
            Dict[str, Any]: The GraphQL ``data`` object (empty if absent).

        Raises:
            AniListRateLimitError: The server answered 429.
            AniListNotFoundError: The server answered 404.
            AniListGraphQLError: The response carries GraphQL errors.
            AniListNetworkError: Connection, timeout, HTTP or JSON decoding failure.
        """
        session = await self._ensure_session()
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        payload = {"query": query, "variables": variables or {}}

        try:
            async with session.post(
                self.settings.api_url, json=payload, headers=headers
            ) as response:
                if response.status == 429:
                    retry_after = response.headers.get("Retry-After")
                    logger.warning(f"AniList rate limit exceeded (Retry-After: {retry_after})")
                    raise AniListRateLimitError(
                        "AniList rate limit exceeded",
                        retry_after=_parse_retry_after(retry_after),
                    )

                data: Any = await response.json(content_type=None)
                if isinstance(data, dict) and data.get("errors"):
                    errors = data["errors"]
                    logger.error(f"AniList GraphQL errors: {errors}")
                    error_cls = (
                        AniListNotFoundError if response.status == 404 else AniListGraphQLError
                    )
                    raise error_cls(
                        f"AniList returned {len(errors)} GraphQL error(s)",
                        errors=errors,
                        status=response.status,
                    )

                response.raise_for_status()
        except (
            aiohttp.ClientError,
            asyncio.TimeoutError,
            json.JSONDecodeError,
        ) as e:
            logger.exception("AniList API request failed")
            raise AniListNetworkError(f"AniList API request failed: {e}") from e

        if not isinstance(data, dict):
            raise AniListNetworkError("AniList response is not a JSON object")
        result: Dict[str, Any] = data.get("data") or {}
        return result

    async def fetch_by_id(self, kind: EntityKind, entity_id: int) -> Dict[str, Any]:
        """Fetch the raw JSON object of the ``kind`` entity with ``entity_id``."""
        root = ROOT_FIELDS[kind]
        data = await self.execute(QUERIES[kind], {"id": entity_id})
        raw = data.get(root)
        if raw is None:
            raise AniListNotFoundError(f"No {kind.value.lower()} found with id {entity_id}")
        return raw

    async def close(self) -> None:
        """Close the active aiohttp session, if any."""
        if self.session:
            await self.session.close()
            self.session = None
            self._session_event_loop = None

    async def __aenter__(self) -> "GraphQLTransport":
        return self

    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> bool:
        await self.close()
        return False
