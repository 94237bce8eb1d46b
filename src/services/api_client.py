"""Async client for the conference API."""
import asyncio
import logging
from http import HTTPStatus
from typing import Any, List, Optional
from urllib.parse import quote

import aiohttp

from src.models.session import Session
from src.utils.exceptions import ApiError, AuthenticationError
from src.utils.settings import get_api_base_url, get_api_timeout

logger = logging.getLogger(__name__)


class ApiClient:
    """
    Conference API client.

    Each call opens its own ``aiohttp.ClientSession``, so one instance can be
    reused across Streamlit reruns without sharing connection state between
    event loops.

    Usage:
        client = ApiClient.from_settings()
        sessions = await client.get_sessions()
        await client.add_session_to_attendee("ada", 42)
    """

    def __init__(self, base_url: str, timeout: float = 10.0) -> None:
        self.base_url = base_url.rstrip("/")
        self._timeout = aiohttp.ClientTimeout(total=timeout)

    @classmethod
    def from_settings(cls) -> "ApiClient":
        return cls(base_url=get_api_base_url(), timeout=get_api_timeout())

    # ------------------------------------------------------------------ #
    # Sessions
    # ------------------------------------------------------------------ #
    async def get_sessions(self) -> List[Session]:
        """Fetch every session of the conference."""
        payload = await self._request("GET", "/api/sessions")
        return [Session.from_dict(item) for item in payload or []]

    async def get_sessions_by_attendee(self, name: Optional[str]) -> List[Session]:
        """
        Fetch the sessions an attendee added to their schedule.

        Anonymous users and attendees unknown to the API have an empty
        schedule.
        """
        if not name:
            logger.debug("No attendee name, skipping schedule lookup")
            return []

        path = f"/api/attendees/{_segment(name)}/sessions"
        try:
            payload = await self._request("GET", path)
        except ApiError as e:
            if e.status == HTTPStatus.NOT_FOUND:
                logger.warning("Attendee %s not found, using empty schedule", name)
                return []
            raise

        return [Session.from_dict(item) for item in payload or []]

    # ------------------------------------------------------------------ #
    # Attendee schedule
    # ------------------------------------------------------------------ #
    async def add_session_to_attendee(self, name: Optional[str], session_id: int) -> bool:
        """
        Add a session to an attendee's schedule.

        Returns:
            True on success, False if the API does not know the attendee
            or the session

        Raises:
            AuthenticationError: If no attendee name is given
            ApiError: On any other API failure
        """
        return await self._change_attendee_session("POST", name, session_id)

    async def remove_session_from_attendee(self, name: Optional[str], session_id: int) -> bool:
        """
        Remove a session from an attendee's schedule.

        Same return values and errors as ``add_session_to_attendee``.
        """
        return await self._change_attendee_session("DELETE", name, session_id)

    async def _change_attendee_session(
        self, method: str, name: Optional[str], session_id: int
    ) -> bool:
        if not name:
            raise AuthenticationError("Attendee must be signed in to change the schedule")

        path = f"/api/attendees/{_segment(name)}/session/{int(session_id)}"
        try:
            await self._request(method, path)
        except ApiError as e:
            if e.status == HTTPStatus.NOT_FOUND:
                logger.warning("%s %s returned 404", method, path)
                return False
            raise

        return True

    # ------------------------------------------------------------------ #
    # Transport
    # ------------------------------------------------------------------ #
    async def _request(self, method: str, path: str) -> Any:
        """Send a request and return the decoded JSON body (None if empty)."""
        url = f"{self.base_url}{path}"
        logger.debug("%s %s", method, url)

        try:
            async with (
                aiohttp.ClientSession(timeout=self._timeout) as session,
                session.request(method, url) as response,
            ):
                response.raise_for_status()
                if response.status == HTTPStatus.NO_CONTENT:
                    return None
                if response.content_type != "application/json":
                    if method == "GET":
                        raise ApiError(
                            f"{method} {url} returned non-JSON content ({response.content_type})",
                            status=response.status,
                        )
                    return None
                return await response.json()

        except aiohttp.ClientResponseError as e:
            raise ApiError(f"{method} {url} failed: {e.status} {e.message}", status=e.status) from e
        except aiohttp.ClientError as e:
            raise ApiError(f"{method} {url} failed: {e}") from e
        except asyncio.TimeoutError as e:
            raise ApiError(f"{method} {url} timed out") from e


def _segment(value: str) -> str:
    """Quote a value for use as a single URL path segment."""
    return quote(value, safe="")
