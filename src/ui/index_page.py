"""Schedule page controller."""
import logging
from dataclasses import dataclass, field
from typing import Dict, List

from src.models.schedule import DayOffset, TimeSlot
from src.models.session import Session
from src.models.user import User
from src.services.admin_service import ADMIN_POLICY
from src.services.schedule_service import get_day_offsets, get_sessions_for_day

logger = logging.getLogger(__name__)

INDEX_PAGE = "dashboard"


@dataclass(frozen=True)
class RedirectResult:
    """Tells the hosting page to show ``page`` again with a fresh request."""

    page: str = INDEX_PAGE
    query_params: Dict[str, str] = field(default_factory=dict)


class IndexPage:
    """
    View model for the conference schedule page.

    ``on_get`` fills the public attributes for rendering; the two post
    handlers change the attendee's schedule and ask for a redirect back
    to the page. Collaborators are passed in so tests can swap them.
    """

    def __init__(self, api_client, authorization_service) -> None:
        self._api_client = api_client
        self._authorization_service = authorization_service

        self.sessions: List[TimeSlot] = []
        self.day_offsets: List[DayOffset] = []
        self.current_day_offset: int = 0
        self.is_admin: bool = False
        self.user_sessions: List[int] = []

    async def on_get(self, user: User, day: int = 0) -> None:
        """Load the schedule for conference day ``day`` as seen by ``user``."""
        self.is_admin = await self._is_admin(user)

        user_sessions = await self._api_client.get_sessions_by_attendee(user.name)
        self.user_sessions = [s.id for s in user_sessions]

        self.current_day_offset = day

        sessions = await self._get_sessions()

        self.day_offsets = get_day_offsets(sessions)
        self.sessions = get_sessions_for_day(sessions, day)

        logger.debug(
            "Day %s: %s time slots, %s conference days",
            day, len(self.sessions), len(self.day_offsets),
        )

    async def _get_sessions(self) -> List[Session]:
        return await self._api_client.get_sessions()

    async def _is_admin(self, user: User) -> bool:
        try:
            result = await self._authorization_service.authorize(user, ADMIN_POLICY)
        except Exception:
            logger.warning("Admin check failed for %r", user.name, exc_info=True)
            return False
        return result.succeeded

    async def on_post(self, user: User, session_id: int) -> RedirectResult:
        """Add a session to the user's schedule."""
        await self._api_client.add_session_to_attendee(user.name, session_id)
        return RedirectResult()

    async def on_post_remove(self, user: User, session_id: int) -> RedirectResult:
        """Remove a session from the user's schedule."""
        await self._api_client.remove_session_from_attendee(user.name, session_id)
        return RedirectResult()

    def is_in_schedule(self, session_id: int) -> bool:
        return session_id in self.user_sessions
