"""Session data model."""
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict, List, Optional

from src.models.speaker import Speaker
from src.utils.date_utils import parse_iso_datetime
from src.utils.validation import validate_session_payload


@dataclass
class Session:
    """Conference session as returned by the conference API."""

    id: int
    title: str = ""
    track_id: Optional[int] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    abstract: Optional[str] = None
    track_name: Optional[str] = None
    speakers: List[Speaker] = field(default_factory=list)

    def __post_init__(self):
        """Validate session data after initialization."""
        if not isinstance(self.id, int) or isinstance(self.id, bool):
            raise ValueError(f"Session ID must be an integer: {self.id!r}")

        if self.track_id is not None and (
            not isinstance(self.track_id, int) or isinstance(self.track_id, bool)
        ):
            raise ValueError(f"Track ID must be an integer: {self.track_id!r}")

    @property
    def start_date(self) -> Optional[date]:
        """Calendar date of the start time, in the start time's own offset."""
        if self.start_time is None:
            return None
        return self.start_time.date()

    @property
    def end_date(self) -> Optional[date]:
        """Calendar date of the end time, in the end time's own offset."""
        if self.end_time is None:
            return None
        return self.end_time.date()

    def duration_minutes(self) -> Optional[int]:
        """Length of the session in whole minutes, None if a time is missing."""
        if self.start_time is None or self.end_time is None:
            return None
        return int((self.end_time - self.start_time).total_seconds() // 60)

    def get_speaker_names(self) -> List[str]:
        """
        Get speaker names in the order the API lists them.

        Returns:
            List of names
        """
        return [s.name for s in self.speakers]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Session":
        """
        Build a Session from a camelCase API payload.

        Args:
            data: Session dictionary (``id``, ``title``, ``trackId``,
                ``startTime``, ``endTime``, ``abstract``, ``track``,
                ``speakers``)

        Raises:
            ValueError: If the payload is malformed
        """
        validate_session_payload(data)

        track = data.get("track") or {}
        speakers = [Speaker.from_dict(s) for s in data.get("speakers") or []]

        return cls(
            id=data["id"],
            title=data.get("title") or "",
            track_id=data.get("trackId"),
            start_time=parse_iso_datetime(data.get("startTime")),
            end_time=parse_iso_datetime(data.get("endTime")),
            abstract=data.get("abstract"),
            track_name=track.get("name"),
            speakers=speakers,
        )
