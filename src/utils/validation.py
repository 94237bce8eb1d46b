"""Data validation utilities."""
import logging
from typing import Any, Dict, Optional, Tuple

logger = logging.getLogger(__name__)


def validate_session_payload(session_data: Dict[str, Any]) -> bool:
    """
    Validate a session dictionary returned by the conference API.

    Args:
        session_data: Dictionary containing camelCase session fields

    Returns:
        True if valid

    Raises:
        ValueError: If validation fails with detailed message
    """
    if not isinstance(session_data, dict):
        raise ValueError("Session data must be a dictionary")

    if "id" not in session_data:
        raise ValueError("Missing required field: id")

    if not _is_int(session_data["id"]):
        raise ValueError(f"Session ID must be an integer: {session_data['id']!r}")

    track_id = session_data.get("trackId")
    if track_id is not None and not _is_int(track_id):
        raise ValueError(f"Track ID must be an integer: {track_id!r}")

    for field in ("startTime", "endTime"):
        value = session_data.get(field)
        if value is not None and not isinstance(value, str):
            raise ValueError(f"{field} must be an ISO 8601 string: {value!r}")

    speakers = session_data.get("speakers")
    if speakers is not None:
        if not isinstance(speakers, list):
            raise ValueError("Speakers must be a list")
        for speaker in speakers:
            validate_speaker_payload(speaker)

    return True


def validate_speaker_payload(speaker_data: Dict[str, Any]) -> bool:
    """
    Validate a speaker dictionary nested in a session.

    Raises:
        ValueError: If validation fails with detailed message
    """
    if not isinstance(speaker_data, dict):
        raise ValueError("Speaker data must be a dictionary")

    for field in ("id", "name"):
        if field not in speaker_data:
            raise ValueError(f"Missing required speaker field: {field}")

    if not _is_int(speaker_data["id"]):
        raise ValueError(f"Speaker ID must be an integer: {speaker_data['id']!r}")

    if not isinstance(speaker_data["name"], str):
        raise ValueError(f"Speaker name must be a string: {speaker_data['name']!r}")

    return True


def validate_session_id(session_id: Any) -> Tuple[bool, str]:
    """
    Validate a session ID submitted from the page.

    Returns:
        Tuple of (is_valid: bool, error_message: str)
        - (True, "") if valid
        - (False, "議程編號必須為整數") otherwise
    """
    if not _is_int(session_id):
        return False, "議程編號必須為整數"
    return True, ""


def parse_day_param(raw: Optional[str]) -> int:
    """
    Parse the optional ``day`` query parameter.

    Missing or non-integer values fall back to day 0, the first
    conference day.
    """
    if raw is None:
        return 0

    text = str(raw).strip()
    if not text:
        return 0

    try:
        return int(text)
    except ValueError:
        logger.debug("Ignoring non-integer day parameter %r", raw)
        return 0


def validate_name(name: str) -> Tuple[bool, str]:
    """
    Validate attendee name used as the sign-in identity.

    Args:
        name: Name to validate

    Returns:
        Tuple of (is_valid: bool, error_message: str)
        - (True, "") if valid
        - (False, "姓名不可為空") if empty
        - (False, "姓名長度不可超過 50 字元") if too long
        - (False, "姓名不可包含 / 字元") if it contains a slash
    """
    if not name or not name.strip():
        return False, "姓名不可為空"
    if len(name) > 50:
        return False, "姓名長度不可超過 50 字元"
    # Names are used as a path segment in API routes.
    if "/" in name:
        return False, "姓名不可包含 / 字元"
    return True, ""


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
