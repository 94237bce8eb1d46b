"""Date and time utility functions."""
from datetime import date, datetime, timedelta, timezone
from typing import Optional

DAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)


def parse_iso_datetime(value: Optional[str]) -> Optional[datetime]:
    """
    Parse an ISO 8601 timestamp as sent by the conference API.

    Args:
        value: Timestamp string (e.g., "2019-01-01T09:00:00+01:00"), or None

    Returns:
        Offset-aware datetime (naive strings are taken as UTC), or None for
        a missing value

    Raises:
        ValueError: If the string is not a valid ISO 8601 timestamp
    """
    if value is None:
        return None

    if not isinstance(value, str):
        raise ValueError(f"Invalid datetime format: {value!r}")

    text = value.strip()
    if not text:
        return None

    try:
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError as e:
        raise ValueError(f"Invalid datetime format: {value}") from e

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed


def day_of_week_name(day: date) -> str:
    """Return the English weekday name for a date (e.g., "Tuesday")."""
    return DAY_NAMES[day.weekday()]


def add_days(day: Optional[date], offset: int) -> Optional[date]:
    """Shift a date by a number of days, passing None through."""
    if day is None:
        return None
    return day + timedelta(days=offset)


def format_time_slot(start: datetime, end: Optional[datetime] = None) -> str:
    """
    Format a time slot label.

    Returns:
        "HH:MM" or "HH:MM-HH:MM" when the end time is known
    """
    if end is None:
        return start.strftime("%H:%M")
    return f"{start.strftime('%H:%M')}-{end.strftime('%H:%M')}"
