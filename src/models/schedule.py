"""Derived schedule view models."""
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, NamedTuple, Optional

from src.models.session import Session


class DayOffset(NamedTuple):
    """Conference day as (offset from the first day, weekday name)."""

    offset: int
    day_of_week: Optional[str]


@dataclass
class TimeSlot:
    """Sessions sharing one exact start time."""

    start_time: datetime
    sessions: List[Session] = field(default_factory=list)

    def session_ids(self) -> List[int]:
        return [s.id for s in self.sessions]
