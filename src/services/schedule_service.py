"""Schedule grouping service: conference days and time slots."""
from datetime import date, datetime
from typing import Dict, List, Optional, Sequence, Tuple

from src.models.schedule import DayOffset, TimeSlot
from src.models.session import Session
from src.utils.date_utils import add_days, day_of_week_name


def get_conference_dates(sessions: Sequence[Session]) -> Tuple[Optional[date], Optional[date]]:
    """
    取得議程涵蓋的日期範圍。

    Args:
        sessions: 所有議程

    Returns:
        Tuple[Optional[date], Optional[date]]: (最早開始日期, 最晚結束日期)，
        沒有時間資料時為 None
    """
    start_dates = [s.start_date for s in sessions if s.start_date is not None]
    end_dates = [s.end_date for s in sessions if s.end_date is not None]

    start_date = min(start_dates) if start_dates else None
    end_date = max(end_dates) if end_dates else None

    return start_date, end_date


def get_number_of_days(sessions: Sequence[Session]) -> int:
    """
    計算會議天數。

    Returns:
        int: (最晚結束日期 - 最早開始日期) + 1；任一端未知或結束早於開始時為 0
    """
    start_date, end_date = get_conference_dates(sessions)

    if start_date is None or end_date is None:
        return 0

    return max((end_date - start_date).days + 1, 0)


def get_day_offsets(sessions: Sequence[Session]) -> List[DayOffset]:
    """
    建立每個會議日的 (偏移量, 星期) 列表。

    Args:
        sessions: 所有議程

    Returns:
        List[DayOffset]: 從 0 開始連續的偏移量，依日期升序排列
    """
    start_date, _ = get_conference_dates(sessions)
    number_of_days = get_number_of_days(sessions)

    return [
        DayOffset(offset, day_of_week_name(add_days(start_date, offset)))
        for offset in range(number_of_days)
    ]


def get_filter_date(sessions: Sequence[Session], day: int) -> Optional[date]:
    """Date shown for the ``day`` offset; None when no session has a start time
    or the offset falls outside the calendar."""
    start_date, _ = get_conference_dates(sessions)
    try:
        return add_days(start_date, day)
    except OverflowError:
        # Offset lands outside the supported calendar range.
        return None


def _track_sort_key(session: Session) -> tuple:
    # Sessions without a track come first.
    return (session.track_id is not None, session.track_id or 0)


def get_sessions_for_day(sessions: Sequence[Session], day: int) -> List[TimeSlot]:
    """
    取得指定會議日的議程，依開始時間分組。

    Args:
        sessions: 所有議程
        day: 相對於第一個會議日的偏移量

    Returns:
        List[TimeSlot]: 依開始時間升序排列的時段，
        每個時段內的議程依 track 編號升序排列
    """
    filter_date = get_filter_date(sessions, day)
    if filter_date is None:
        return []

    day_sessions = [s for s in sessions if s.start_date == filter_date]
    day_sessions.sort(key=_track_sort_key)

    # dict keeps first-seen order; groups are sorted below
    slots: Dict[datetime, TimeSlot] = {}
    for session in day_sessions:
        slot = slots.get(session.start_time)
        if slot is None:
            slot = TimeSlot(start_time=session.start_time)
            slots[session.start_time] = slot
        slot.sessions.append(session)

    return sorted(slots.values(), key=lambda slot: slot.start_time)
