"""Dashboard UI component for the conference schedule."""
import asyncio
import logging
from itertools import islice
from typing import Iterable, List

import streamlit as st

from src.models.schedule import DayOffset, TimeSlot
from src.models.session import Session
from src.services.admin_service import AuthorizationService, get_current_user
from src.services.api_client import ApiClient
from src.ui.html_utils import html_block, html_text
from src.ui.index_page import IndexPage, RedirectResult
from src.utils.date_utils import format_time_slot
from src.utils.validation import parse_day_param, validate_session_id

logger = logging.getLogger(__name__)

DAY_LABELS = {
    "Monday": "週一",
    "Tuesday": "週二",
    "Wednesday": "週三",
    "Thursday": "週四",
    "Friday": "週五",
    "Saturday": "週六",
    "Sunday": "週日",
}

TRACK_BADGES = (
    "linear-gradient(135deg, #60a5fa 0%, #a855f7 100%)",
    "linear-gradient(135deg, #a855f7 0%, #ec4899 100%)",
    "linear-gradient(135deg, #f97316 0%, #ef4444 100%)",
    "linear-gradient(135deg, #5eead4 0%, #22d3ee 100%)",
)

CARDS_PER_ROW = 4


def build_index_page() -> IndexPage:
    """Create the page controller with its production collaborators."""
    return IndexPage(ApiClient.from_settings(), AuthorizationService())


def _chunk(items: Iterable[Session], size: int) -> Iterable[List[Session]]:
    """Yield successive chunks from iterable."""
    iterator = iter(items)
    while True:
        batch = list(islice(iterator, size))
        if not batch:
            break
        yield batch


def _day_tab_label(day_offset: DayOffset) -> str:
    """Label for a day tab, e.g. "Day 1 · 週二"."""
    label = f"Day {day_offset.offset + 1}"
    if day_offset.day_of_week:
        label += f" · {DAY_LABELS.get(day_offset.day_of_week, day_offset.day_of_week)}"
    return label


def _track_badge(track_id) -> str:
    if track_id is None:
        return TRACK_BADGES[-1]
    return TRACK_BADGES[track_id % len(TRACK_BADGES)]


def _time_slot_label(slot: TimeSlot) -> str:
    """Heading for a time slot, using the first session's end time when known."""
    end_time = slot.sessions[0].end_time if slot.sessions else None
    return format_time_slot(slot.start_time, end_time)


def _session_card_html(session: Session, in_schedule: bool = False, is_admin: bool = False) -> str:
    """產生議程卡片的 HTML。"""
    track_label = session.track_name or (
        f"Track {session.track_id}" if session.track_id is not None else "一般"
    )
    speakers = "、".join(html_text(name) for name in session.get_speaker_names())
    favorite_html = (
        '<span class="session-card__favorite" title="已加入我的議程">★</span>'
        if in_schedule else ""
    )
    admin_html = (
        f'<div class="session-card__admin">#{session.id}</div>' if is_admin else ""
    )

    return html_block(
        f"""
        <div class="session-card{' session-card--saved' if in_schedule else ''}">
            <div class="session-card__badge" style="background: {_track_badge(session.track_id)};">
                <span>{html_text(track_label)}</span>
            </div>
            {favorite_html}
            <div class="session-card__title-wrapper">
                <h3 class="session-card__title">{html_text(session.title)}</h3>
            </div>
            <div class="session-card__speaker">{speakers}</div>
            {admin_html}
        </div>
        """
    )


def _inject_dashboard_styles():
    """注入儀表板專用 CSS。"""
    st.markdown(
        html_block(
            """
            <style>
            .dashboard-heading {
                text-align: center;
                margin-bottom: 14px;
            }
            .dashboard-heading__title {
                font-size: 28px;
                font-weight: 800;
                background: linear-gradient(135deg, #6d28d9 0%, #ec4899 100%);
                -webkit-background-clip: text;
                -webkit-text-fill-color: transparent;
                background-clip: text;
                margin: 0;
            }
            .dashboard-heading__desc {
                margin-top: 4px;
                color: #cbd5f5;
                letter-spacing: 0.05em;
                font-size: 13px;
            }
            .time-slot__heading {
                color: #f5d0ff;
                font-weight: 700;
                font-size: 18px;
                letter-spacing: 0.05em;
                margin: 24px 0 12px;
                border-left: 4px solid #a855f7;
                padding-left: 12px;
            }
            .session-card {
                background: rgba(15, 17, 40, 0.92);
                border-radius: 20px;
                padding: 22px 22px 26px;
                position: relative;
                min-height: 180px;
                display: flex;
                flex-direction: column;
                gap: 12px;
                border: 1px solid rgba(148, 163, 184, 0.18);
                width: 100%;
            }
            .session-card--saved {
                border-color: rgba(236, 72, 153, 0.65);
                box-shadow: 0 20px 40px 0 rgba(236, 72, 153, 0.25);
            }
            .session-card__badge {
                position: absolute;
                top: -12px;
                left: 22px;
                padding: 6px 12px;
                border-radius: 10px;
                font-weight: 700;
                font-size: 12px;
                letter-spacing: 0.08em;
                color: #161030;
            }
            .session-card__favorite {
                position: absolute;
                top: 14px;
                right: 18px;
                color: #ec4899;
                font-size: 20px;
            }
            .session-card__title-wrapper {
                margin-top: 18px;
                min-height: 55px;
            }
            .session-card__title {
                margin: 0;
                font-size: 20px;
                font-weight: 700;
                color: #f8fafc;
                line-height: 1.4;
            }
            .session-card__speaker {
                font-size: 14px;
                color: #e2e8f0;
                font-weight: 600;
            }
            .session-card__admin {
                color: rgba(148, 163, 184, 0.85);
                font-size: 12px;
                letter-spacing: 0.04em;
            }
            </style>
            """
        ),
        unsafe_allow_html=True,
    )


def _follow_redirect(redirect: RedirectResult) -> None:
    """Show the redirect target on a fresh rerun."""
    logger.debug("Redirecting to %s", redirect.page)
    st.query_params.from_dict(redirect.query_params)
    st.session_state.current_page = redirect.page
    st.rerun()


def _render_day_tabs(page: IndexPage) -> None:
    """Render one button per conference day; the current day is highlighted."""
    if not page.day_offsets:
        return

    cols = st.columns(len(page.day_offsets), gap="small")
    for col, day_offset in zip(cols, page.day_offsets):
        with col:
            is_current = day_offset.offset == page.current_day_offset
            if st.button(
                _day_tab_label(day_offset),
                key=f"day_tab_{day_offset.offset}",
                use_container_width=True,
                type="primary" if is_current else "secondary",
            ):
                st.query_params["day"] = str(day_offset.offset)
                st.rerun()


def _render_session_actions(page: IndexPage, session: Session) -> None:
    """Render the add/remove button for a signed-in attendee."""
    user = get_current_user()
    if not user.is_authenticated:
        return

    is_valid, error_msg = validate_session_id(session.id)
    if not is_valid:
        st.error(error_msg)
        return

    if page.is_in_schedule(session.id):
        if st.button("移除議程", key=f"remove_session_{session.id}", use_container_width=True):
            redirect = asyncio.run(page.on_post_remove(user, session.id))
            _follow_redirect(redirect)
    else:
        if st.button(
            "⭐ 加入我的議程",
            key=f"add_session_{session.id}",
            use_container_width=True,
            type="primary",
        ):
            redirect = asyncio.run(page.on_post(user, session.id))
            _follow_redirect(redirect)


def _render_time_slot(page: IndexPage, slot: TimeSlot) -> None:
    st.markdown(
        f"<div class='time-slot__heading'>{_time_slot_label(slot)}</div>",
        unsafe_allow_html=True,
    )
    for row in _chunk(slot.sessions, CARDS_PER_ROW):
        cols = st.columns(CARDS_PER_ROW, gap="large")
        for col, session in zip(cols, row):
            with col:
                st.markdown(
                    _session_card_html(
                        session,
                        in_schedule=page.is_in_schedule(session.id),
                        is_admin=page.is_admin,
                    ),
                    unsafe_allow_html=True,
                )
                _render_session_actions(page, session)


def render_dashboard():
    """渲染議程表頁面。"""
    _inject_dashboard_styles()

    st.markdown(html_block("""
        <div class="dashboard-heading">
            <h2 class="dashboard-heading__title">會議議程</h2>
            <div class="dashboard-heading__desc">挑選議程，安排屬於你的會議行程</div>
        </div>
    """), unsafe_allow_html=True)

    day = parse_day_param(st.query_params.get("day"))
    user = get_current_user()

    # API errors propagate to the page error boundary in app.py
    page = build_index_page()
    asyncio.run(page.on_get(user, day))

    if page.is_admin:
        st.caption("🛠️ 管理員模式")
    if not user.is_authenticated:
        st.info("登入後即可將議程加入我的議程。")

    if not page.day_offsets:
        st.info("目前尚未建立任何議程。")
        return

    _render_day_tabs(page)

    if not page.sessions:
        st.warning("這一天沒有安排議程。")
        return

    for slot in page.sessions:
        _render_time_slot(page, slot)
