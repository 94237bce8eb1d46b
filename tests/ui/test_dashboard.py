"""Tests for dashboard UI helpers."""
from datetime import datetime
from unittest.mock import patch

import pytest

from src.models.schedule import DayOffset, TimeSlot
from src.models.session import Session
from src.models.speaker import Speaker
from src.ui.dashboard import (
    _chunk,
    _day_tab_label,
    _session_card_html,
    _time_slot_label,
    _track_badge,
    build_index_page,
)
from src.ui.html_utils import html_block, html_text
from src.ui.index_page import IndexPage


@pytest.fixture
def session():
    return Session(
        id=7,
        title="Async <Python>",
        track_id=2,
        track_name="Web",
        start_time=datetime(2019, 1, 1, 9, 0),
        end_time=datetime(2019, 1, 1, 10, 0),
        speakers=[Speaker(id=1, name="Ada"), Speaker(id=2, name="Grace")],
    )


class TestSessionCardHtml:
    """Tests for session card rendering."""

    def test_card_contains_title_track_and_speakers(self, session):
        html = _session_card_html(session)

        assert "Web" in html
        assert "Ada、Grace" in html

    def test_title_is_escaped(self, session):
        html = _session_card_html(session)

        assert "Async &lt;Python&gt;" in html
        assert "<Python>" not in html

    def test_saved_session_is_marked(self, session):
        html = _session_card_html(session, in_schedule=True)

        assert "session-card--saved" in html
        assert "★" in html

    def test_unsaved_session_has_no_marker(self, session):
        html = _session_card_html(session)

        assert "session-card--saved" not in html
        assert "★" not in html

    def test_admin_sees_session_id(self, session):
        assert "#7" in _session_card_html(session, is_admin=True)
        assert "#7" not in _session_card_html(session, is_admin=False)

    def test_track_fallback_labels(self):
        assert "Track 3" in _session_card_html(Session(id=1, track_id=3))
        assert "一般" in _session_card_html(Session(id=1))

    def test_no_line_starts_with_indentation(self, session):
        html = _session_card_html(session)

        assert all(not line.startswith(" ") for line in html.splitlines())


class TestLabels:
    """Tests for day tab and time slot labels."""

    def test_day_tab_label(self):
        assert _day_tab_label(DayOffset(0, "Tuesday")) == "Day 1 · 週二"

    def test_day_tab_label_without_weekday(self):
        assert _day_tab_label(DayOffset(2, None)) == "Day 3"

    def test_time_slot_label_uses_end_time(self, session):
        slot = TimeSlot(start_time=session.start_time, sessions=[session])

        assert _time_slot_label(slot) == "09:00-10:00"

    def test_time_slot_label_without_sessions(self):
        slot = TimeSlot(start_time=datetime(2019, 1, 1, 13, 30))

        assert _time_slot_label(slot) == "13:30"


class TestHelpers:
    """Tests for small rendering helpers."""

    def test_chunk(self):
        assert list(_chunk(range(5), 2)) == [[0, 1], [2, 3], [4]]

    def test_chunk_empty(self):
        assert list(_chunk([], 4)) == []

    def test_track_badge_cycles(self):
        assert _track_badge(1) == _track_badge(5)
        assert _track_badge(None).startswith("linear-gradient")

    def test_html_block_strips_indentation(self):
        assert html_block("""
            <div>
                <span>x</span>
            </div>
        """) == "<div>\n<span>x</span>\n</div>"

    def test_html_text(self):
        assert html_text('"a" & b') == "&quot;a&quot; &amp; b"
        assert html_text(None) == ""

    @patch('src.ui.dashboard.ApiClient.from_settings')
    def test_build_index_page(self, mock_from_settings):
        page = build_index_page()

        assert isinstance(page, IndexPage)
        mock_from_settings.assert_called_once_with()
