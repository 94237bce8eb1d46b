"""Shared fixtures: in-memory collaborators and a fake conference API server."""
from datetime import timedelta

import pytest
from aiohttp import web

from src.models.session import Session
from tests.fakes import FakeApiClient, FakeAuthorizationService, at, session_payload


@pytest.fixture
def make_session():
    """Factory for Session objects with one-hour default duration."""

    def _make(session_id, start=None, end=None, track_id=None, title=None):
        if start is not None and end is None:
            end = start + timedelta(hours=1)
        return Session(
            id=session_id,
            title=title or f"Session {session_id}",
            track_id=track_id,
            start_time=start,
            end_time=end,
        )

    return _make


@pytest.fixture
def two_day_sessions(make_session):
    """Sessions on 2019-01-01 (Tuesday) and 2019-01-02 (Wednesday)."""
    return [
        make_session(1, at("2019-01-01", 9), track_id=2),
        make_session(2, at("2019-01-01", 9), track_id=1),
        make_session(3, at("2019-01-01", 11), track_id=1),
        make_session(4, at("2019-01-02", 10), track_id=3),
        make_session(5, at("2019-01-02", 10), track_id=None),
    ]


@pytest.fixture
def fake_api_client(two_day_sessions):
    return FakeApiClient(two_day_sessions)


@pytest.fixture
def fake_authorization():
    return FakeAuthorizationService()


@pytest.fixture
def api_sessions():
    return [
        session_payload(
            1, "2019-01-01T09:00:00+00:00", "2019-01-01T10:00:00+00:00", track_id=2,
            speakers=[{"id": 7, "name": "Ada Lovelace"}],
        ),
        session_payload(2, "2019-01-01T09:00:00+00:00", "2019-01-01T10:00:00+00:00", track_id=1),
        session_payload(3, "2019-01-02T13:00:00+00:00", "2019-01-02T14:00:00+00:00", track_id=1),
    ]


@pytest.fixture
def api_state():
    """Mutable state of the fake API: attendee schedules and a failure switch."""
    return {"schedules": {}, "fail": False}


@pytest.fixture
async def conference_api(aiohttp_server, api_sessions, api_state):
    """Stateful fake of the conference API; every route answers 500 while ``api_state["fail"]`` is set."""
    session_ids = {s["id"] for s in api_sessions}

    async def list_sessions(request):
        if api_state["fail"]:
            raise web.HTTPInternalServerError()
        return web.json_response(api_sessions)

    async def attendee_sessions(request):
        if api_state["fail"]:
            raise web.HTTPInternalServerError()
        name = request.match_info["name"]
        if name not in api_state["schedules"]:
            raise web.HTTPNotFound()
        ids = api_state["schedules"][name]
        return web.json_response([s for s in api_sessions if s["id"] in ids])

    async def add_session(request):
        if api_state["fail"]:
            raise web.HTTPInternalServerError()
        session_id = int(request.match_info["session_id"])
        if session_id not in session_ids:
            raise web.HTTPNotFound()
        api_state["schedules"].setdefault(request.match_info["name"], set()).add(session_id)
        return web.Response(status=204)

    async def remove_session(request):
        if api_state["fail"]:
            raise web.HTTPInternalServerError()
        name = request.match_info["name"]
        session_id = int(request.match_info["session_id"])
        if name not in api_state["schedules"] or session_id not in session_ids:
            raise web.HTTPNotFound()
        api_state["schedules"][name].discard(session_id)
        return web.Response(status=204)

    app = web.Application()
    app.router.add_get("/api/sessions", list_sessions)
    app.router.add_get("/api/attendees/{name}/sessions", attendee_sessions)
    app.router.add_post("/api/attendees/{name}/session/{session_id}", add_session)
    app.router.add_delete("/api/attendees/{name}/session/{session_id}", remove_session)

    return await aiohttp_server(app)


@pytest.fixture
def api_base_url(conference_api):
    return str(conference_api.make_url("/")).rstrip("/")
