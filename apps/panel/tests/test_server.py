import pytest
from aiohttp.test_utils import make_mocked_request

from bridge import build_router
from server import build_app, make_handler
from state import ControlState


@pytest.fixture
def state():
    """Fresh control state for each test."""
    return ControlState()


@pytest.fixture
async def client(aiohttp_client, state):
    """Create a test client for the aiohttp app."""
    app = build_app(build_router(state))
    return await aiohttp_client(app)


# ---------------------------------------------------------------------------
# GET /
# ---------------------------------------------------------------------------

class TestIndex:
    async def test_returns_200(self, client):
        resp = await client.get("/")
        assert resp.status == 200

    async def test_is_html_with_control_forms(self, client):
        resp = await client.get("/")
        assert resp.content_type == "text/html"
        body = await resp.text()
        assert 'action="/activate"' in body
        assert 'action="/deactivate"' in body
        assert 'action="/calibrate"' in body

    async def test_does_not_mutate_state(self, client, state):
        await client.get("/")
        assert state.snapshot() == {"armed": False, "calibrate": False}


# ---------------------------------------------------------------------------
# Control endpoints
# ---------------------------------------------------------------------------

class TestControl:
    async def test_activate_arms(self, client, state):
        resp = await client.get("/activate")
        assert resp.status == 200
        assert state.armed.get() is True

    async def test_ack_page_redirects_home(self, client):
        resp = await client.get("/activate")
        assert resp.content_type == "text/html"
        body = await resp.text()
        assert 'http-equiv="refresh"' in body
        assert "url='/'" in body

    async def test_deactivate_disarms(self, client, state):
        state.armed.put(True)
        resp = await client.get("/deactivate")
        assert resp.status == 200
        assert state.armed.get() is False

    async def test_calibrate_disarms_and_requests(self, client, state):
        state.armed.put(True)
        resp = await client.get("/calibrate")
        assert resp.status == 200
        assert state.armed.get() is False
        assert state.calibrate.get() is True

    async def test_post_is_accepted(self, client, state):
        resp = await client.post("/activate", data="ignored")
        assert resp.status == 200
        assert state.armed.get() is True

    async def test_query_string_is_ignored(self, client, state):
        resp = await client.get("/activate?armed=0")
        assert resp.status == 200
        assert state.armed.get() is True

    async def test_end_to_end_sequence(self, client, state):
        resp = await client.get("/activate")
        assert resp.status == 200
        assert state.armed.get() is True

        resp = await client.get("/calibrate")
        assert resp.status == 200
        assert state.snapshot() == {"armed": False, "calibrate": True}

        resp = await client.get("/deactivate")
        assert resp.status == 200
        assert state.armed.get() is False

        resp = await client.get("/nope")
        assert resp.status == 404
        assert await resp.text() == "Not found"


# ---------------------------------------------------------------------------
# Unknown routes
# ---------------------------------------------------------------------------

class TestRouting:
    async def test_unknown_route_returns_404(self, client):
        resp = await client.get("/nonexistent")
        assert resp.status == 404
        assert resp.content_type == "text/plain"
        assert await resp.text() == "Not found"

    async def test_trailing_slash_is_a_different_path(self, client, state):
        resp = await client.get("/activate/")
        assert resp.status == 404
        assert state.armed.get() is False

    async def test_paths_are_case_sensitive(self, client, state):
        resp = await client.get("/Activate")
        assert resp.status == 404
        assert state.armed.get() is False

    async def test_percent_encoded_path_is_not_decoded(self, state):
        handler = make_handler(build_router(state))
        resp = await handler(make_mocked_request("GET", "/%61ctivate"))
        assert resp.status == 404
        assert resp.text == "Not found"
        assert state.armed.get() is False

    async def test_query_string_is_stripped_before_routing(self, state):
        handler = make_handler(build_router(state))
        resp = await handler(make_mocked_request("GET", "/activate?armed=0"))
        assert resp.status == 200
        assert state.armed.get() is True
