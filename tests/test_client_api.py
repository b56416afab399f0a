"""
End-to-end tests of the Streamlit client's API service against the real
routes, including the sign-up / sign-in / submit scenario.
"""

from datetime import date

import requests

from client.core.forms import build_achievement
from client.core.navigation import Event, Screen, UIState, transition
from client.core.session import ClientContext
from tests.conftest import RAN_5K_WHEN


def signed_in_context(api, username="alice", password="pw1"):
    assert api.create_user(username, password) == {"username": username}
    result = api.sign_in(username, password)
    ctx = ClientContext()
    ctx.sign_in(result["username"], result["access_token"])
    return ctx


class TestScenario:
    def test_alice_signs_up_signs_in_and_records_a_5k(self, live_api):
        ui = UIState()

        assert live_api.create_user("alice", "pw1") == {"username": "alice"}
        ui = transition(ui, Event.SIGNED_UP)

        result = live_api.sign_in("alice", "pw1")
        assert "error" not in result
        ctx = ClientContext()
        ctx.sign_in(result["username"], result["access_token"])
        ui = transition(ui, Event.SIGNED_IN)
        assert ui.screen == Screen.ADD

        payload = build_achievement("Ran 5k", ["Grit"], date(2024, 3, 9), "Health")
        created = live_api.create_achievement(ctx, payload)
        assert "error" not in created
        ui = transition(ui, Event.SUBMITTED)
        assert ui.screen == Screen.TIMELINE

        achievements = live_api.list_achievements(ctx)
        assert len(achievements) == 1
        entry = achievements[0]
        assert entry["user"] == "alice"
        assert entry["achieveWhat"] == "Ran 5k"
        assert entry["achieveHow"] == ["Grit"]
        assert entry["achieveWhen"] == RAN_5K_WHEN
        assert entry["achieveWhy"] == "Health"

    def test_returning_user_reaches_home(self, live_api):
        live_api.create_user("alice", "pw1")
        result = live_api.sign_in("alice", "pw1")
        assert result["username"] == "alice"
        ui = transition(UIState(screen=Screen.SIGNIN), Event.SIGNED_IN)
        assert ui.screen == Screen.HOME


class TestRestoreSession:
    def test_username_comes_from_server(self, live_api):
        live_api.create_user("alice", "pw1")
        token = live_api.sign_in("alice", "pw1")["access_token"]

        ctx = ClientContext()
        assert ctx.restore(token, live_api.get_user_info) is True
        assert ctx.username == "alice"
        assert ctx.signed_in

    def test_rejected_token_leaves_context_signed_out(self, live_api):
        ctx = ClientContext()
        assert ctx.restore("not-a-token", live_api.get_user_info) is False
        assert not ctx.signed_in
        assert ctx.access_token is None


class TestErrors:
    def test_duplicate_signup_returns_error_dict(self, live_api):
        live_api.create_user("alice", "pw1")
        result = live_api.create_user("alice", "pw1")
        assert "error" in result
        assert "400" in result["error"]

    def test_bad_signin_returns_error_dict(self, live_api):
        result = live_api.sign_in("alice", "wrong")
        assert "error" in result

    def test_unauthenticated_list_returns_error_dict(self, live_api):
        result = live_api.list_achievements(ClientContext())
        assert isinstance(result, dict)
        assert "401" in result["error"]

    def test_transport_error_is_reported(self, live_api, monkeypatch):
        def boom(url, **kwargs):
            raise requests.ConnectionError("server down")

        monkeypatch.setattr(live_api.requests, "post", boom)
        result = live_api.sign_in("alice", "pw1")
        assert result == {"error": "Sign in failed: server down"}


class TestEditDelete:
    def test_edit_round_trip(self, live_api):
        ctx = signed_in_context(live_api)
        created = live_api.create_achievement(
            ctx, build_achievement("Ran 5k", ["Grit"], date(2024, 3, 9), "Health"))

        fetched = live_api.get_achievement(ctx, created["id"])
        assert fetched == created

        update = build_achievement("Ran 10k", ["Grit", "Focus"], date(2024, 3, 9), "Health")
        assert live_api.update_achievement(ctx, created["id"], update) is True

        fetched = live_api.get_achievement(ctx, created["id"])
        assert fetched["achieveWhat"] == "Ran 10k"
        assert fetched["achieveHow"] == ["Grit", "Focus"]

    def test_delete_then_fetch_is_not_found(self, live_api):
        ctx = signed_in_context(live_api)
        created = live_api.create_achievement(
            ctx, build_achievement("Ran 5k", ["Grit"], None, ""))
        assert live_api.delete_achievement(ctx, created["id"]) is True

        result = live_api.get_achievement(ctx, created["id"])
        assert "404" in result["error"]
        assert live_api.list_achievements(ctx) == []

    def test_cannot_touch_another_users_record(self, live_api):
        alice = signed_in_context(live_api, "alice", "pw1")
        bob = signed_in_context(live_api, "bob", "pw2")
        created = live_api.create_achievement(alice, build_achievement("Ran 5k", [], None, ""))

        assert "403" in live_api.delete_achievement(bob, created["id"])["error"]
        assert "403" in live_api.update_achievement(bob, created["id"], {"achieveWhat": "x"})["error"]
