"""
Unit tests for the requests-based API client.
"""

import json
from unittest.mock import Mock

import pytest
import requests

from sports_api import SportsAPI


def make_response(status_code: int, body=None, url: str = "http://server/api") -> requests.Response:
    """Build a real requests.Response without touching the network."""
    response = requests.Response()
    response.status_code = status_code
    response.url = url
    response._content = b"" if body is None else json.dumps(body).encode("utf-8")
    return response


@pytest.fixture
def session():
    return Mock(spec=requests.Session)


@pytest.fixture
def api(session):
    return SportsAPI(base_url="http://server:3000/", session=session)


class TestSportsAPI:
    """Tests for SportsAPI."""

    def test_get_user_success(self, api, session):
        session.request.return_value = make_response(200, {"id": "u1", "name": "Bob"})

        user, error = api.get_user("u1")

        assert user == {"id": "u1", "name": "Bob"}
        assert error is None
        kwargs = session.request.call_args.kwargs
        assert kwargs["method"] == "GET"
        assert kwargs["url"] == "http://server:3000/api/users/u1"

    def test_not_found_uses_error_field(self, api, session):
        session.request.return_value = make_response(404, {"error": "User not found"})

        user, error = api.get_user("ghost")

        assert user is None
        assert error == {"status_code": 404, "message": "User not found"}

    def test_create_team_sends_json_body(self, api, session):
        team = {"id": "a", "tournamentId": "t1"}
        session.request.return_value = make_response(201, team)

        created, error = api.create_team(team)

        assert created == team and error is None
        kwargs = session.request.call_args.kwargs
        assert kwargs["method"] == "POST"
        assert kwargs["url"] == "http://server:3000/api/teams"
        assert kwargs["json"] == team

    def test_update_event_uses_put_with_path_id(self, api, session):
        session.request.return_value = make_response(200, {"id": "e1"})

        api.update_event("e1", {"id": "e1"})

        kwargs = session.request.call_args.kwargs
        assert kwargs["method"] == "PUT"
        assert kwargs["url"] == "http://server:3000/api/events/e1"

    def test_list_teams_with_tournament_filter(self, api, session):
        session.request.return_value = make_response(200, [{"id": "a", "tournamentId": "t1"}])

        teams, error = api.list_teams(tournament_id="t1")

        assert teams == [{"id": "a", "tournamentId": "t1"}]
        assert error is None
        assert session.request.call_args.kwargs["params"] == {"tournamentId": "t1"}

    def test_list_teams_without_filter_sends_no_params(self, api, session):
        session.request.return_value = make_response(200, [])

        api.list_teams()

        assert session.request.call_args.kwargs["params"] is None

    def test_delete_with_empty_response(self, api, session):
        session.request.return_value = make_response(204)

        deleted, error = api.delete_tournament("t1")

        assert deleted is True
        assert error is None

    def test_list_error_returns_empty_list(self, api, session):
        session.request.return_value = make_response(500, {"detail": "boom"})

        events, error = api.list_events()

        assert events == []
        assert error == {"status_code": 500, "message": "boom"}

    def test_connection_error(self, api, session):
        session.request.side_effect = requests.ConnectionError("refused")

        health, error = api.health()

        assert health is None
        assert error["status_code"] is None
        assert "refused" in error["message"]
