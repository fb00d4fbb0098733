"""
Tests for the team endpoints.
"""

import pytest


class TestTeams:
    """Tests for /api/teams."""

    @pytest.fixture
    def teams(self, client):
        client.post("/api/tournaments", json={"id": "t1", "name": "Cup"})
        client.post("/api/teams", json={"id": "a", "tournamentId": "t1"})
        client.post("/api/teams", json={"id": "b", "tournamentId": "t2"})
        client.post("/api/teams", json={"id": "c", "name": "Free agents"})
        return client

    def test_filter_by_tournament(self, teams):
        response = teams.get("/api/teams", params={"tournamentId": "t1"})

        assert response.status_code == 200
        assert response.json() == [{"id": "a", "tournamentId": "t1"}]

    def test_without_filter_returns_all(self, teams):
        ids = sorted(team["id"] for team in teams.get("/api/teams").json())
        assert ids == ["a", "b", "c"]

    def test_filter_is_exact_match(self, teams):
        assert teams.get("/api/teams", params={"tournamentId": "T1"}).json() == []

    def test_empty_filter_returns_all(self, teams):
        assert len(teams.get("/api/teams?tournamentId=").json()) == 3

    def test_tournament_is_not_checked(self, client):
        response = client.post("/api/teams", json={"id": "x", "tournamentId": "missing"})
        assert response.status_code == 201

    def test_get_unknown_team_is_404(self, client):
        response = client.get("/api/teams/zzz")

        assert response.status_code == 404
        assert response.json() == {"error": "Team not found"}

    def test_put_moves_team_to_other_tournament(self, teams):
        teams.put("/api/teams/a", json={"id": "a", "tournamentId": "t2"})

        moved = teams.get("/api/teams", params={"tournamentId": "t2"}).json()

        assert sorted(team["id"] for team in moved) == ["a", "b"]

    def test_teams_cannot_be_deleted(self, teams):
        assert teams.delete("/api/teams/a").status_code == 405
