"""42Sports API client.

This module defines a small client wrapper around the 42Sports REST
backend.  It uses the ``requests`` library internally and, like the
server, knows about four collections: users, events, tournaments and
teams.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is ``None`` (or an empty list for
list operations) and ``error`` is a dictionary with keys
``status_code`` and ``message``.  The client never raises for HTTP or
connection errors, which keeps calling code such as a mobile
companion script or a bot free of try/except blocks.

Example::

    api = SportsAPI(base_url="http://192.168.1.20:3000")
    api.create_tournament({"id": "t1", "name": "Cup"})
    teams, error = api.list_teams(tournament_id="t1")
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Record = Dict[str, Any]
Error = Dict[str, Any]


class SportsAPI:
    """Client for interacting with the 42Sports backend."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:3000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/api/events``).
            params: Query parameters to include in the request.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.  ``data`` is the parsed JSON body,
            or ``None`` for empty responses such as 204.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    if isinstance(err_json, dict):
                        message = err_json.get("error") or err_json.get("detail") or str(err_json)
                    else:
                        message = str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": str(message)}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _list(self, path: str, params: Dict[str, Any] | None = None) -> Tuple[List[Record], Optional[Error]]:
        data, error = self._request("GET", path, params=params)
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def _delete(self, path: str) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("DELETE", path)
        if error:
            return False, error
        return True, None

    # ------------------------------------------------------------------
    # Health
    # ------------------------------------------------------------------
    def health(self) -> Tuple[Optional[Record], Optional[Error]]:
        """Return the server status, its network address and port."""
        return self._request("GET", "/")

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------
    def get_user(self, user_id: str) -> Tuple[Optional[Record], Optional[Error]]:
        return self._request("GET", f"/api/users/{user_id}")

    def create_user(self, user: Record) -> Tuple[Optional[Record], Optional[Error]]:
        """Create (or overwrite) the user identified by ``user["id"]``."""
        return self._request("POST", "/api/users", json_body=user)

    def update_user(self, user_id: str, user: Record) -> Tuple[Optional[Record], Optional[Error]]:
        """Replace the user stored under ``user_id``, creating it if needed."""
        return self._request("PUT", f"/api/users/{user_id}", json_body=user)

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------
    def list_events(self) -> Tuple[List[Record], Optional[Error]]:
        return self._list("/api/events")

    def get_event(self, event_id: str) -> Tuple[Optional[Record], Optional[Error]]:
        return self._request("GET", f"/api/events/{event_id}")

    def create_event(self, event: Record) -> Tuple[Optional[Record], Optional[Error]]:
        return self._request("POST", "/api/events", json_body=event)

    def update_event(self, event_id: str, event: Record) -> Tuple[Optional[Record], Optional[Error]]:
        return self._request("PUT", f"/api/events/{event_id}", json_body=event)

    def delete_event(self, event_id: str) -> Tuple[bool, Optional[Error]]:
        """Delete an event.  Succeeds even if the event did not exist."""
        return self._delete(f"/api/events/{event_id}")

    # ------------------------------------------------------------------
    # Tournaments
    # ------------------------------------------------------------------
    def list_tournaments(self) -> Tuple[List[Record], Optional[Error]]:
        return self._list("/api/tournaments")

    def get_tournament(self, tournament_id: str) -> Tuple[Optional[Record], Optional[Error]]:
        return self._request("GET", f"/api/tournaments/{tournament_id}")

    def create_tournament(self, tournament: Record) -> Tuple[Optional[Record], Optional[Error]]:
        return self._request("POST", "/api/tournaments", json_body=tournament)

    def update_tournament(
        self, tournament_id: str, tournament: Record
    ) -> Tuple[Optional[Record], Optional[Error]]:
        return self._request("PUT", f"/api/tournaments/{tournament_id}", json_body=tournament)

    def delete_tournament(self, tournament_id: str) -> Tuple[bool, Optional[Error]]:
        return self._delete(f"/api/tournaments/{tournament_id}")

    # ------------------------------------------------------------------
    # Teams
    # ------------------------------------------------------------------
    def list_teams(self, tournament_id: Optional[str] = None) -> Tuple[List[Record], Optional[Error]]:
        """List teams, optionally only those registered for ``tournament_id``."""
        params = {"tournamentId": tournament_id} if tournament_id else None
        return self._list("/api/teams", params=params)

    def get_team(self, team_id: str) -> Tuple[Optional[Record], Optional[Error]]:
        return self._request("GET", f"/api/teams/{team_id}")

    def create_team(self, team: Record) -> Tuple[Optional[Record], Optional[Error]]:
        return self._request("POST", "/api/teams", json_body=team)

    def update_team(self, team_id: str, team: Record) -> Tuple[Optional[Record], Optional[Error]]:
        return self._request("PUT", f"/api/teams/{team_id}", json_body=team)
