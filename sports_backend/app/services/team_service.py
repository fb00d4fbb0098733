"""
Business logic for teams.

Besides the common operations, teams can be listed by the tournament
they belong to.  The ``tournamentId`` is compared as an exact string
match and is never checked against the tournament collection.
"""

from typing import List, Optional

from .record_service import RecordService
from .store import RecordDict


class TeamService(RecordService):
    entity = "Team"

    async def list(self, tournament_id: Optional[str] = None) -> List[RecordDict]:
        """Return all teams, or only those whose ``tournamentId`` equals ``tournament_id``.

        An empty ``tournament_id`` means no filter.
        """
        teams = self.store.values()
        if not tournament_id:
            return teams
        return [team for team in teams if team.get("tournamentId") == tournament_id]
