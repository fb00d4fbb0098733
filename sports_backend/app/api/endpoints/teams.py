"""
Team endpoints.

Teams can be listed (optionally by tournament), fetched, created and
replaced.  There is no delete route for teams.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Query, status

from sports_backend.app.api.deps import get_team_service
from sports_backend.app.schemas.team import Team
from sports_backend.app.services.team_service import TeamService

router = APIRouter()


@router.get("", response_model=List[Dict[str, Any]])
async def list_teams(
    tournament_id: Optional[str] = Query(None, alias="tournamentId"),
    service: TeamService = Depends(get_team_service),
) -> List[Dict[str, Any]]:
    """Return all teams, or only those of the tournament given by ``tournamentId``."""
    return await service.list(tournament_id)


@router.get("/{team_id}", response_model=Dict[str, Any])
async def get_team(
    team_id: str,
    service: TeamService = Depends(get_team_service),
) -> Dict[str, Any]:
    return await service.get(team_id)


@router.post("", response_model=Dict[str, Any], status_code=status.HTTP_201_CREATED)
async def create_team(
    team: Team,
    service: TeamService = Depends(get_team_service),
) -> Dict[str, Any]:
    return await service.create(team)


@router.put("/{team_id}", response_model=Dict[str, Any])
async def replace_team(
    team_id: str,
    team: Team,
    service: TeamService = Depends(get_team_service),
) -> Dict[str, Any]:
    return await service.replace(team_id, team)
