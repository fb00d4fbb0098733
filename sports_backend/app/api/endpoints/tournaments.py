"""
Tournament endpoints.

Full CRUD over the tournaments collection.  Deleting a tournament does
not touch teams that reference it.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, status

from sports_backend.app.api.deps import get_tournament_service
from sports_backend.app.schemas.tournament import Tournament
from sports_backend.app.services.tournament_service import TournamentService

router = APIRouter()


@router.get("", response_model=List[Dict[str, Any]])
async def list_tournaments(
    service: TournamentService = Depends(get_tournament_service),
) -> List[Dict[str, Any]]:
    return await service.list()


@router.get("/{tournament_id}", response_model=Dict[str, Any])
async def get_tournament(
    tournament_id: str,
    service: TournamentService = Depends(get_tournament_service),
) -> Dict[str, Any]:
    return await service.get(tournament_id)


@router.post("", response_model=Dict[str, Any], status_code=status.HTTP_201_CREATED)
async def create_tournament(
    tournament: Tournament,
    service: TournamentService = Depends(get_tournament_service),
) -> Dict[str, Any]:
    return await service.create(tournament)


@router.put("/{tournament_id}", response_model=Dict[str, Any])
async def replace_tournament(
    tournament_id: str,
    tournament: Tournament,
    service: TournamentService = Depends(get_tournament_service),
) -> Dict[str, Any]:
    return await service.replace(tournament_id, tournament)


@router.delete("/{tournament_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_tournament(
    tournament_id: str,
    service: TournamentService = Depends(get_tournament_service),
) -> None:
    await service.delete(tournament_id)
    return None
