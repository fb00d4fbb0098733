"""
FastAPI dependencies that hand services to the endpoints.

The stores live on ``app.state.stores`` (set by ``create_app``); each
dependency wraps the matching store in its service for the duration of
a request.
"""

from fastapi import Depends, Request

from ..services import EventService, Stores, TeamService, TournamentService, UserService


def get_stores(request: Request) -> Stores:
    return request.app.state.stores


def get_user_service(stores: Stores = Depends(get_stores)) -> UserService:
    return UserService(stores.users)


def get_event_service(stores: Stores = Depends(get_stores)) -> EventService:
    return EventService(stores.events)


def get_tournament_service(stores: Stores = Depends(get_stores)) -> TournamentService:
    return TournamentService(stores.tournaments)


def get_team_service(stores: Stores = Depends(get_stores)) -> TeamService:
    return TeamService(stores.teams)
