"""
Top-level API router.

Aggregates the per-entity routers under their collection prefixes.
The application factory mounts this router under ``/api``.
"""

from fastapi import APIRouter

from .endpoints import events, teams, tournaments, users

router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(events.router, prefix="/events", tags=["events"])
router.include_router(tournaments.router, prefix="/tournaments", tags=["tournaments"])
router.include_router(teams.router, prefix="/teams", tags=["teams"])
