"""
Event endpoints.

Full CRUD over the events collection.  Records are stored as sent;
deletes succeed whether or not the event existed.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, status

from sports_backend.app.api.deps import get_event_service
from sports_backend.app.schemas.event import Event
from sports_backend.app.services.event_service import EventService

router = APIRouter()


@router.get("", response_model=List[Dict[str, Any]])
async def list_events(service: EventService = Depends(get_event_service)) -> List[Dict[str, Any]]:
    """Return every stored event.  Order is not guaranteed."""
    return await service.list()


@router.get("/{event_id}", response_model=Dict[str, Any])
async def get_event(
    event_id: str,
    service: EventService = Depends(get_event_service),
) -> Dict[str, Any]:
    return await service.get(event_id)


@router.post("", response_model=Dict[str, Any], status_code=status.HTTP_201_CREATED)
async def create_event(
    event: Event,
    service: EventService = Depends(get_event_service),
) -> Dict[str, Any]:
    return await service.create(event)


@router.put("/{event_id}", response_model=Dict[str, Any])
async def replace_event(
    event_id: str,
    event: Event,
    service: EventService = Depends(get_event_service),
) -> Dict[str, Any]:
    """Replace (or create) the event stored under ``event_id``."""
    return await service.replace(event_id, event)


@router.delete("/{event_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_event(
    event_id: str,
    service: EventService = Depends(get_event_service),
) -> None:
    """Delete an event.  Always responds 204, even if the event was unknown."""
    await service.delete(event_id)
    return None
