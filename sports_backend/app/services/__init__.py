"""
Service layer abstraction.

Each service encapsulates the operations for one entity type on top of
a ``CollectionStore``.  Stores are plain in-memory mappings; swapping
them for a persistent backend only requires a class with the same
methods.
"""

from .store import CollectionStore, Stores
from .record_service import RecordNotFound, RecordService
from .user_service import UserService
from .event_service import EventService
from .tournament_service import TournamentService
from .team_service import TeamService

__all__ = [
    "CollectionStore",
    "Stores",
    "RecordNotFound",
    "RecordService",
    "UserService",
    "EventService",
    "TournamentService",
    "TeamService",
]
