"""
Pydantic schema definitions for API payloads.

Every entity is an open record: a required string ``id`` plus any
other JSON fields the client sends, which are kept verbatim.
"""

from .record import Record
from .user import User
from .event import Event
from .tournament import Tournament
from .team import Team

__all__ = ["Record", "User", "Event", "Tournament", "Team"]
