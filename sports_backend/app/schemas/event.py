"""Pydantic model for event records."""

from pydantic import ConfigDict

from .record import Record


class Event(Record):
    """A sports event.  Any fields besides ``id`` are stored as sent."""

    model_config = ConfigDict(
        extra="allow",
        json_schema_extra={
            "example": {"id": "e1", "title": "Friday pickup game", "date": "2025-09-01T18:00:00Z"}
        },
    )
