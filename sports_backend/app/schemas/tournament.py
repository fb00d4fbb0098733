"""Pydantic model for tournament records."""

from pydantic import ConfigDict

from .record import Record


class Tournament(Record):
    """A tournament.  Any fields besides ``id`` are stored as sent."""

    model_config = ConfigDict(
        extra="allow",
        json_schema_extra={"example": {"id": "t1", "name": "Cup"}},
    )
