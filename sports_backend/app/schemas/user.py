"""Pydantic model for user records."""

from pydantic import ConfigDict

from .record import Record


class User(Record):
    """A user profile.  Any fields besides ``id`` are stored as sent."""

    model_config = ConfigDict(
        extra="allow",
        json_schema_extra={"example": {"id": "u1", "name": "Bob"}},
    )
