"""
Pydantic model for team records.

Teams are the only records whose contents the backend looks at: the
``tournamentId`` field is used to filter the team list.  It is kept as
an extra rather than a declared field so that teams without it are
returned without a ``tournamentId`` key, exactly as they were sent.
No check is made that the referenced tournament exists.
"""

from pydantic import ConfigDict

from .record import Record


class Team(Record):
    """A team, optionally attached to a tournament via ``tournamentId``."""

    model_config = ConfigDict(
        extra="allow",
        json_schema_extra={"example": {"id": "a", "name": "Blue", "tournamentId": "t1"}},
    )
