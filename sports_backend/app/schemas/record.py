"""
Base model shared by all stored entities.

Records are deliberately open: only ``id`` is declared, every other
field is accepted as an extra and round-trips unchanged.  Services
store ``record.to_dict()`` rather than the model instance so that what
comes back out of a store is exactly what the client sent.
"""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field


class Record(BaseModel):
    """An identified record with arbitrary additional attributes."""

    model_config = ConfigDict(extra="allow")

    id: str = Field(..., examples=["r1"])

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")
