"""
Generic CRUD operations over a collection store.

``RecordService`` holds the behaviour shared by every entity: lookups
that raise ``RecordNotFound`` on a miss, creates keyed by the record's
own ``id``, upserting replaces keyed by the path id, and idempotent
deletes.  Entity services subclass it to set the display name used in
log lines and error messages.
"""

import logging
from typing import List

from ..schemas.record import Record
from .store import CollectionStore, RecordDict

logger = logging.getLogger(__name__)


class RecordNotFound(ValueError):
    """Raised when a single-record lookup misses.

    ``str(exc)`` is the message returned to API clients, e.g.
    ``"User not found"``.
    """

    def __init__(self, entity: str, record_id: str) -> None:
        self.entity = entity
        self.record_id = record_id
        super().__init__(f"{entity} not found")


class RecordService:
    """CRUD operations for one entity collection."""

    entity: str = "Record"

    def __init__(self, store: CollectionStore) -> None:
        self.store = store

    async def get(self, record_id: str) -> RecordDict:
        record = self.store.get(record_id)
        if record is None:
            raise RecordNotFound(self.entity, record_id)
        return record

    async def list(self) -> List[RecordDict]:
        return self.store.values()

    async def create(self, record: Record) -> RecordDict:
        """Store a record under its own ``id``.

        An existing record with the same id is silently overwritten.
        """
        data = record.to_dict()
        replaced = record.id in self.store
        self.store.set(record.id, data)
        logger.info(
            "%s %s %s", "Replaced" if replaced else "Created", self.entity.lower(), record.id
        )
        return data

    async def replace(self, record_id: str, record: Record) -> RecordDict:
        """Store a record under ``record_id`` whether or not it exists (upsert).

        The body's own ``id`` is kept as sent even when it differs from
        ``record_id``; the record is still stored under ``record_id``.
        """
        if record.id != record_id:
            logger.warning(
                "%s stored under id %r carries a different id %r in its body",
                self.entity,
                record_id,
                record.id,
            )
        data = record.to_dict()
        self.store.set(record_id, data)
        logger.info("Upserted %s %s", self.entity.lower(), record_id)
        return data

    async def delete(self, record_id: str) -> None:
        """Remove a record.  Deleting a missing record is not an error."""
        if self.store.delete(record_id):
            logger.info("Deleted %s %s", self.entity.lower(), record_id)
        else:
            logger.debug("Delete of missing %s %s ignored", self.entity.lower(), record_id)
