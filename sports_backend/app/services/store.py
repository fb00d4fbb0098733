"""
In-memory collection stores.

A ``CollectionStore`` maps string identifiers to records (plain
dictionaries).  Nothing is persisted; all data is lost when the
process exits.  ``Stores`` bundles the four collections the API
serves so that an application instance owns its data and tests can
start from empty stores.
"""

import threading
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

RecordDict = Dict[str, Any]


class CollectionStore:
    """Unordered mapping from identifier to record for one entity type.

    Iteration follows insertion order, but callers must not rely on
    it.  All methods take an internal lock, so a store can be shared
    between threads.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._records: Dict[str, RecordDict] = {}
        self._lock = threading.Lock()

    def get(self, record_id: str) -> Optional[RecordDict]:
        with self._lock:
            return self._records.get(record_id)

    def set(self, record_id: str, record: RecordDict) -> RecordDict:
        """Store ``record`` under ``record_id``, replacing any previous record."""
        with self._lock:
            self._records[record_id] = record
        return record

    def delete(self, record_id: str) -> bool:
        """Remove a record.  Returns ``False`` if nothing was stored under the id."""
        with self._lock:
            return self._records.pop(record_id, None) is not None

    def values(self) -> List[RecordDict]:
        with self._lock:
            return list(self._records.values())

    def clear(self) -> None:
        with self._lock:
            self._records.clear()

    def __contains__(self, record_id: object) -> bool:
        with self._lock:
            return record_id in self._records

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def __repr__(self) -> str:
        return f"CollectionStore({self.name!r}, records={len(self)})"


@dataclass
class Stores:
    """The four collections served by the API."""

    users: CollectionStore = field(default_factory=lambda: CollectionStore("users"))
    events: CollectionStore = field(default_factory=lambda: CollectionStore("events"))
    tournaments: CollectionStore = field(default_factory=lambda: CollectionStore("tournaments"))
    teams: CollectionStore = field(default_factory=lambda: CollectionStore("teams"))
