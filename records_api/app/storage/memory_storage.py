"""
In-memory adapter for the record storage port.

Records live in a dict keyed by id and are lost when the process
exits.  Used by the test suite and by ``STORAGE_BACKEND=memory`` for
throwaway runs.
"""

from __future__ import annotations

import threading
from typing import Dict, List, Optional

from ..schemas.record import Record


class InMemoryRecordStorage:
    """Record storage kept in process memory.

    Ids start at 1 and are never reused, mirroring an autoincrement
    column.  A lock guards the dict because FastAPI runs synchronous
    endpoints in a thread pool.
    """

    def __init__(self) -> None:
        self._records: Dict[int, Record] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def find_all(self) -> List[Record]:
        with self._lock:
            return [record.model_copy() for record in self._records.values()]

    def find_by_id(self, record_id: int) -> Optional[Record]:
        with self._lock:
            record = self._records.get(record_id)
            return record.model_copy() if record else None

    def find_by_email(self, email: str) -> Optional[Record]:
        with self._lock:
            for record in self._records.values():
                if record.email == email:
                    return record.model_copy()
            return None

    def save(self, record: Record) -> Record:
        with self._lock:
            record_id = record.id
            if record_id is None:
                record_id = self._next_id
            # Explicit ids must not collide with future assigned ones.
            self._next_id = max(self._next_id, record_id + 1)
            stored = Record(id=record_id, name=record.name, email=record.email)
            self._records[record_id] = stored
            return stored.model_copy()

    def exists_by_id(self, record_id: int) -> bool:
        with self._lock:
            return record_id in self._records

    def delete_by_id(self, record_id: int) -> None:
        with self._lock:
            self._records.pop(record_id, None)
