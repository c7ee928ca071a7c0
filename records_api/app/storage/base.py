"""Storage port for records.

Defines the interface that persistence adapters must implement.  The
record service depends only on this protocol; concrete adapters live
in sibling modules.
"""

from __future__ import annotations

from typing import List, Optional, Protocol

from ..schemas.record import Record


class RecordStorage(Protocol):
    """CRUD primitives over records.

    Adapters raise ``core.errors.StorageError`` when the backend fails.
    Absence is never an error: lookups return ``None`` or ``False``.
    """

    def find_all(self) -> List[Record]:
        """Return every persisted record in the backend's natural order."""
        ...

    def find_by_id(self, record_id: int) -> Optional[Record]:
        ...

    def find_by_email(self, email: str) -> Optional[Record]:
        ...

    def save(self, record: Record) -> Record:
        """Insert when ``record.id`` is ``None`` (assigning an id), else replace by id."""
        ...

    def exists_by_id(self, record_id: int) -> bool:
        ...

    def delete_by_id(self, record_id: int) -> None:
        ...
