"""
SQLite adapter for the record storage port.

Every call opens its own connection via ``core.db.get_connection`` and
closes it before returning, so the adapter holds no state besides the
database path and is safe to share between request threads.  SQLite's
own file locking serialises concurrent writers.

All queries use parameterized statements.  Any ``sqlite3.Error`` is
logged and re-raised as ``StorageError`` so the HTTP layer can answer
with a generic server error.
"""

from __future__ import annotations

import logging
import sqlite3
from contextlib import contextmanager
from typing import Iterator, List, Optional

from ..core.db import get_connection, get_database_path
from ..core.errors import StorageError
from ..schemas.record import Record

logger = logging.getLogger(__name__)

# SQLite INTEGER is a signed 64-bit value; no row can have an id outside it.
SQLITE_MIN_ID = -(2 ** 63)
SQLITE_MAX_ID = 2 ** 63 - 1


def is_storable_id(record_id: int) -> bool:
    return SQLITE_MIN_ID <= record_id <= SQLITE_MAX_ID


class SQLiteRecordStorage:
    """Record storage backed by the ``records`` table."""

    def __init__(self, database_path: Optional[str] = None) -> None:
        self.database_path = database_path or get_database_path()

    @contextmanager
    def _connection(self, operation: str) -> Iterator[sqlite3.Connection]:
        try:
            conn = get_connection(self.database_path)
        except sqlite3.Error as exc:
            logger.exception("Cannot open database %s", self.database_path)
            raise StorageError(operation, str(exc)) from exc
        try:
            yield conn
            conn.commit()
        except sqlite3.Error as exc:
            conn.rollback()
            logger.exception("Storage operation %s failed", operation)
            raise StorageError(operation, str(exc)) from exc
        finally:
            conn.close()

    def find_all(self) -> List[Record]:
        with self._connection("find_all") as conn:
            rows = conn.execute(
                "SELECT id, name, email FROM records ORDER BY id ASC"
            ).fetchall()
            return [self._row_to_record(row) for row in rows]

    def find_by_id(self, record_id: int) -> Optional[Record]:
        if not is_storable_id(record_id):
            return None
        with self._connection("find_by_id") as conn:
            row = conn.execute(
                "SELECT id, name, email FROM records WHERE id = ?",
                (record_id,),
            ).fetchone()
            return self._row_to_record(row) if row else None

    def find_by_email(self, email: str) -> Optional[Record]:
        with self._connection("find_by_email") as conn:
            row = conn.execute(
                "SELECT id, name, email FROM records WHERE email = ? ORDER BY id ASC LIMIT 1",
                (email,),
            ).fetchone()
            return self._row_to_record(row) if row else None

    def save(self, record: Record) -> Record:
        """Insert a new record or replace an existing one by id.

        With ``record.id`` unset the row is inserted and the id chosen
        by SQLite is returned.  Otherwise the row with that id is
        overwritten (or created with exactly that id if missing).
        """
        if record.id is not None and not is_storable_id(record.id):
            raise StorageError("save", f"id {record.id} is outside the SQLite integer range")
        with self._connection("save") as conn:
            cursor = conn.cursor()
            if record.id is None:
                cursor.execute(
                    "INSERT INTO records (name, email) VALUES (?, ?)",
                    (record.name, record.email),
                )
                record_id = cursor.lastrowid
            else:
                cursor.execute(
                    """
                    INSERT INTO records (id, name, email) VALUES (?, ?, ?)
                    ON CONFLICT(id) DO UPDATE SET
                        name = excluded.name,
                        email = excluded.email,
                        updated_at = CURRENT_TIMESTAMP
                    """,
                    (record.id, record.name, record.email),
                )
                record_id = record.id
            return Record(id=record_id, name=record.name, email=record.email)

    def exists_by_id(self, record_id: int) -> bool:
        if not is_storable_id(record_id):
            return False
        with self._connection("exists_by_id") as conn:
            row = conn.execute(
                "SELECT 1 FROM records WHERE id = ?", (record_id,)
            ).fetchone()
            return row is not None

    def delete_by_id(self, record_id: int) -> None:
        if not is_storable_id(record_id):
            return
        with self._connection("delete_by_id") as conn:
            conn.execute("DELETE FROM records WHERE id = ?", (record_id,))

    @staticmethod
    def _row_to_record(row: sqlite3.Row) -> Record:
        """Convert a database row to a ``Record``."""
        return Record(id=row["id"], name=row["name"], email=row["email"])
