"""
Persistence adapters for records.

``base.RecordStorage`` is the port the service depends on;
``sqlite_storage`` and ``memory_storage`` provide implementations.
"""

from .base import RecordStorage  # noqa: F401
from .memory_storage import InMemoryRecordStorage  # noqa: F401
from .sqlite_storage import SQLiteRecordStorage  # noqa: F401
