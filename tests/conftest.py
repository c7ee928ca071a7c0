"""
Pytest configuration and fixtures
"""
import os
from unittest import mock

import pytest
from fastapi.testclient import TestClient

# Keep the import-time app off the disk; tests build their own apps.
os.environ.setdefault("STORAGE_BACKEND", "memory")

from records_api.app.core.db import init_db
from records_api.app.main import create_app
from records_api.app.schemas.record import Record
from records_api.app.services.record_service import RecordService
from records_api.app.storage.memory_storage import InMemoryRecordStorage
from records_api.app.storage.sqlite_storage import SQLiteRecordStorage


@pytest.fixture
def storage() -> InMemoryRecordStorage:
    return InMemoryRecordStorage()


@pytest.fixture
def spy_storage(storage):
    """In-memory storage wrapped so tests can assert which port methods ran."""
    return mock.MagicMock(wraps=storage)


@pytest.fixture
def service(spy_storage) -> RecordService:
    return RecordService(spy_storage)


@pytest.fixture
def sqlite_path(tmp_path) -> str:
    """Path of a freshly migrated SQLite database"""
    path = str(tmp_path / "records.db")
    init_db(path)
    return path


@pytest.fixture
def sqlite_storage(sqlite_path) -> SQLiteRecordStorage:
    return SQLiteRecordStorage(sqlite_path)


@pytest.fixture
def client(spy_storage):
    """Create test client over an in-memory store"""
    app = create_app(storage=spy_storage)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def joao() -> Record:
    return Record(name="João", email="joao@example.com")
