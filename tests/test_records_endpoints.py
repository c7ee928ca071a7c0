import logging

import pytest
from fastapi.testclient import TestClient

from records_api.app.core.errors import StorageError
from records_api.app.main import create_app
from records_api.app.storage.sqlite_storage import SQLiteRecordStorage


def test_record_lifecycle_scenario(client):
    r = client.post("/records", json={"name": "João", "email": "joao@example.com"})
    assert r.status_code == 200
    assert r.json() == {"id": 1, "name": "João", "email": "joao@example.com"}

    r = client.post("/records", json={"name": "João", "email": "joao@example.com"})
    assert r.status_code == 400
    assert "already registered" in r.json()["detail"]

    r = client.put("/records/1", json={"name": "João Atualizado", "email": "joao2@example.com"})
    assert r.status_code == 200
    assert r.json() == {"id": 1, "name": "João Atualizado", "email": "joao2@example.com"}

    r = client.delete("/records/1")
    assert r.status_code == 204
    assert r.content == b""

    r = client.get("/records/1")
    assert r.status_code == 404


def test_list_records(client):
    client.post("/records", json={"name": "João", "email": "joao@example.com"})
    client.post("/records", json={"name": "Maria", "email": "maria@example.com"})

    r = client.get("/records")
    assert r.status_code == 200
    arr = r.json()
    assert len(arr) == 2
    assert arr[0]["name"] == "João"
    assert arr[1]["name"] == "Maria"


def test_list_records_empty(client):
    r = client.get("/records")
    assert r.status_code == 200
    assert r.json() == []


def test_get_record(client):
    client.post("/records", json={"name": "João", "email": "joao@example.com"})

    r = client.get("/records/1")
    assert r.status_code == 200
    assert r.json()["email"] == "joao@example.com"


def test_get_missing_record(client):
    r = client.get("/records/99")
    assert r.status_code == 404
    assert r.json() == {"detail": "Record not found"}


def test_create_ignores_id_in_body(client):
    r = client.post("/records", json={"id": 50, "name": "Ana", "email": "ana@example.com"})
    assert r.status_code == 200
    assert r.json()["id"] == 1


def test_create_invalid_never_persists(client, spy_storage):
    r = client.post("/records", json={"name": "", "email": "invalid_email"})

    assert r.status_code == 400
    assert "name" in r.json()["detail"]
    spy_storage.save.assert_not_called()


def test_create_malformed_email(client):
    r = client.post("/records", json={"name": "Ana", "email": "ana@localhost"})
    assert r.status_code == 400
    assert "email" in r.json()["detail"]


def test_create_missing_field_is_bad_request(client, spy_storage):
    r = client.post("/records", json={"name": "Ana"})

    assert r.status_code == 400
    assert "email" in r.json()["detail"]
    spy_storage.save.assert_not_called()


def test_non_integer_id_is_bad_request(client):
    r = client.get("/records/abc")
    assert r.status_code == 400


def test_update_invalid(client, spy_storage):
    client.post("/records", json={"name": "João", "email": "joao@example.com"})
    spy_storage.save.reset_mock()

    r = client.put("/records/1", json={"id": 1, "name": "", "email": "invalid_email"})

    assert r.status_code == 400
    spy_storage.save.assert_not_called()


def test_update_missing_record(client, spy_storage):
    r = client.put("/records/99", json={"name": "João", "email": "joao@example.com"})

    assert r.status_code == 404
    spy_storage.exists_by_id.assert_called_once_with(99)
    spy_storage.save.assert_not_called()


def test_update_uses_path_id(client):
    client.post("/records", json={"name": "João", "email": "joao@example.com"})

    r = client.put("/records/1", json={"id": 7, "name": "João", "email": "joao@example.org"})

    assert r.status_code == 200
    assert r.json()["id"] == 1


def test_delete_missing_record(client, spy_storage):
    r = client.delete("/records/99")

    assert r.status_code == 404
    spy_storage.delete_by_id.assert_not_called()


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


class BrokenStorage:
    """Storage whose backend is always down."""

    def _fail(self, *args, **kwargs):
        raise StorageError("find_all", "database is locked")

    find_all = find_by_id = find_by_email = save = exists_by_id = delete_by_id = _fail


def test_storage_failure_is_server_error():
    with TestClient(create_app(storage=BrokenStorage())) as client:
        r = client.get("/records")
        assert r.status_code == 500
        assert r.json() == {"detail": "Internal server error"}

        r = client.post("/records", json={"name": "Ana", "email": "ana@example.com"})
        assert r.status_code == 500


def test_sqlite_backend_migrates_on_startup(tmp_path):
    path = str(tmp_path / "app.db")
    app = create_app(storage=SQLiteRecordStorage(path))

    with TestClient(app) as client:
        r = client.post("/records", json={"name": "João", "email": "joao@example.com"})
        assert r.status_code == 200
        assert r.json()["id"] == 1

    # Records survive a restart of the application.
    with TestClient(create_app(storage=SQLiteRecordStorage(path))) as client:
        r = client.get("/records/1")
        assert r.status_code == 200
        assert r.json()["name"] == "João"


@pytest.mark.parametrize("email", ["joao@example.com\n", " joao@example.com", "joao@example.com ", "joao@exa mple.com"])
def test_whitespace_in_email_is_bad_request(client, spy_storage, email):
    client.post("/records", json={"name": "João", "email": "joao@example.com"})
    spy_storage.save.reset_mock()

    r = client.post("/records", json={"name": "João", "email": email})

    assert r.status_code == 400
    assert "email" in r.json()["detail"]
    spy_storage.save.assert_not_called()

    r = client.put("/records/1", json={"name": "João", "email": email})
    assert r.status_code == 400
    assert client.get("/records/1").json()["email"] == "joao@example.com"


@pytest.mark.parametrize("record_id", [2 ** 63, 18446744073709551616, -(2 ** 63) - 1])
def test_out_of_range_id_is_not_found_with_sqlite(tmp_path, record_id):
    app = create_app(storage=SQLiteRecordStorage(str(tmp_path / "app.db")))

    with TestClient(app) as client:
        assert client.get(f"/records/{record_id}").status_code == 404
        assert client.delete(f"/records/{record_id}").status_code == 404
        r = client.put(f"/records/{record_id}", json={"name": "Ana", "email": "ana@example.com"})
        assert r.status_code == 404


def test_storage_failure_is_logged_with_traceback(caplog):
    caplog.set_level(logging.ERROR, logger="records_api.app.main")

    with TestClient(create_app(storage=BrokenStorage())) as client:
        client.get("/records")

    failures = [r for r in caplog.records if r.getMessage().startswith("Infrastructure failure")]
    assert len(failures) == 1
    assert isinstance(failures[0].exc_info[1], StorageError)
