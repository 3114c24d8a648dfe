"""Tests for store failures mapping to HTTP 500."""
import logging

from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import create_async_engine

from dreamvacation.main import create_app
from dreamvacation.utils.database import Database

INTERNAL_ERROR = {"error": "Internal server error"}


def test_list_store_error(failing_client, caplog):
    with caplog.at_level(logging.ERROR):
        response = failing_client.get("/api/destinations")
    assert response.status_code == 500
    assert response.json() == INTERNAL_ERROR
    assert "Error fetching destinations" in caplog.text
    # The underlying error is logged, not returned
    assert "connection refused" in caplog.text
    assert "connection refused" not in response.text


def test_create_store_error(failing_client):
    response = failing_client.post("/api/destinations", json={"country": "Japan"})
    assert response.status_code == 500
    assert response.json() == INTERNAL_ERROR


def test_create_missing_country_does_not_touch_store(failing_client, broken_session):
    response = failing_client.post("/api/destinations", json={})
    assert response.status_code == 400
    broken_session.execute.assert_not_called()
    broken_session.scalars.assert_not_called()


def test_delete_store_error(failing_client):
    response = failing_client.delete("/api/destinations/1")
    assert response.status_code == 500
    assert response.json() == INTERNAL_ERROR


def test_service_starts_when_schema_init_fails(settings, caplog):
    engine = create_async_engine("sqlite+aiosqlite:////nonexistent-dir/dreamvacation.db")
    app = create_app(settings, Database(engine))

    with caplog.at_level(logging.ERROR):
        with TestClient(app) as client:
            assert client.get("/").status_code == 200
            response = client.get("/api/destinations")

    assert "Database initialization error" in caplog.text
    assert response.status_code == 500
    assert response.json() == INTERNAL_ERROR


def test_unexpected_error_returns_json_body(app, caplog):
    # SQLite cannot bind an integer this large
    with caplog.at_level(logging.ERROR):
        with TestClient(app, raise_server_exceptions=False) as client:
            response = client.delete("/api/destinations/99999999999999999999")

    assert response.status_code == 500
    assert response.json() == INTERNAL_ERROR
    assert "Unhandled exception on DELETE /api/destinations/99999999999999999999" in caplog.text
