"""Tests for the info and health endpoints."""


def test_root_message(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == {"message": "Dream Vacation API is running!"}


def test_health_check(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "service": "dreamvacation-api"}


def test_readiness_with_database(client):
    response = client.get("/health/ready")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ready"
    assert data["checks"]["database"] is True


def test_readiness_degraded_when_store_fails(failing_client):
    response = failing_client.get("/health/ready")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "degraded"
    assert "connection refused" in data["checks"]["database_error"]


def test_unknown_route_uses_error_body(client):
    response = client.get("/api/nowhere")
    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}


def test_cors_allows_any_origin(client):
    response = client.get("/", headers={"Origin": "http://example.com"})
    assert response.headers["access-control-allow-origin"] == "*"


def test_process_time_header_and_metrics(client):
    client.get("/api/destinations")
    created = client.post("/api/destinations", json={"country": "Japan"}).json()
    client.delete(f"/api/destinations/{created['id']}")
    response = client.get("/metrics")
    assert response.status_code == 200
    assert "http_requests_total" in response.text
    assert 'endpoint="/api/destinations"' in response.text
    delete_lines = [
        line for line in response.text.splitlines()
        if line.startswith("http_requests_total{") and 'method="DELETE"' in line
    ]
    assert any(f'endpoint="/api/destinations/{created["id"]}"' in line and 'status="204"' in line for line in delete_lines)
    assert not any('endpoint="/{destination_id}"' in line for line in delete_lines)
    assert "X-Process-Time" in client.get("/").headers


def test_docs_hidden_without_debug(client):
    assert client.get("/docs").status_code == 404
