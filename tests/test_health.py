"""Tests for health check endpoints and application-wide behaviour."""


def test_health_check(client):
    """Test basic health check."""
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_readiness_check(client):
    """Test readiness reports the database as reachable."""
    response = client.get("/api/health/ready")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ready"
    assert data["checks"]["database"] is True


def test_responses_disable_caching(client):
    """Test every response carries Cache-Control: no-cache."""
    response = client.get("/api/products")

    assert response.headers["cache-control"] == "no-cache"


def test_root_serves_frontend(client):
    """Test the static frontend is served at the root path."""
    response = client.get("/")

    assert response.status_code == 200
    assert "InventoryApp" in response.text


def test_unknown_path_returns_error_body(client):
    """Test a missing static file is reported as a JSON error."""
    response = client.get("/missing.js")

    assert response.status_code == 404
    assert "error" in response.json()
