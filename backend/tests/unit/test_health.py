from __future__ import annotations


def test_health_reports_storage_and_count(authenticated_client):
    authenticated_client.post("/api/v1/employees", json={"id": "E1", "name": "Ann", "contact": "555"})

    response = authenticated_client.get("/api/v1/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["storage"] == "MemoryStorage"
    assert data["employees"] == 1


def test_health_does_not_require_auth(client):
    assert client.get("/api/v1/health").status_code == 200


def test_readiness_probe(client):
    response = client.get("/api/v1/health/ready")
    assert response.status_code == 200
    data = response.json()
    assert data["ready"] is True
