"""
Tests for the root and health endpoints.
"""


def test_root_lists_endpoints(client):
    response = client.get("/")

    assert response.status_code == 200
    data = response.json()
    assert data["service"] == "biztime-api"
    assert data["endpoints"]["companies"] == "/companies"


def test_health_checks_database(client):
    response = client.get("/system/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "database": "ok"}
