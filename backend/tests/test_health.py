from catalog.main import app
from fastapi.testclient import TestClient

client = TestClient(app)


def test_health_ok():
    res = client.get("/health")
    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "Healthy"
    assert body["database"] is True
    assert "timestamp" in body


def test_request_id_header_is_echoed():
    res = client.get("/health", headers={"X-Request-ID": "req-42"})
    assert res.headers["X-Request-ID"] == "req-42"
