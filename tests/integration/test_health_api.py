from storefront.api.deps import get_health_service
from storefront.api.main import app
from storefront.services.health_service import HealthService
from tests.fakes import FakeHealthRepository


def test_health_ok(client):
    r = client.get("/health")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "ok"
    assert body["database"]["connected"] is True
    assert isinstance(body["database"]["latency"], int)
    assert "T" in body["timestamp"]


def test_health_failure(client):
    app.dependency_overrides[get_health_service] = lambda: HealthService(FakeHealthRepository(error="down"))
    r = client.get("/health")
    assert r.status_code == 500
    assert r.json() == {"error": "Health check failed", "code": "HEALTH_CHECK_FAILED"}
