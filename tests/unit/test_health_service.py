import pytest

from storefront.errors import DomainError
from storefront.services.health_service import HealthService
from tests.fakes import FakeHealthRepository


def test_reports_latency():
    status = HealthService(FakeHealthRepository(latency=7)).check_health()
    assert status["status"] == "ok"
    assert status["database"] == {"connected": True, "latency": 7}
    assert status["timestamp"].endswith("+00:00")


def test_database_failure_wrapped():
    service = HealthService(FakeHealthRepository(error="connection refused"))
    with pytest.raises(DomainError) as exc:
        service.check_health()
    assert exc.value.message.startswith("Database health check failed: ")
    assert "connection refused" in exc.value.message
