import pytest
from sqlalchemy.exc import OperationalError

from src.noteshare.core.services.health_service import HealthService


class FakeScalarResult:
    def __init__(self, scalar_value):
        self._scalar_value = scalar_value

    def scalar(self):
        return self._scalar_value


class FakeSession:
    def __init__(self, ok=True):
        self.ok = ok
        self.executed = []

    async def execute(self, stmt):
        self.executed.append(stmt)
        if self.ok:
            return FakeScalarResult(1)
        raise OperationalError("SELECT 1", {}, Exception("db down"))


@pytest.mark.asyncio
async def test_health_ok():
    session = FakeSession(ok=True)
    status = await HealthService(session).get_health_status()

    assert status.status == "healthy"
    assert status.checks["database"]["connected"] is True
    assert status.version == "1.0.0"
    assert len(session.executed) == 1


@pytest.mark.asyncio
async def test_health_db_down():
    status = await HealthService(FakeSession(ok=False)).get_health_status()

    assert status.status == "unhealthy"
    assert status.checks["database"] == {
        "connected": False,
        "status": "unhealthy",
        "response_time_ms": 0.0,
    }
