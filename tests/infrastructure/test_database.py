"""DatabaseSessionManager tests — error mapping and readiness check on SQLite."""

import pytest
from sqlalchemy import text

from cyanvas.core.errors import DatabaseError
from cyanvas.infrastructure.database import DatabaseSessionManager


@pytest.fixture
async def manager():
    manager = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    yield manager
    await manager.dispose()


async def test_health_check_reports_reachable_database(manager):
    assert await manager.health_check() is True


async def test_operational_error_maps_to_database_error(manager):
    with pytest.raises(DatabaseError) as exc:
        async with manager.session() as db:
            await db.execute(text("SELECT * FROM no_such_table"))
    assert exc.value.operation == "execute"
    assert exc.value.http_status == 503


async def test_non_database_errors_pass_through(manager):
    with pytest.raises(ValueError):
        async with manager.session():
            raise ValueError("boom")
