"""Fixtures for service-level tests against an in-memory database."""

import pytest

from tenancy_engine.common.config import TenancySettings
from tenancy_engine.common.database import DatabaseManager

SECRET_KEY = "test-secret-key-for-unit-tests"


def make_settings(**overrides) -> TenancySettings:
    defaults = {
        "secret_key": SECRET_KEY,
        "db_url": "sqlite+aiosqlite://",
        "password_iterations": 1000,
    }
    defaults.update(overrides)
    return TenancySettings(**defaults)


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
async def db(settings):
    manager = DatabaseManager(settings)
    await manager.init()
    await manager.create_all()
    yield manager
    await manager.close()


@pytest.fixture
async def acme(db):
    from tenancy_engine.tenants.service import TenantService

    async with db.get_session() as session:
        return await TenantService().create_tenant(session, name="Acme", slug="acme")


@pytest.fixture
async def globex(db):
    from tenancy_engine.tenants.service import TenantService

    async with db.get_session() as session:
        return await TenantService().create_tenant(session, name="Globex", slug="globex")
