"""Shared test fixtures for Tenancy-Engine."""

import os
import pytest
from httpx import ASGITransport, AsyncClient


SECRET_KEY = "test-secret-key-for-unit-tests"
ADMIN_API_KEY = "test-admin-api-key"
PASSWORD = "s3cret-pass"


@pytest.fixture
def app():
    """Create a test app with in-memory DB."""
    os.environ["TENANCY_DB_URL"] = "sqlite+aiosqlite://"
    os.environ["TENANCY_SECRET_KEY"] = SECRET_KEY
    os.environ["TENANCY_ADMIN_API_KEY"] = ADMIN_API_KEY
    os.environ["TENANCY_PASSWORD_ITERATIONS"] = "1000"

    # Clear caches and singletons so new env vars take effect
    from tenancy_engine.common.config import get_settings
    get_settings.cache_clear()

    from tenancy_engine.deps import reset_singletons
    reset_singletons()

    from tenancy_engine.app import create_app
    return create_app()


@pytest.fixture
async def client(app):
    # Manually init DB since ASGITransport doesn't run lifespan
    from tenancy_engine.deps import get_db
    db = get_db()
    await db.init()
    await db.create_all()

    # localhost carries no subdomain, so the host implies no tenant
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://localhost") as ac:
        yield ac

    await db.close()


@pytest.fixture
def admin_headers():
    return {"X-Admin-Api-Key": ADMIN_API_KEY}


@pytest.fixture
async def tenants(client):
    """Acme and Globex, keyed by slug."""
    from tenancy_engine.deps import get_db, get_tenant_service

    svc = get_tenant_service()
    async with get_db().get_session() as session:
        acme = await svc.create_tenant(
            session, name="Acme", slug="acme",
            tagline="Roadrunner Ready",
            theme={"primary": "#ff0000", "background": "#101010", "text": "#fafafa"},
        )
        globex = await svc.create_tenant(
            session, name="Globex", slug="globex", theme={"primary": "#0ea5e9"},
        )
    return {"acme": acme, "globex": globex}


@pytest.fixture
def register(client):
    """Register through the API; the helper returns (user_json, token)."""

    async def _register(slug, email, name="User", password=PASSWORD):
        resp = await client.post(
            "/api/auth/register",
            json={"email": email, "password": password, "name": name},
            headers={"X-Tenant-ID": slug},
        )
        assert resp.status_code == 201, resp.text
        data = resp.json()
        # Keep the session cookie out of later requests; tests pass tokens explicitly.
        client.cookies.clear()
        return data["user"], data["token"]

    return _register


@pytest.fixture
def make_admin(client):
    """Promote a registered user to admin directly in the store."""
    from tenancy_engine.deps import get_db, get_tenant_service, get_user_store

    async def _make_admin(slug, email):
        async with get_db().get_session() as session:
            tenant = await get_tenant_service().get_by_slug(session, slug)
            store = get_user_store()
            user = await store.get_by_email(session, tenant.id, email)
            await store.update(session, tenant.id, user.id, role="admin")

    return _make_admin


@pytest.fixture
def auth_headers():
    def _auth_headers(slug, token):
        return {"X-Tenant-ID": slug, "Authorization": f"Bearer {token}"}

    return _auth_headers
