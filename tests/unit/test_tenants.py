"""Tests for the tenant directory: creation, slug rules, lookup."""

import pytest

from tenancy_engine.common.exceptions import TenantExistsError, ValidationError
from tenancy_engine.tenants.service import TenantService, normalize_slug


@pytest.fixture
def svc():
    return TenantService()


class TestTenantCreate:
    async def test_create_tenant(self, db, svc):
        async with db.get_session() as session:
            tenant = await svc.create_tenant(session, name="Acme Corp", slug="acme")
            assert tenant.name == "Acme Corp"
            assert tenant.slug == "acme"
            assert tenant.id is not None
            assert tenant.created_at is not None

    async def test_slug_normalized_on_create(self, db, svc):
        async with db.get_session() as session:
            tenant = await svc.create_tenant(session, name="Acme", slug="  ACME ")
            assert tenant.slug == "acme"

    async def test_brand_and_theme_stored(self, db, svc):
        async with db.get_session() as session:
            tenant = await svc.create_tenant(
                session, name="A", slug="a", logo_url="/logo.svg",
                tagline="Hi", theme={"primary": "#e11d48"},
            )
            assert tenant.logo_url == "/logo.svg"
            assert tenant.tagline == "Hi"
            assert tenant.theme_primary == "#e11d48"
            assert tenant.theme_background is None

    @pytest.mark.parametrize("color", ["red", "#12", "#1234567890", "#fff;}body{x:y"])
    async def test_theme_colors_must_be_hex(self, db, svc, color):
        with pytest.raises(ValidationError):
            async with db.get_session() as session:
                await svc.create_tenant(
                    session, name="A", slug="a", theme={"background": color}
                )

    async def test_duplicate_slug_rejected(self, db, svc):
        async with db.get_session() as session:
            await svc.create_tenant(session, name="A", slug="acme")
        with pytest.raises(TenantExistsError):
            async with db.get_session() as session:
                await svc.create_tenant(session, name="B", slug="Acme")

    @pytest.mark.parametrize("slug", ["acme corp", "acme_corp", "-acme", "acme-", "", "ác"])
    async def test_invalid_slug_rejected(self, db, svc, slug):
        with pytest.raises(ValidationError):
            async with db.get_session() as session:
                await svc.create_tenant(session, name="A", slug=slug)

    async def test_blank_name_rejected(self, db, svc):
        with pytest.raises(ValidationError):
            async with db.get_session() as session:
                await svc.create_tenant(session, name="  ", slug="acme")


class TestTenantLookup:
    async def test_get_by_slug(self, db, svc):
        async with db.get_session() as session:
            await svc.create_tenant(session, name="A", slug="alpha")
        async with db.get_session() as session:
            found = await svc.get_by_slug(session, "alpha")
            assert found is not None
            assert found.name == "A"

    async def test_get_by_slug_case_insensitive(self, db, svc):
        async with db.get_session() as session:
            await svc.create_tenant(session, name="A", slug="alpha")
        async with db.get_session() as session:
            found = await svc.get_by_slug(session, " ALPHA\t")
            assert found is not None

    async def test_get_by_slug_not_found(self, db, svc):
        async with db.get_session() as session:
            found = await svc.get_by_slug(session, "nope")
            assert found is None

    async def test_get_by_id(self, db, svc):
        async with db.get_session() as session:
            tenant = await svc.create_tenant(session, name="A", slug="alpha")
        async with db.get_session() as session:
            found = await svc.get_by_id(session, tenant.id)
            assert found.slug == "alpha"

    async def test_list_tenants(self, db, svc):
        async with db.get_session() as session:
            await svc.create_tenant(session, name="B", slug="b")
            await svc.create_tenant(session, name="A", slug="a")
        async with db.get_session() as session:
            tenants = await svc.list_tenants(session)
            assert [t.slug for t in tenants] == ["a", "b"]


def test_normalize_slug():
    assert normalize_slug("  Globex ") == "globex"
