"""Tenant directory: slug lookup and administrative CRUD."""

import logging
import re

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from tenancy_engine.common.exceptions import TenantExistsError, ValidationError
from tenancy_engine.tenants.models import TenantModel

logger = logging.getLogger(__name__)

SLUG_RE = re.compile(r"^[a-z0-9]([a-z0-9-]*[a-z0-9])?$")
COLOR_PATTERN = r"^#[0-9a-fA-F]{3,8}$"
COLOR_RE = re.compile(COLOR_PATTERN)
THEME_KEYS = ("primary", "background", "text")


def normalize_slug(slug: str) -> str:
    """Slugs compare trimmed and case-insensitively."""
    return slug.strip().lower()


class TenantService:
    """Tenant management operations."""

    async def create_tenant(
        self,
        session: AsyncSession,
        name: str,
        slug: str,
        logo_url: str | None = None,
        tagline: str | None = None,
        theme: dict | None = None,
    ) -> TenantModel:
        slug = normalize_slug(slug)
        if not SLUG_RE.match(slug) or len(slug) > 100:
            raise ValidationError(
                "Slug must contain only lowercase letters, digits and hyphens"
            )
        if not name or not name.strip():
            raise ValidationError("Tenant name is required")
        if await self.get_by_slug(session, slug) is not None:
            raise TenantExistsError(f'Tenant already exists: "{slug}"')

        theme = theme or {}
        for key in THEME_KEYS:
            value = theme.get(key)
            if value is not None and not COLOR_RE.match(value):
                raise ValidationError(f"Theme {key} must be a hex color like #1a2b3c")
        tenant = TenantModel(
            name=name.strip(),
            slug=slug,
            logo_url=logo_url,
            tagline=tagline,
            theme_primary=theme.get("primary"),
            theme_background=theme.get("background"),
            theme_text=theme.get("text"),
        )
        session.add(tenant)
        await session.flush()
        logger.info("Created tenant %s", tenant.slug, extra={"tenant_id": tenant.id})
        return tenant

    async def get_by_slug(
        self, session: AsyncSession, slug: str
    ) -> TenantModel | None:
        result = await session.execute(
            select(TenantModel).where(TenantModel.slug == normalize_slug(slug))
        )
        return result.scalar_one_or_none()

    async def get_by_id(
        self, session: AsyncSession, tenant_id: str
    ) -> TenantModel | None:
        return await session.get(TenantModel, tenant_id)

    async def list_tenants(self, session: AsyncSession) -> list[TenantModel]:
        result = await session.execute(select(TenantModel).order_by(TenantModel.slug))
        return list(result.scalars().all())
