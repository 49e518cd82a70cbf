"""Tenant-scoped resource store."""

from typing import Any, Optional

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from tenancy_engine.common.exceptions import ValidationError
from tenancy_engine.common.models import utcnow
from tenancy_engine.resources.models import ResourceModel

_UPDATABLE = ("title", "content")


def _check_title(title: Optional[str]) -> str:
    if title is None or not title.strip():
        raise ValidationError("Title is required")
    return title.strip()


class ResourceStore:
    """Resource CRUD confined to one tenant per call.

    Resources are never addressed by id alone, and are never deleted.
    """

    async def list(self, session: AsyncSession, tenant_id: str) -> list[ResourceModel]:
        """All of a tenant's resources, newest first."""
        result = await session.execute(
            select(ResourceModel)
            .where(ResourceModel.tenant_id == tenant_id)
            .order_by(ResourceModel.created_at.desc())
        )
        return list(result.scalars().all())

    async def get(
        self, session: AsyncSession, tenant_id: str, resource_id: str
    ) -> ResourceModel | None:
        result = await session.execute(
            select(ResourceModel).where(
                ResourceModel.id == resource_id,
                ResourceModel.tenant_id == tenant_id,
            )
        )
        return result.scalar_one_or_none()

    async def create(
        self,
        session: AsyncSession,
        tenant_id: str,
        title: Optional[str],
        content: Optional[str] = None,
    ) -> ResourceModel:
        resource = ResourceModel(
            tenant_id=tenant_id,
            title=_check_title(title),
            content=content,
        )
        session.add(resource)
        await session.flush()
        return resource

    async def update(
        self, session: AsyncSession, tenant_id: str, resource_id: str, **updates: Any
    ) -> ResourceModel | None:
        values = {k: v for k, v in updates.items() if k in _UPDATABLE and v is not None}
        if "title" in values:
            values["title"] = _check_title(values["title"])
        values["updated_at"] = utcnow()
        result = await session.execute(
            update(ResourceModel)
            .where(
                ResourceModel.id == resource_id,
                ResourceModel.tenant_id == tenant_id,
            )
            .values(**values)
            .execution_options(synchronize_session="fetch")
        )
        if result.rowcount == 0:
            return None
        resource = await self.get(session, tenant_id, resource_id)
        await session.refresh(resource)
        return resource
