"""Tenant-scoped user store.

Every accessor takes the owning tenant id first; there is no way to address a
user by id alone through this store.
"""

from typing import Any

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from tenancy_engine.common.exceptions import UserExistsError, ValidationError
from tenancy_engine.common.models import utcnow
from tenancy_engine.users.models import ROLE_MEMBER, ROLES, UserModel

_UPDATABLE = ("name", "email", "role", "password_hash")


def normalize_email(email: str) -> str:
    return email.strip().lower()


def _check_updates(values: dict[str, Any]) -> None:
    if "name" in values and not values["name"].strip():
        raise ValidationError("Name cannot be blank")
    if "email" in values and "@" not in values["email"]:
        raise ValidationError("Email address is invalid")
    if "role" in values and values["role"] not in ROLES:
        raise ValidationError(f"Role must be one of: {', '.join(ROLES)}")


class UserStore:
    """User CRUD confined to one tenant per call."""

    async def list(self, session: AsyncSession, tenant_id: str) -> list[UserModel]:
        result = await session.execute(
            select(UserModel)
            .where(UserModel.tenant_id == tenant_id)
            .order_by(UserModel.created_at.desc())
        )
        return list(result.scalars().all())

    async def get(
        self, session: AsyncSession, tenant_id: str, user_id: str
    ) -> UserModel | None:
        result = await session.execute(
            select(UserModel).where(
                UserModel.id == user_id, UserModel.tenant_id == tenant_id
            )
        )
        return result.scalar_one_or_none()

    async def get_by_email(
        self, session: AsyncSession, tenant_id: str, email: str
    ) -> UserModel | None:
        result = await session.execute(
            select(UserModel).where(
                UserModel.tenant_id == tenant_id,
                UserModel.email == normalize_email(email),
            )
        )
        return result.scalar_one_or_none()

    async def create(
        self,
        session: AsyncSession,
        tenant_id: str,
        email: str,
        name: str,
        password_hash: str,
        role: str = ROLE_MEMBER,
    ) -> UserModel:
        email = normalize_email(email)
        if await self.get_by_email(session, tenant_id, email) is not None:
            raise UserExistsError()
        user = UserModel(
            tenant_id=tenant_id,
            email=email,
            name=name,
            password_hash=password_hash,
            role=role,
        )
        session.add(user)
        try:
            await session.flush()
        except IntegrityError:
            raise UserExistsError()
        return user

    async def update(
        self, session: AsyncSession, tenant_id: str, user_id: str, **updates: Any
    ) -> UserModel | None:
        values = {k: v for k, v in updates.items() if k in _UPDATABLE and v is not None}
        _check_updates(values)
        if "email" in values:
            values["email"] = normalize_email(values["email"])
            existing = await self.get_by_email(session, tenant_id, values["email"])
            if existing is not None and existing.id != user_id:
                raise UserExistsError()
        values["updated_at"] = utcnow()
        result = await session.execute(
            update(UserModel)
            .where(UserModel.id == user_id, UserModel.tenant_id == tenant_id)
            .values(**values)
            .execution_options(synchronize_session="fetch")
        )
        if result.rowcount == 0:
            return None
        return await self._refresh(session, tenant_id, user_id)

    async def delete(
        self, session: AsyncSession, tenant_id: str, user_id: str
    ) -> bool:
        result = await session.execute(
            delete(UserModel)
            .where(UserModel.id == user_id, UserModel.tenant_id == tenant_id)
            .execution_options(synchronize_session="fetch")
        )
        return result.rowcount > 0

    async def _refresh(
        self, session: AsyncSession, tenant_id: str, user_id: str
    ) -> UserModel | None:
        user = await self.get(session, tenant_id, user_id)
        if user is not None:
            await session.refresh(user)
        return user
