"""Identity provider: credentials, session tokens, token-to-user resolution."""

import logging
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from tenancy_engine.auth.passwords import hash_password, verify_password
from tenancy_engine.auth.tokens import TokenSigner
from tenancy_engine.common.config import TenancySettings
from tenancy_engine.common.context import RequestContext
from tenancy_engine.common.exceptions import (
    InvalidCredentialsError,
    InvalidTokenError,
    TenantMismatchError,
    ValidationError,
)
from tenancy_engine.tenants.models import TenantModel
from tenancy_engine.users.models import ROLE_MEMBER, ROLES, UserModel
from tenancy_engine.users.service import UserStore, normalize_email

logger = logging.getLogger(__name__)


def validate_user_fields(
    email: Optional[str], password: Optional[str], name: Optional[str]
) -> None:
    if not email or not email.strip() or not password or not name or not name.strip():
        raise ValidationError("Email, password, and name are required")
    if "@" not in email:
        raise ValidationError("Email address is invalid")


class IdentityProvider:
    """Authenticates users within a tenant and manages their session tokens."""

    def __init__(self, settings: TenancySettings, users: UserStore):
        self.settings = settings
        self.users = users
        self.signer = TokenSigner(settings.secret_key, settings.token_max_age)
        # Compared against on unknown emails so both failure paths hash once.
        self._dummy_hash = hash_password("", settings.password_iterations)

    # ── Tokens ──

    def issue_token(self, user_id: str) -> str:
        return self.signer.issue(user_id)

    def verify_token(self, token: str) -> str:
        return self.signer.verify(token)

    # ── Passwords ──

    def hash_password(self, password: str) -> str:
        return hash_password(password, self.settings.password_iterations)

    # ── Credentials ──

    async def register(
        self,
        session: AsyncSession,
        tenant: TenantModel,
        email: Optional[str],
        password: Optional[str],
        name: Optional[str],
        role: str = ROLE_MEMBER,
    ) -> UserModel:
        validate_user_fields(email, password, name)
        if role not in ROLES:
            raise ValidationError(f"Role must be one of: {', '.join(ROLES)}")
        user = await self.users.create(
            session,
            tenant.id,
            email=email,
            name=name.strip(),
            password_hash=self.hash_password(password),
            role=role,
        )
        logger.info("Registered user %s in tenant %s", user.id, tenant.slug)
        return user

    async def authenticate(
        self,
        session: AsyncSession,
        tenant: TenantModel,
        email: Optional[str],
        password: Optional[str],
    ) -> UserModel:
        if not email or not password:
            raise ValidationError("Email and password are required")

        user = await self.users.get_by_email(session, tenant.id, normalize_email(email))
        if user is None:
            verify_password(password, self._dummy_hash)
            logger.info("Login failed for tenant %s: unknown user", tenant.slug)
            raise InvalidCredentialsError()

        if not verify_password(password, user.password_hash):
            logger.info("Login failed for tenant %s: password mismatch", tenant.slug)
            raise InvalidCredentialsError()
        return user

    # ── Token-to-user ──

    async def resolve_user(
        self, session: AsyncSession, token: str, context: RequestContext
    ) -> UserModel:
        """Load the token's user and check it against the resolved tenant.

        A valid token for one tenant never authorizes a request resolved to
        another tenant.
        """
        user_id = self.verify_token(token)
        # The one lookup by id alone: the owning tenant is what gets checked.
        user = await session.get(UserModel, user_id)
        if user is None:
            raise InvalidTokenError("User not found")
        if context.tenant is not None and user.tenant_id != context.tenant.id:
            logger.warning(
                "Token for tenant %s presented to tenant %s",
                user.tenant_id, context.tenant.slug,
            )
            raise TenantMismatchError()
        return user
