"""Per-request tenant and identity context."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from tenancy_engine.tenants.models import TenantModel
    from tenancy_engine.users.models import UserModel


@dataclass(frozen=True)
class RequestContext:
    """Resolved tenant and user for one request.

    Built by the tenant middleware at the start of a request. Identity
    resolution produces a new context through ``with_user``; a context is
    never mutated once built.
    """

    tenant: Optional[TenantModel] = None
    user: Optional[UserModel] = None
    source: Optional[str] = None

    @property
    def tenant_id(self) -> Optional[str]:
        return self.tenant.id if self.tenant is not None else None

    @property
    def tenant_slug(self) -> Optional[str]:
        return self.tenant.slug if self.tenant is not None else None

    @property
    def user_id(self) -> Optional[str]:
        return self.user.id if self.user is not None else None

    def with_user(self, user: UserModel) -> RequestContext:
        return replace(self, user=user)
