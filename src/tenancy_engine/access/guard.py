"""Access guard: tenant, identity and role checks for an operation."""

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from tenancy_engine.common.context import RequestContext
from tenancy_engine.common.exceptions import (
    AuthRequiredError,
    ForbiddenError,
    SelfDeleteDeniedError,
    TenancyError,
    TenantRequiredError,
)
from tenancy_engine.users.models import ROLE_ADMIN

ADMIN_ONLY_FIELDS = ("role",)


@dataclass(frozen=True)
class AccessDecision:
    allowed: bool
    error: Optional[TenancyError] = None

    @property
    def reason(self) -> Optional[str]:
        return self.error.code if self.error else None


ALLOW = AccessDecision(allowed=True)


def deny(error: TenancyError) -> AccessDecision:
    return AccessDecision(allowed=False, error=error)


class AccessGuard:
    """Stateless authorization rules over a RequestContext."""

    def evaluate(
        self,
        context: RequestContext,
        required_role: Optional[str] = None,
        require_identity: bool = True,
    ) -> AccessDecision:
        if context.tenant is None:
            return deny(TenantRequiredError())
        if context.user is None:
            if require_identity or required_role is not None:
                return deny(AuthRequiredError())
            return ALLOW
        if required_role == ROLE_ADMIN and context.user.role != ROLE_ADMIN:
            return deny(ForbiddenError("Admin access required"))
        return ALLOW

    def authorize(
        self,
        context: RequestContext,
        required_role: Optional[str] = None,
        require_identity: bool = True,
    ) -> RequestContext:
        """Raise the denial, or hand the context back on success."""
        decision = self.evaluate(context, required_role, require_identity)
        if not decision.allowed:
            raise decision.error
        return context

    def authorize_user_update(
        self, context: RequestContext, target_id: str, fields: Mapping[str, Any]
    ) -> RequestContext:
        """Admins may update anyone; members only themselves, never their role."""
        self.authorize(context)
        if context.user.role == ROLE_ADMIN:
            return context
        if context.user.id != target_id:
            raise ForbiddenError()
        touched = [f for f in ADMIN_ONLY_FIELDS if fields.get(f) is not None]
        if touched:
            raise ForbiddenError("Only admins can change roles")
        return context

    def authorize_user_delete(
        self, context: RequestContext, target_id: str
    ) -> RequestContext:
        self.authorize(context)
        if context.user.id == target_id:
            raise SelfDeleteDeniedError()
        return self.authorize(context, required_role=ROLE_ADMIN)

    def can_list_all_users(self, context: RequestContext) -> bool:
        """Admins see the whole tenant; members see only themselves."""
        self.authorize(context)
        return context.user.role == ROLE_ADMIN
