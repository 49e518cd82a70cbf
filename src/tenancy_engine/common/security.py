"""Request-context and API-key dependencies."""

from typing import Optional

from fastapi import Header, HTTPException, Request

from tenancy_engine.common.context import RequestContext
from tenancy_engine.common.exceptions import AuthRequiredError, TenantRequiredError


async def require_admin_key(
    x_admin_api_key: str = Header(None, alias="X-Admin-Api-Key"),
) -> str:
    """FastAPI dependency that validates the operator API key from header."""
    from tenancy_engine.common.config import get_settings

    settings = get_settings()
    if not x_admin_api_key:
        raise HTTPException(status_code=401, detail="Admin API key required")
    if x_admin_api_key != settings.admin_api_key:
        raise HTTPException(status_code=403, detail="Invalid admin API key")
    return x_admin_api_key


def token_from_request(request: Request) -> Optional[str]:
    """Bearer token from the Authorization header, else the session cookie."""
    from tenancy_engine.common.config import get_settings

    auth_header = request.headers.get("authorization", "")
    if auth_header.startswith("Bearer "):
        token = auth_header[len("Bearer "):].strip()
        if token:
            return token
    return request.cookies.get(get_settings().cookie_name) or None


async def get_request_context(request: Request) -> RequestContext:
    """Context stored by the tenant middleware, or an empty one."""
    return getattr(request.state, "context", None) or RequestContext()


async def require_tenant(request: Request) -> RequestContext:
    context = await get_request_context(request)
    if context.tenant is None:
        raise TenantRequiredError()
    return context


async def resolve_identity(request: Request) -> RequestContext:
    """Attach the token's user to the context when a token is presented.

    A presented token is always checked: invalid tokens and tokens for
    another tenant fail even on endpoints where identity is optional.
    """
    from tenancy_engine.deps import get_db, get_identity_provider

    context = await get_request_context(request)
    token = token_from_request(request)
    if token is None:
        return context

    identity = get_identity_provider()
    db = get_db()
    async with db.get_session() as session:
        user = await identity.resolve_user(session, token, context)
    return context.with_user(user)


async def require_user(request: Request) -> RequestContext:
    """A valid token, with or without a resolved tenant."""
    context = await resolve_identity(request)
    if context.user is None:
        raise AuthRequiredError()
    return context


async def require_identity(request: Request) -> RequestContext:
    """A resolved tenant and a valid token for it, checked in that order."""
    await require_tenant(request)
    return await require_user(request)
