"""Tenant context middleware."""

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

from tenancy_engine.common.exceptions import TenancyError
from tenancy_engine.common.schemas import ErrorResponse
from tenancy_engine.tenants.resolver import slug_from_path, strip_tenant_prefix


def _get_resolver():
    from tenancy_engine.deps import get_tenant_resolver
    return get_tenant_resolver()


def _get_db():
    from tenancy_engine.deps import get_db
    return get_db()


class TenantContextMiddleware(BaseHTTPMiddleware):
    """Resolve the tenant once per request and store a fresh RequestContext.

    Unknown tenant slugs stop the request here with a 404. Requests without
    any tenant signal continue with an empty context.
    """

    async def dispatch(self, request: Request, call_next):
        path = request.url.path
        resolver = _get_resolver()
        db = _get_db()
        try:
            async with db.get_session() as session:
                context = await resolver.resolve(
                    session, request.headers, path, request.headers.get("host")
                )
        except TenancyError as e:
            body = ErrorResponse(error=e.message, code=e.code)
            return JSONResponse(body.model_dump(), status_code=e.status_code)

        if slug_from_path(path):
            # Route /t/<slug>/api/... as /api/...
            new_path = strip_tenant_prefix(path)
            request.scope["path"] = new_path
            request.scope["raw_path"] = new_path.encode()

        request.state.context = context
        return await call_next(request)
