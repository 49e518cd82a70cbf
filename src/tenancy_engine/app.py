"""FastAPI application factory for Tenancy-Engine."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from tenancy_engine.common.config import get_settings
from tenancy_engine.common.context import RequestContext
from tenancy_engine.common.exceptions import TenancyError
from tenancy_engine.common.schemas import ErrorResponse, HealthResponse
from tenancy_engine.tenants.middleware import TenantContextMiddleware


def _error_response(status_code: int, message: str, code: str, detail: str = "") -> JSONResponse:
    body = ErrorResponse(error=message, code=code, detail=detail)
    return JSONResponse(body.model_dump(), status_code=status_code)


def create_app() -> FastAPI:
    settings = get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup
        from tenancy_engine.deps import get_db
        db = get_db()
        await db.init()
        await db.create_all()
        yield
        # Shutdown
        await db.close()

    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        lifespan=lifespan,
    )

    app.add_middleware(TenantContextMiddleware)
    # Outermost, so CORS preflights never reach tenant resolution.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(TenancyError)
    async def tenancy_error_handler(request: Request, exc: TenancyError):
        return _error_response(exc.status_code, exc.message, exc.code)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        detail = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        return _error_response(400, "Invalid request", "VALIDATION_ERROR", detail)

    def _tenant_slug(request: Request) -> str | None:
        context: RequestContext | None = getattr(request.state, "context", None)
        return context.tenant_slug if context else None

    @app.get("/health", response_model=HealthResponse)
    async def health(request: Request):
        return HealthResponse(version=settings.api_version, tenant=_tenant_slug(request))

    @app.get("/api/health", response_model=HealthResponse)
    async def api_health(request: Request):
        return HealthResponse(version=settings.api_version, tenant=_tenant_slug(request))

    @app.get("/")
    async def index():
        return {
            "message": "Multi-tenant SaaS API",
            "version": settings.api_version,
            "endpoints": {
                "health": "/api/health",
                "tenants": "/api/tenants",
                "tenant-me": "/api/tenants/me",
                "auth": "/api/auth",
                "resources": "/api/resources",
                "users": "/api/users",
                "theme": "/api/themes/current.css",
            },
        }

    # Mount routers
    from tenancy_engine.tenants.router import router as tenant_router
    from tenancy_engine.auth.router import router as auth_router
    from tenancy_engine.resources.router import router as resource_router
    from tenancy_engine.users.router import router as user_router
    from tenancy_engine.themes.router import router as theme_router

    prefix = settings.api_prefix
    app.include_router(tenant_router, prefix=prefix)
    app.include_router(auth_router, prefix=prefix)
    app.include_router(resource_router, prefix=prefix)
    app.include_router(user_router, prefix=prefix)
    app.include_router(theme_router, prefix=prefix)

    return app
