"""Tenant API router.

``/api/tenants/me`` is public; the directory listing and tenant creation
require the admin API key.
"""

from fastapi import APIRouter, Depends

from tenancy_engine.common.context import RequestContext
from tenancy_engine.common.exceptions import NotFoundError
from tenancy_engine.common.security import get_request_context, require_admin_key
from tenancy_engine.tenants.models import TenantModel
from tenancy_engine.tenants.schemas import (
    BrandSchema,
    TenantCreate,
    TenantProfile,
    TenantResponse,
    ThemeSchema,
)
from tenancy_engine.themes.css import effective_theme

router = APIRouter(prefix="/api/tenants", tags=["tenants"])


def _get_service():
    from tenancy_engine.deps import get_tenant_service
    return get_tenant_service()


def _get_db():
    from tenancy_engine.deps import get_db
    return get_db()


def _brand(tenant: TenantModel) -> BrandSchema:
    return BrandSchema(logo_url=tenant.logo_url, tagline=tenant.tagline)


def _to_response(tenant: TenantModel) -> TenantResponse:
    return TenantResponse(
        id=tenant.id,
        name=tenant.name,
        slug=tenant.slug,
        brand=_brand(tenant),
        created_at=tenant.created_at,
    )


@router.get("/me", response_model=TenantProfile)
async def current_tenant(ctx: RequestContext = Depends(get_request_context)):
    from tenancy_engine.common.config import get_settings

    tenant = ctx.tenant
    if tenant is None:
        raise NotFoundError("Tenant not resolved")
    theme = effective_theme(tenant, get_settings())
    return TenantProfile(
        name=tenant.name,
        slug=tenant.slug,
        brand=_brand(tenant),
        theme=ThemeSchema(
            primary=theme.primary, background=theme.background, text=theme.text
        ),
    )


@router.get("", response_model=list[TenantResponse])
async def list_tenants(_=Depends(require_admin_key)):
    svc = _get_service()
    db = _get_db()
    async with db.get_session() as session:
        tenants = await svc.list_tenants(session)
        return [_to_response(t) for t in tenants]


@router.post("", response_model=TenantResponse, status_code=201)
async def create_tenant(body: TenantCreate, _=Depends(require_admin_key)):
    svc = _get_service()
    db = _get_db()
    async with db.get_session() as session:
        tenant = await svc.create_tenant(
            session,
            name=body.name,
            slug=body.slug,
            logo_url=body.brand.logo_url,
            tagline=body.brand.tagline,
            theme=body.theme.model_dump(exclude_none=True),
        )
        return _to_response(tenant)
