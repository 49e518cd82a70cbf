"""Resource API router. Every query is filtered by the resolved tenant."""

from fastapi import APIRouter, Depends

from tenancy_engine.common.context import RequestContext
from tenancy_engine.common.exceptions import NotFoundError
from tenancy_engine.common.security import resolve_identity
from tenancy_engine.resources.schemas import (
    ResourceCreate,
    ResourceResponse,
    ResourceUpdate,
)

router = APIRouter(prefix="/api/resources", tags=["resources"])


def _get_store():
    from tenancy_engine.deps import get_resource_store
    return get_resource_store()


def _get_guard():
    from tenancy_engine.deps import get_access_guard
    return get_access_guard()


def _get_db():
    from tenancy_engine.deps import get_db
    return get_db()


def _authorize_read(ctx: RequestContext) -> RequestContext:
    from tenancy_engine.common.config import get_settings

    return _get_guard().authorize(
        ctx, require_identity=get_settings().resources_require_auth
    )


@router.get("", response_model=list[ResourceResponse])
async def list_resources(ctx: RequestContext = Depends(resolve_identity)):
    _authorize_read(ctx)
    store = _get_store()
    db = _get_db()
    async with db.get_session() as session:
        resources = await store.list(session, ctx.tenant_id)
        return [ResourceResponse.model_validate(r) for r in resources]


@router.post("", response_model=ResourceResponse, status_code=201)
async def create_resource(
    body: ResourceCreate, ctx: RequestContext = Depends(resolve_identity)
):
    _authorize_read(ctx)
    store = _get_store()
    db = _get_db()
    async with db.get_session() as session:
        resource = await store.create(
            session, ctx.tenant_id, title=body.title, content=body.content
        )
        return ResourceResponse.model_validate(resource)


@router.get("/{resource_id}", response_model=ResourceResponse)
async def get_resource(
    resource_id: str, ctx: RequestContext = Depends(resolve_identity)
):
    _authorize_read(ctx)
    store = _get_store()
    db = _get_db()
    async with db.get_session() as session:
        resource = await store.get(session, ctx.tenant_id, resource_id)
        if resource is None:
            raise NotFoundError()
        return ResourceResponse.model_validate(resource)


@router.put("/{resource_id}", response_model=ResourceResponse)
async def update_resource(
    resource_id: str,
    body: ResourceUpdate,
    ctx: RequestContext = Depends(resolve_identity),
):
    _get_guard().authorize(ctx)
    store = _get_store()
    db = _get_db()
    async with db.get_session() as session:
        resource = await store.update(
            session, ctx.tenant_id, resource_id, **body.model_dump(exclude_none=True)
        )
        if resource is None:
            raise NotFoundError()
        return ResourceResponse.model_validate(resource)
