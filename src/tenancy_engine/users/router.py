"""User management router. Every route needs a tenant and a session token."""

from fastapi import APIRouter, Depends

from tenancy_engine.common.context import RequestContext
from tenancy_engine.common.exceptions import NotFoundError
from tenancy_engine.common.schemas import MessageResponse
from tenancy_engine.common.security import require_identity
from tenancy_engine.users.models import ROLE_ADMIN, ROLE_MEMBER
from tenancy_engine.users.schemas import UserCreate, UserResponse, UserUpdate

router = APIRouter(prefix="/api/users", tags=["users"])


def _get_store():
    from tenancy_engine.deps import get_user_store
    return get_user_store()


def _get_identity():
    from tenancy_engine.deps import get_identity_provider
    return get_identity_provider()


def _get_guard():
    from tenancy_engine.deps import get_access_guard
    return get_access_guard()


def _get_db():
    from tenancy_engine.deps import get_db
    return get_db()


@router.get("", response_model=list[UserResponse])
async def list_users(ctx: RequestContext = Depends(require_identity)):
    if not _get_guard().can_list_all_users(ctx):
        return [UserResponse.model_validate(ctx.user)]
    store = _get_store()
    db = _get_db()
    async with db.get_session() as session:
        users = await store.list(session, ctx.tenant_id)
        return [UserResponse.model_validate(u) for u in users]


@router.post("", response_model=UserResponse, status_code=201)
async def create_user(body: UserCreate, ctx: RequestContext = Depends(require_identity)):
    _get_guard().authorize(ctx, required_role=ROLE_ADMIN)
    identity = _get_identity()
    db = _get_db()
    async with db.get_session() as session:
        user = await identity.register(
            session,
            ctx.tenant,
            body.email,
            body.password,
            body.name,
            role=body.role or ROLE_MEMBER,
        )
        return UserResponse.model_validate(user)


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: str, body: UserUpdate, ctx: RequestContext = Depends(require_identity)
):
    guard = _get_guard()
    guard.authorize(ctx)
    fields = body.model_dump(exclude_none=True)
    store = _get_store()
    db = _get_db()
    async with db.get_session() as session:
        # Missing and other-tenant users look the same: 404 before any 403.
        if await store.get(session, ctx.tenant_id, user_id) is None:
            raise NotFoundError("User not found")
        guard.authorize_user_update(ctx, user_id, fields)
        user = await store.update(session, ctx.tenant_id, user_id, **fields)
        if user is None:
            raise NotFoundError("User not found")
        return UserResponse.model_validate(user)


@router.delete("/{user_id}", response_model=MessageResponse)
async def delete_user(user_id: str, ctx: RequestContext = Depends(require_identity)):
    _get_guard().authorize_user_delete(ctx, user_id)
    store = _get_store()
    db = _get_db()
    async with db.get_session() as session:
        deleted = await store.delete(session, ctx.tenant_id, user_id)
        if not deleted:
            raise NotFoundError("User not found")
    return MessageResponse(message="User deleted successfully")
