"""Auth API router: register, login, current user, logout."""

from fastapi import APIRouter, Depends, Response

from tenancy_engine.auth.schemas import (
    AuthResponse,
    LoginRequest,
    MeResponse,
    RegisterRequest,
)
from tenancy_engine.common.context import RequestContext
from tenancy_engine.common.schemas import MessageResponse
from tenancy_engine.common.security import require_tenant, require_user
from tenancy_engine.users.schemas import UserPublic

router = APIRouter(prefix="/api/auth", tags=["auth"])


def _get_identity():
    from tenancy_engine.deps import get_identity_provider
    return get_identity_provider()


def _get_db():
    from tenancy_engine.deps import get_db
    return get_db()


def _set_session_cookie(response: Response, token: str) -> None:
    from tenancy_engine.common.config import get_settings

    settings = get_settings()
    response.set_cookie(
        settings.cookie_name,
        token,
        max_age=settings.token_max_age,
        httponly=True,
        secure=settings.cookie_secure,
        samesite="lax",
    )


@router.post("/register", response_model=AuthResponse, status_code=201)
async def register(
    body: RegisterRequest,
    response: Response,
    ctx: RequestContext = Depends(require_tenant),
):
    identity = _get_identity()
    db = _get_db()
    async with db.get_session() as session:
        user = await identity.register(
            session, ctx.tenant, body.email, body.password, body.name
        )
        token = identity.issue_token(user.id)
        _set_session_cookie(response, token)
        return AuthResponse(user=UserPublic.model_validate(user), token=token)


@router.post("/login", response_model=AuthResponse)
async def login(
    body: LoginRequest,
    response: Response,
    ctx: RequestContext = Depends(require_tenant),
):
    identity = _get_identity()
    db = _get_db()
    async with db.get_session() as session:
        user = await identity.authenticate(session, ctx.tenant, body.email, body.password)
        token = identity.issue_token(user.id)
        _set_session_cookie(response, token)
        return AuthResponse(user=UserPublic.model_validate(user), token=token)


@router.get("/me", response_model=MeResponse)
async def me(ctx: RequestContext = Depends(require_user)):
    return MeResponse(user=UserPublic.model_validate(ctx.user))


@router.post("/logout", response_model=MessageResponse)
async def logout(response: Response):
    from tenancy_engine.common.config import get_settings

    response.delete_cookie(get_settings().cookie_name)
    return MessageResponse(message="Logged out successfully")
