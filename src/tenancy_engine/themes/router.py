"""Theme stylesheet router."""

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from tenancy_engine.common.context import RequestContext
from tenancy_engine.common.security import get_request_context
from tenancy_engine.themes.css import effective_theme, render_css

router = APIRouter(prefix="/api/themes", tags=["themes"])

NO_CACHE = "no-cache, no-store, must-revalidate"


@router.get("/current.css", response_class=Response)
async def current_css(ctx: RequestContext = Depends(get_request_context)):
    from tenancy_engine.common.config import get_settings

    css = render_css(effective_theme(ctx.tenant, get_settings()))
    return Response(
        content=css,
        media_type="text/css",
        headers={"Cache-Control": NO_CACHE},
    )
