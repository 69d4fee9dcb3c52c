# =============================================================================
# app/routers/views.py - Server-rendered Pages
# =============================================================================
# Human-facing GET routes. Each handler gathers props and hands them to the
# Renderer together with a screen name.
# =============================================================================

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from app.dependencies import CommentStoreDep, RendererDep, SessionDep

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def home_page(request: Request, renderer: RendererDep):
    """Landing page with a link to the comments section."""
    return renderer.render(request, "Home")


@router.get("/comments", response_class=HTMLResponse)
async def comments_page(
    request: Request,
    session: SessionDep,
    store: CommentStoreDep,
    renderer: RendererDep,
):
    """
    Comments page.

    Shows the session's comments. Reading them doesn't initialize the
    session, so a first visit doesn't set a cookie.
    """
    comments = [comment.to_wire() for comment in store.list(session)]
    return renderer.render(request, "Comments", {"comments": comments})
