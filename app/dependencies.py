# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for the components assembled in create_app().
# These are injected into route handlers using Depends().
#
# Usage:
#   @router.get("/comments")
#   async def page(request: Request, session: SessionDep, renderer: RendererDep):
#       ...
# =============================================================================

from typing import Annotated

from fastapi import Depends, Request

from app.rendering import Renderer
from core.models.session import SessionData
from core.services.comment_service import CommentStore


def get_session(request: Request) -> SessionData:
    """
    Get the caller's session.

    Loaded by SessionMiddleware before the handler runs.
    """
    return request.state.session


def get_comment_store(request: Request) -> CommentStore:
    """Get the application's comment store."""
    return request.app.state.comment_store


def get_renderer(request: Request) -> Renderer:
    """Get the render capability for view handlers."""
    return request.app.state.renderer


# Type aliases for dependency injection
SessionDep = Annotated[SessionData, Depends(get_session)]
CommentStoreDep = Annotated[CommentStore, Depends(get_comment_store)]
RendererDep = Annotated[Renderer, Depends(get_renderer)]
