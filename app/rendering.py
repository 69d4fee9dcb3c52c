# =============================================================================
# app/rendering.py - Render Gateway
# =============================================================================
# Turns a screen name plus props into an HTML response using Jinja2.
#
# Handlers receive the Renderer as an explicit dependency:
#
#   @router.get("/comments")
#   async def comments_page(request: Request, renderer: RendererDep):
#       return renderer.render(request, "Comments", {"comments": [...]})
#
# Templates live in app/templates/; every page extends base.html.
# =============================================================================

import logging
from pathlib import Path
from typing import Any

from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from app.exceptions import UnknownScreenError

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"

# Screen name -> template file
SCREENS: dict[str, str] = {
    "Home": "home.html",
    "Comments": "comments.html",
    "errors/400": "errors/400.html",
    "errors/500": "errors/500.html",
}


class Renderer:
    """
    Render Gateway backed by Jinja2Templates.

    Props are exposed to the template as top-level variables, next to the
    screen name and the application name.
    """

    def __init__(self, directory: str | Path = TEMPLATES_DIR, app_name: str = "CommentBoard"):
        self.templates = Jinja2Templates(directory=str(directory))
        self.app_name = app_name

    def template_for(self, screen: str) -> str:
        try:
            return SCREENS[screen]
        except KeyError:
            raise UnknownScreenError(screen) from None

    def render(
        self,
        request: Request,
        screen: str,
        props: dict[str, Any] | None = None,
        status_code: int = 200,
    ) -> HTMLResponse:
        template = self.template_for(screen)
        props = props or {}

        context = {
            **props,
            "screen": screen,
            "app_name": self.app_name,
        }
        logger.debug(f"Rendering {screen} ({template}) with status {status_code}")

        return self.templates.TemplateResponse(
            request,
            template,
            context,
            status_code=status_code,
        )
