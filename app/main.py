# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the CommentBoard app.
# create_app() builds every component (session backend, comment store,
# renderer, error translator) as a value and wires it onto app.state.
#
# Usage:
#   uvicorn app.main:app --reload --port 7000
#   commentboard          # console script, honours API_HOST and PORT
# =============================================================================

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from app import __version__
from app.config import Settings, get_settings
from app.exceptions import ErrorTranslator, HttpError, app_exception_handler
from app.rendering import Renderer
from app.routers import comments, health, views
from app.sessions import SessionMiddleware, SessionTokenSigner
from core.services.comment_service import CommentStore
from lib.session_backends import create_session_backend

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).parent / "static"


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=logging.DEBUG if settings.DEBUG else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    - Startup: log the configuration in use
    - Shutdown: release session backend connections
    """
    settings = app.state.settings

    # Startup
    logger.info(f"Starting CommentBoard in {settings.ENVIRONMENT} mode")
    if settings.uses_insecure_secret:
        logger.warning("SECRET_KEY is not set; using an insecure development key")

    yield

    # Shutdown
    logger.info("Shutting down CommentBoard")
    await app.state.session_backend.close()


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Assemble the application.

    Args:
        settings: Configuration to use. Defaults to the environment.

    Returns:
        A ready-to-serve FastAPI app
    """
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title="CommentBoard",
        description="Server-rendered comments, stored per session.",
        version=__version__,
        docs_url="/api/docs",
        redoc_url=None,
        openapi_url="/api/openapi.json",
        lifespan=lifespan,
    )

    # -------------------------------------------------------------------------
    # Components
    # -------------------------------------------------------------------------

    renderer = Renderer()
    session_backend = create_session_backend(settings)

    app.state.settings = settings
    app.state.session_backend = session_backend
    app.state.comment_store = CommentStore()
    app.state.renderer = renderer
    app.state.error_translator = ErrorTranslator(renderer)

    # -------------------------------------------------------------------------
    # Middleware
    # -------------------------------------------------------------------------

    app.add_middleware(
        SessionMiddleware,
        backend=session_backend,
        signer=SessionTokenSigner(settings.SECRET_KEY, max_age=settings.SESSION_MAX_AGE),
        cookie_name=settings.SESSION_COOKIE_NAME,
        https_only=settings.is_production,
    )

    # -------------------------------------------------------------------------
    # Exception Handlers
    # -------------------------------------------------------------------------

    for exc_class in (HttpError, StarletteHTTPException, RequestValidationError, Exception):
        app.add_exception_handler(exc_class, app_exception_handler)

    # -------------------------------------------------------------------------
    # Routers
    # -------------------------------------------------------------------------

    app.include_router(views.router, tags=["Views"])
    app.include_router(comments.router, prefix="/api", tags=["Comments"])
    app.include_router(health.router, prefix="/api", tags=["Health"])

    app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

    return app


app = create_app()


def run() -> None:
    """Start the server on API_HOST:PORT."""
    import uvicorn

    settings = get_settings()
    logger.info(f"App listening at port: {settings.PORT}")
    uvicorn.run(app, host=settings.API_HOST, port=settings.PORT)
