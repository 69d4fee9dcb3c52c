# =============================================================================
# app/sessions/middleware.py - Session Middleware
# =============================================================================
# Loads the caller's session before the route handler runs and persists it
# afterwards:
#
#   cookie -> verify token -> backend.get() -> request.state.session
#   handler runs, may mutate request.state.session
#   changed? -> backend.set() -> Set-Cookie (expiry refreshed on every write)
#
# Sessions are created lazily: a request that never changes its session
# doesn't create a stored entry or receive a cookie.
# =============================================================================

import logging

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from core.models.session import SessionData
from lib.session_backends import SessionBackend
from app.sessions.tokens import SessionTokenSigner, new_session_id

logger = logging.getLogger(__name__)


class SessionMiddleware(BaseHTTPMiddleware):
    """
    Attach a SessionData to every request as `request.state.session`.

    Args:
        app: The wrapped ASGI app
        backend: Session storage
        signer: Token signer for the session cookie
        cookie_name: Name of the session cookie
        https_only: Mark the cookie Secure
    """

    def __init__(
        self,
        app,
        backend: SessionBackend,
        signer: SessionTokenSigner,
        cookie_name: str,
        https_only: bool = False,
    ):
        super().__init__(app)
        self.backend = backend
        self.signer = signer
        self.cookie_name = cookie_name
        self.https_only = https_only

    async def _load(self, request: Request) -> tuple[str | None, SessionData]:
        token = request.cookies.get(self.cookie_name)
        if not token:
            return None, SessionData()

        session_id = self.signer.verify(token)
        if session_id is None:
            return None, SessionData()

        data = await self.backend.get(session_id)
        if data is None:
            return None, SessionData()

        return session_id, data

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        session_id, session = await self._load(request)
        snapshot = session.dump()
        request.state.session = session

        response = await call_next(request)

        if session.dump() == snapshot:
            return response

        if session_id is None:
            session_id = new_session_id()
            logger.debug("Created new session")

        await self.backend.set(session_id, session)
        response.set_cookie(
            self.cookie_name,
            self.signer.sign(session_id),
            max_age=self.backend.max_age,
            httponly=True,
            samesite="lax",
            secure=self.https_only,
        )
        return response
