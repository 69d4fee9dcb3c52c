# =============================================================================
# app/sessions/ - Cookie-backed Sessions
# =============================================================================
# - tokens.py: signs session ids into the cookie value (python-jose)
# - middleware.py: loads/persists request.state.session around each request
#
# Storage backends live in lib/session_backends.py.
# =============================================================================

from app.sessions.middleware import SessionMiddleware
from app.sessions.tokens import SessionTokenSigner, new_session_id

__all__ = [
    "SessionMiddleware",
    "SessionTokenSigner",
    "new_session_id",
]
