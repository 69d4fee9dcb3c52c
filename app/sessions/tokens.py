# =============================================================================
# app/sessions/tokens.py - Signed Session Tokens
# =============================================================================
# The session cookie holds an HS256 JWT whose "sid" claim is the session id.
# The token is opaque to the client; tampered, expired or foreign tokens
# simply fail to verify and the request gets a fresh session.
#
# Usage:
#   signer = SessionTokenSigner(secret_key, max_age=86400)
#   token = signer.sign(session_id)
#   session_id = signer.verify(token)   # str | None
# =============================================================================

import logging
import secrets
import time

from jose import jwt, JWTError, ExpiredSignatureError

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"


def new_session_id() -> str:
    """Generate an unguessable session id."""
    return secrets.token_urlsafe(24)


class SessionTokenSigner:
    """Signs and verifies session ids with a shared secret."""

    def __init__(self, secret_key: str, max_age: int):
        self.secret_key = secret_key
        self.max_age = max_age

    def sign(self, session_id: str) -> str:
        now = int(time.time())
        claims = {
            "sid": session_id,
            "iat": now,
            "exp": now + self.max_age,
        }
        return jwt.encode(claims, self.secret_key, algorithm=ALGORITHM)

    def verify(self, token: str) -> str | None:
        """
        Return the session id carried by a token.

        Returns None for anything that isn't a valid, unexpired token
        signed with our key.
        """
        try:
            claims = jwt.decode(token, self.secret_key, algorithms=[ALGORITHM])
        except ExpiredSignatureError:
            logger.debug("Session token has expired")
            return None
        except JWTError as e:
            logger.debug(f"Session token rejected: {e}")
            return None

        session_id = claims.get("sid")
        if not isinstance(session_id, str) or not session_id:
            logger.debug("Session token missing 'sid' claim")
            return None
        return session_id
