# =============================================================================
# core/services/comment_service.py - Comment Store
# =============================================================================
# Session-scoped comment storage. The comments live inside the caller's
# SessionData; this service only knows how to read and append to them.
# Persisting the session is the session middleware's job.
# =============================================================================

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Callable

from app.exceptions import ValidationError
from core.models.comment import Comment
from core.models.session import SessionData

logger = logging.getLogger(__name__)

EMPTY_COMMENT_MESSAGE = "Empty comments not allowed"
INVALID_TEXT_MESSAGE = "Comment text must be valid Unicode"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class CommentStore:
    """
    Ordered, append-only comment list kept in a session.

    Args:
        clock: Returns the timestamp assigned to new comments.
               Defaults to the current UTC time.
    """

    def __init__(self, clock: Callable[[], datetime] = utc_now):
        self.clock = clock

    def list(self, session: SessionData) -> list[Comment]:
        """
        Return the session's comments in insertion order.

        Never fails; a session that has no comments yet yields an empty list.
        The returned list is a copy, so callers can't reorder the session.
        """
        return list(session.comments or [])

    def ensure(self, session: SessionData) -> list[Comment]:
        """Like list(), but initializes an empty sequence in the session."""
        if session.comments is None:
            session.comments = []
        return self.list(session)

    def append(self, session: SessionData, text: Any) -> Comment:
        """
        Create a comment and append it to the session.

        Args:
            session: The caller's session
            text: Raw comment text from the request

        Returns:
            The created Comment

        Raises:
            ValidationError: If text is missing, not a string, blank, or
                not encodable as UTF-8. The session is left untouched.
        """
        if not isinstance(text, str) or not text.strip():
            raise ValidationError(EMPTY_COMMENT_MESSAGE)

        try:
            text.encode("utf-8")
        except UnicodeEncodeError:
            raise ValidationError(INVALID_TEXT_MESSAGE) from None

        comment = Comment(date=self.clock(), text=text)

        if session.comments is None:
            session.comments = []
        session.comments.append(comment)

        logger.debug(f"Appended comment #{len(session.comments)} to session")
        return comment
