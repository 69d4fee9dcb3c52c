# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# - comment.py: Comment value record
# - session.py: SessionData, the per-client state persisted by a backend
# =============================================================================

from .comment import Comment
from .session import SessionData

__all__ = [
    "Comment",
    "SessionData",
]
