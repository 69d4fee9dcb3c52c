# =============================================================================
# core/services/ - Business Logic Services
# =============================================================================

from .comment_service import CommentStore, EMPTY_COMMENT_MESSAGE, INVALID_TEXT_MESSAGE

__all__ = [
    "CommentStore",
    "EMPTY_COMMENT_MESSAGE",
    "INVALID_TEXT_MESSAGE",
]
