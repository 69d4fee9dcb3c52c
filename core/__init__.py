# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the comment logic:
# - models/: Pydantic schemas (Comment, SessionData)
# - services/: CommentStore, the session-scoped comment list
#
# Code in this package never touches requests or responses.
# This keeps the logic testable without an HTTP client.
# =============================================================================
