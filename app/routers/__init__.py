# =============================================================================
# app/routers/ - Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - views.py: Server-rendered pages (/ and /comments)
# - comments.py: Comment API endpoints (/api/comments)
# - health.py: Health check endpoints
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import comments
from . import health
from . import views

__all__ = [
    "comments",
    "health",
    "views",
]
