# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# This package contains the web application:
# - main.py: create_app() assembly, logging, error handlers, entry point
# - config.py: Environment variable loading and settings
# - exceptions.py: Error classes and the ErrorTranslator
# - rendering.py: Jinja2-backed Renderer for server-rendered pages
# - sessions/: Signed session cookie and session middleware
# - routers/: Page and API endpoint definitions
#
# The app layer is thin - it handles HTTP concerns and delegates
# comment logic to the core/ package.
# =============================================================================

__version__ = "1.0.0"
