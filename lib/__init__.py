# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - session_backends.py: Pluggable session storage (in-memory, Redis)
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.session_backends import (
    InMemorySessionBackend,
    RedisSessionBackend,
    SessionBackend,
    create_session_backend,
)

__all__ = [
    "InMemorySessionBackend",
    "RedisSessionBackend",
    "SessionBackend",
    "create_session_backend",
]
