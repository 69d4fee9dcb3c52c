# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any app imports
# - Builds a fresh app (and in-memory session backend) per test
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# app.main builds a module-level app from the environment at import time

os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("SESSION_BACKEND", "memory")
os.environ.setdefault("SECRET_KEY", "test-secret-key-0123456789")

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app

TEST_SECRET_KEY = "test-secret-key-0123456789"


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def settings():
    """Development settings with the in-memory session backend."""
    return Settings(
        ENVIRONMENT="development",
        SECRET_KEY=TEST_SECRET_KEY,
        SESSION_BACKEND="memory",
    )


@pytest.fixture
def app(settings):
    """A freshly assembled application."""
    return create_app(settings)


@pytest.fixture
def client(app):
    """HTTP client carrying one session cookie jar."""
    return TestClient(app)


@pytest.fixture
def other_client(app):
    """A second client against the same app, i.e. a different session."""
    return TestClient(app)


@pytest.fixture
def cookie_name(settings):
    return settings.SESSION_COOKIE_NAME
