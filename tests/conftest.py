# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up test environment variables before any imports
# - Swaps the stores and the clock through app.dependency_overrides
# =============================================================================

import os
from datetime import datetime, timezone

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("STORAGE_BACKEND", "memory")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

import pytest
from fastapi.testclient import TestClient

from app.auth import get_authorizer
from app.dependencies import get_clock, get_key_value_store, get_object_store
from app.main import app
from lib.clock import FixedClock, SystemClock
from lib.kv_store import InMemoryKeyValueStore
from lib.object_store import InMemoryObjectStore


# =============================================================================
# Fixtures
# =============================================================================

FIXED_NOW = datetime(2031, 3, 14, 15, 9, 26, 535000, tzinfo=timezone.utc)


@pytest.fixture
def kv_store():
    """Empty in-memory key-value store."""
    return InMemoryKeyValueStore()


@pytest.fixture
def object_store():
    """Empty in-memory object store."""
    return InMemoryObjectStore()


@pytest.fixture
def fixed_clock():
    """Clock pinned to FIXED_NOW."""
    return FixedClock(FIXED_NOW)


@pytest.fixture
def make_client(kv_store, object_store):
    """
    Build a TestClient with fresh stores.

    Pass a clock to pin time; the system clock is used otherwise.
    Overrides are cleared after the test.
    """

    def _make(clock=None, authorizer=None) -> TestClient:
        app.dependency_overrides[get_key_value_store] = lambda: kv_store
        app.dependency_overrides[get_object_store] = lambda: object_store
        app.dependency_overrides[get_clock] = lambda: clock or SystemClock()
        if authorizer is not None:
            app.dependency_overrides[get_authorizer] = lambda: authorizer
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()


@pytest.fixture
def client(make_client):
    """TestClient on the system clock."""
    return make_client()


@pytest.fixture
def fixed_client(make_client, fixed_clock):
    """TestClient on the fixed clock."""
    return make_client(clock=fixed_clock)


@pytest.fixture
def png_bytes():
    """A 100 KB payload with a PNG signature."""
    return b"\x89PNG\r\n\x1a\n" + os.urandom(100 * 1024 - 8)
